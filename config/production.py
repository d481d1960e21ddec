import os

from .config import payroll_overrides_from_env

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PAYROLL = payroll_overrides_from_env()
