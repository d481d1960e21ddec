import os

from .config import payroll_overrides_from_env

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

PAYROLL = payroll_overrides_from_env()
