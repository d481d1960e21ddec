"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
These are the documented fallbacks used when a deployment does not override
a value (see ``payroll.config.PayrollConfig``).
"""

DEFAULT_MONTHLY_BASE_SALARY = 17710.0
DEFAULT_WORKING_DAYS_PER_MONTH = 26
DEFAULT_STANDARD_DAILY_HOURS = 8.0

# Flat overtime rates in currency per hour.
DEFAULT_OT_RATE_REGULAR = 127.0
DEFAULT_OT_RATE_SUNDAY = 170.0
DEFAULT_OT_RATE_HOLIDAY = 170.0
DEFAULT_OT_RATE_EXTENDED = 255.0

DEFAULT_MEAL_ALLOWANCE = 150.0
DEFAULT_MEAL_ALLOWANCE_MIN_HOURS = 10.0

# Unpaid-leave proration divisor; independent from working days per month.
DEFAULT_LEAVE_DIVISOR_DAYS = 22

DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_QR_TOKEN_TTL_MINUTES = 15

DEFAULT_POSITION_SALARIES = {
    "Manager": 21000.0,
    "Cashier": 12000.0,
    "Driver": 16000.0,
    "Receptionist": 13000.0,
    "IT Support": 22000.0,
    "HR Officer": 17000.0,
}

EARTH_RADIUS_KM = 6371.0
