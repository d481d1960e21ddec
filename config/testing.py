DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Tests run against the documented defaults only.
PAYROLL = {}
