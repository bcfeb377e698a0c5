SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

FIRST_DAY_OF_WEEK = 1
TIMESHEET_RECIPIENTS = "timesheets@example.com"
