import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Week partitioning: 0 = Sunday .. 6 = Saturday
FIRST_DAY_OF_WEEK = int(os.getenv("FIRST_DAY_OF_WEEK", "1"))
TIMESHEET_RECIPIENTS = os.getenv("TIMESHEET_RECIPIENTS", "timesheets@example.com")
