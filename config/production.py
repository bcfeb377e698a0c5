import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FIRST_DAY_OF_WEEK = int(os.getenv("FIRST_DAY_OF_WEEK", "1"))
TIMESHEET_RECIPIENTS = os.getenv("TIMESHEET_RECIPIENTS", "")
