import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""

LATE_CUTOFF = "09:00"
ATTENDANCE_POLL_SECONDS = 0
LEAVE_POLL_SECONDS = 0

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

DEBUG = False
TESTING = True
