import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/hr_dashboard.sqlite3")

LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:00")
ATTENDANCE_POLL_SECONDS = float(os.getenv("ATTENDANCE_POLL_SECONDS", "5"))
LEAVE_POLL_SECONDS = float(os.getenv("LEAVE_POLL_SECONDS", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

DEBUG = False
