import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local storage backend: "sqlite" (file) or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/hr_dashboard.sqlite3")

# Clock-ins after this HH:MM are marked late
LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:00")

# Re-read intervals for records written by other sessions (0 disables)
ATTENDANCE_POLL_SECONDS = float(os.getenv("ATTENDANCE_POLL_SECONDS", "5"))
LEAVE_POLL_SECONDS = float(os.getenv("LEAVE_POLL_SECONDS", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

DEBUG = True
