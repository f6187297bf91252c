"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

CURRENT_USER_KEY = "currentUser"
KNOWN_USERS_KEY = "knownUsers"
ATTENDANCE_KEY = "attendanceRecords"
LEAVE_KEY = "leaveRequests"
SALARY_KEY = "salaryRecords"

MIN_PASSWORD_LENGTH = 6
DEFAULT_LATE_CUTOFF = time(9, 0)
DEFAULT_POLL_SECONDS = 5.0

LEAVE_TYPES = ("Sick Leave", "Casual Leave", "Annual Leave")
DEPARTMENTS = ("Logistic", "Database", "HR")

IN_PROGRESS = "In progress"
UNKNOWN_EMPLOYEE = "Unknown"
