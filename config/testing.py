import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
    "connection_timeout": 2,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LATE_GRACE_MINUTES = 5
MAX_WORKERS = 2

DUPLICATE_ARRIVAL_POLICY = "latest"
OPEN_SESSION_POLICY = "exclude"
ACTIVE_MANAGER_RULE = "open_session_report"

VALIDATE_HIERARCHY = True
