import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Arrival counts as on time up to shift start + grace window
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
MAX_WORKERS = int(os.getenv("MAX_WORKERS", "4"))

# latest | earliest
DUPLICATE_ARRIVAL_POLICY = os.getenv("DUPLICATE_ARRIVAL_POLICY", "latest")
# exclude | close_at_midnight
OPEN_SESSION_POLICY = os.getenv("OPEN_SESSION_POLICY", "exclude")
# open_session_report | manages_team
ACTIVE_MANAGER_RULE = os.getenv("ACTIVE_MANAGER_RULE", "open_session_report")

VALIDATE_HIERARCHY = bool(int(os.getenv("VALIDATE_HIERARCHY", "1")))
