import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
MAX_WORKERS = int(os.getenv("MAX_WORKERS", "8"))

DUPLICATE_ARRIVAL_POLICY = os.getenv("DUPLICATE_ARRIVAL_POLICY", "latest")
OPEN_SESSION_POLICY = os.getenv("OPEN_SESSION_POLICY", "exclude")
ACTIVE_MANAGER_RULE = os.getenv("ACTIVE_MANAGER_RULE", "open_session_report")

VALIDATE_HIERARCHY = bool(int(os.getenv("VALIDATE_HIERARCHY", "0")))
