"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_MAX_WORKERS = 4
DEFAULT_FETCH_TIMEOUT_SECONDS = 10

HOURS_PRECISION = 2
AVG_TEAM_SIZE_PRECISION = 1

PUNCTUALITY_EXCELLENT_THRESHOLD = 90
PUNCTUALITY_GOOD_THRESHOLD = 70

DEFAULT_DUPLICATE_ARRIVAL_POLICY = "latest"
DEFAULT_OPEN_SESSION_POLICY = "exclude"
DEFAULT_ACTIVE_MANAGER_RULE = "open_session_report"
