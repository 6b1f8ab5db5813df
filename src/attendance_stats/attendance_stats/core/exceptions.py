class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "ValidationError"


class InvalidRangeError(ValidationError):
    """Raised when a date range ends before it starts."""

    kind = "InvalidRange"


class HierarchyError(ValidationError):
    """Raised when users/teams reference a manager that is not a manager."""

    kind = "InvalidHierarchy"


class NotFoundError(DomainError):
    """Raised when the requested scope does not exist in the source data."""

    kind = "NotFound"


class UnknownUserError(NotFoundError):
    kind = "UnknownUser"

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UnknownTeamError(NotFoundError):
    kind = "UnknownTeam"

    def __init__(self, team_id: int):
        super().__init__(f"Team {team_id} not found")
        self.team_id = team_id


class DataSourceError(DomainError):
    """Raised when the read-only data source cannot be queried."""

    kind = "DataSourceError"


class DataSourceTimeoutError(DataSourceError):
    kind = "DataSourceTimeout"
