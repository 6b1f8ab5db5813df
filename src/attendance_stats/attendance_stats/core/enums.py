from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role as stored in the source system."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class PunchKind(str, Enum):
    ARRIVAL = "Arrival"
    DEPARTURE = "Departure"


class AnomalyKind(str, Enum):
    """Non-fatal irregularities found while pairing punches."""

    UNMATCHED_DEPARTURE = "UnmatchedDeparture"
    DUPLICATE_ARRIVAL = "DuplicateArrival"
    OPEN_SESSION = "OpenSession"


class ArrivalStatus(str, Enum):
    ON_TIME = "ON_TIME"
    LATE = "LATE"


class PunctualityLabel(str, Enum):
    """Display label derived from a punctuality rate."""

    EXCELLENT = "Excellent"
    GOOD = "Bien"
    NEEDS_IMPROVEMENT = "À améliorer"
