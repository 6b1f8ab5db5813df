from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import round_half_up
from ..core.constants import HOURS_PRECISION
from ..core.enums import AnomalyKind
from ..punches.model import PunchEvent


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class WorkSession:
    """Derived (never persisted): one paired arrival/departure."""

    work_date: date
    arrival: datetime
    departure: datetime
    hours: float

    @classmethod
    def between(cls, arrival: datetime, departure: datetime) -> "WorkSession":
        # Attributed to the arrival's date even when it crosses midnight.
        return cls(
            work_date=arrival.date(),
            arrival=arrival,
            departure=departure,
            hours=(departure - arrival).total_seconds() / 3600,
        )

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "arrival": _iso(self.arrival),
            "departure": _iso(self.departure),
            "hours": round_half_up(self.hours, HOURS_PRECISION),
        }


@dataclass(frozen=True)
class Anomaly:
    kind: AnomalyKind
    event_id: int
    timestamp: datetime
    user_id: int

    @classmethod
    def of(cls, kind: AnomalyKind, event: PunchEvent) -> "Anomaly":
        return cls(kind=kind, event_id=event.event_id, timestamp=event.timestamp, user_id=event.user_id)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "eventId": self.event_id,
            "timestamp": _iso(self.timestamp),
            "userId": self.user_id,
        }


@dataclass(frozen=True)
class Reconstruction:
    sessions: tuple[WorkSession, ...] = ()
    anomalies: tuple[Anomaly, ...] = ()
    open_arrival: Optional[PunchEvent] = None

    @property
    def has_open_session(self) -> bool:
        return self.open_arrival is not None

    @property
    def total_hours(self) -> float:
        return sum(s.hours for s in self.sessions)
