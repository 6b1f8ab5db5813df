from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PunctualityLabel
from ..sessions.model import Anomaly, WorkSession
from ..users.model import User
from .punctuality import punctuality_label


@dataclass(frozen=True)
class UserStatistics:
    """Derived per-user statistics for one period."""

    user: User
    total_hours: float
    total_days: int
    average_hours_per_day: float
    punctuality_rate: Optional[int] = None
    late_count: Optional[int] = None
    work_sessions: tuple[WorkSession, ...] = ()
    anomalies: tuple[Anomaly, ...] = ()

    @property
    def punctuality_label(self) -> Optional[PunctualityLabel]:
        if self.punctuality_rate is None:
            return None
        return punctuality_label(self.punctuality_rate)

    def to_dict(self) -> dict:
        out = {
            "user": self.user.to_ref(),
            "totalHours": self.total_hours,
            "totalDays": self.total_days,
            "averageHoursPerDay": self.average_hours_per_day,
            "workSessions": [s.to_dict() for s in self.work_sessions],
            "anomalies": [a.to_dict() for a in self.anomalies],
        }
        if self.punctuality_rate is not None:
            out["punctualityRate"] = self.punctuality_rate
            out["punctualityLabel"] = self.punctuality_label.value
            out["lateCount"] = self.late_count
        return out
