from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import round_half_up
from ..core.constants import (
    DEFAULT_LATE_GRACE_MINUTES,
    PUNCTUALITY_EXCELLENT_THRESHOLD,
    PUNCTUALITY_GOOD_THRESHOLD,
)
from ..core.enums import ArrivalStatus, PunctualityLabel
from ..sessions.model import WorkSession
from ..timetables.model import ShiftSchedule


@dataclass(frozen=True)
class ArrivalClassifier:
    """On time when the arrival is no later than shift start + grace window."""

    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES

    def classify(self, arrival: datetime, schedule: ShiftSchedule) -> ArrivalStatus:
        shift_start = datetime.combine(arrival.date(), schedule.shift_start, tzinfo=arrival.tzinfo)
        if arrival <= shift_start + timedelta(minutes=self.grace_minutes):
            return ArrivalStatus.ON_TIME
        return ArrivalStatus.LATE

    def on_time_count(self, sessions: Sequence[WorkSession], schedule: ShiftSchedule) -> int:
        return sum(1 for s in sessions if self.classify(s.arrival, schedule) == ArrivalStatus.ON_TIME)


def punctuality_rate(on_time: int, total: int) -> Optional[int]:
    """Whole-number percentage, or None when there is nothing to rate."""
    if total <= 0:
        return None
    return int(round_half_up(on_time / total * 100))


def punctuality_label(rate: float) -> PunctualityLabel:
    if rate >= PUNCTUALITY_EXCELLENT_THRESHOLD:
        return PunctualityLabel.EXCELLENT
    if rate >= PUNCTUALITY_GOOD_THRESHOLD:
        return PunctualityLabel.GOOD
    return PunctualityLabel.NEEDS_IMPROVEMENT
