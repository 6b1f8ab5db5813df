from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import round_half_up
from ..core.constants import HOURS_PRECISION
from ..sessions.model import Anomaly, WorkSession
from ..timetables.model import ShiftSchedule
from ..users.model import User
from .model import UserStatistics
from .punctuality import ArrivalClassifier, punctuality_rate

logger = logging.getLogger(__name__)


class StatisticsAggregator:
    def __init__(self, *, classifier: Optional[ArrivalClassifier] = None):
        self._classifier = classifier or ArrivalClassifier()

    def compute(
        self,
        user: User,
        sessions: Sequence[WorkSession],
        schedule: Optional[ShiftSchedule] = None,
        *,
        anomalies: Sequence[Anomaly] = (),
    ) -> UserStatistics:
        total_hours = round_half_up(sum(s.hours for s in sessions), HOURS_PRECISION)
        total_days = len({s.work_date for s in sessions})
        average = round_half_up(total_hours / total_days, HOURS_PRECISION) if total_days > 0 else 0.0

        rate: Optional[int] = None
        late: Optional[int] = None
        if schedule is None:
            logger.debug("User %s has no timetable, punctuality omitted", user.user_id)
        elif sessions:
            on_time = self._classifier.on_time_count(sessions, schedule)
            rate = punctuality_rate(on_time, len(sessions))
            late = len(sessions) - on_time

        return UserStatistics(
            user=user,
            total_hours=total_hours,
            total_days=total_days,
            average_hours_per_day=average,
            punctuality_rate=rate,
            late_count=late,
            work_sessions=tuple(sessions),
            anomalies=tuple(anomalies),
        )
