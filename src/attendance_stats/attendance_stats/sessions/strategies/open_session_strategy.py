from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional

from ...punches.model import PunchEvent
from ..model import WorkSession
from .base import OpenSessionStrategy


class ExcludeOpenSessionStrategy(OpenSessionStrategy):
    """Open sessions are reported as anomalies and never counted."""

    def close(self, *, pending: PunchEvent) -> Optional[WorkSession]:
        return None


class CloseAtMidnightStrategy(OpenSessionStrategy):
    """Auto clock-out at the end of the arrival's UTC day."""

    def close(self, *, pending: PunchEvent) -> Optional[WorkSession]:
        arrival = pending.timestamp
        midnight = datetime.combine(arrival.date() + timedelta(days=1), time.min, tzinfo=arrival.tzinfo)
        return WorkSession.between(arrival, midnight)
