from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from ..common.date_range import DateRange
from ..core.enums import AnomalyKind
from ..core.exceptions import ValidationError
from ..punches.model import PunchEvent
from .model import Anomaly, Reconstruction, WorkSession
from .strategies.base import DuplicateArrivalStrategy, OpenSessionStrategy
from .strategies.latest_strategy import KeepLatestArrivalStrategy
from .strategies.open_session_strategy import ExcludeOpenSessionStrategy

logger = logging.getLogger(__name__)


class _State(str, Enum):
    AWAITING_ARRIVAL = "AwaitingArrival"
    AWAITING_DEPARTURE = "AwaitingDeparture"


class SessionReconstructor:
    """Turn one user's punch events into work sessions.

    Transitions:
    - AwaitingArrival + Arrival     -> pending arrival, AwaitingDeparture
    - AwaitingArrival + Departure   -> UnmatchedDeparture, event dropped
    - AwaitingDeparture + Arrival   -> DuplicateArrival on the dropped arrival, strategy picks the pending one
    - AwaitingDeparture + Departure -> emit session, AwaitingArrival
    - end of stream in AwaitingDeparture -> OpenSession

    Pure: the same events always give the same result, whatever order they
    arrive in, since they are sorted by (timestamp, kind, id) first. On a
    timestamp tie the Arrival sorts before the Departure.
    """

    def __init__(
        self,
        *,
        duplicate_arrival: Optional[DuplicateArrivalStrategy] = None,
        open_session: Optional[OpenSessionStrategy] = None,
    ):
        self._duplicate_arrival = duplicate_arrival or KeepLatestArrivalStrategy()
        self._open_session = open_session or ExcludeOpenSessionStrategy()

    def reconstruct(self, events: Iterable[PunchEvent], *, date_range: Optional[DateRange] = None) -> Reconstruction:
        ordered = sorted(events, key=lambda e: (e.timestamp, not e.is_arrival, e.event_id))

        user_ids = {e.user_id for e in ordered}
        if len(user_ids) > 1:
            raise ValidationError(f"Expected events of a single user, got users {sorted(user_ids)}")

        if date_range is not None and not date_range.is_unbounded:
            ordered = [e for e in ordered if date_range.contains(e.work_date)]

        state = _State.AWAITING_ARRIVAL
        pending: Optional[PunchEvent] = None
        sessions: list[WorkSession] = []
        anomalies: list[Anomaly] = []

        for event in ordered:
            if state == _State.AWAITING_ARRIVAL:
                if event.is_arrival:
                    pending = event
                    state = _State.AWAITING_DEPARTURE
                else:
                    anomalies.append(Anomaly.of(AnomalyKind.UNMATCHED_DEPARTURE, event))
                continue

            if event.is_arrival:
                kept = self._duplicate_arrival.resolve(pending=pending, incoming=event)
                # The anomaly points at the arrival that was dropped.
                dropped = pending if kept is event else event
                anomalies.append(Anomaly.of(AnomalyKind.DUPLICATE_ARRIVAL, dropped))
                pending = kept
                continue

            sessions.append(WorkSession.between(pending.timestamp, event.timestamp))
            pending = None
            state = _State.AWAITING_ARRIVAL

        if pending is not None:
            anomalies.append(Anomaly.of(AnomalyKind.OPEN_SESSION, pending))
            closed = self._open_session.close(pending=pending)
            if closed is not None:
                sessions.append(closed)

        if anomalies:
            logger.warning(
                "User %s: %d punch anomalies (%s)",
                next(iter(user_ids)),
                len(anomalies),
                ", ".join(sorted({a.kind.value for a in anomalies})),
            )

        return Reconstruction(sessions=tuple(sessions), anomalies=tuple(anomalies), open_arrival=pending)
