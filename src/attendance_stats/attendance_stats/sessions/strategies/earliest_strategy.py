from __future__ import annotations

from ...punches.model import PunchEvent
from .base import DuplicateArrivalStrategy


class KeepEarliestArrivalStrategy(DuplicateArrivalStrategy):
    """First arrival stays pending; repeats are ignored."""

    def resolve(self, *, pending: PunchEvent, incoming: PunchEvent) -> PunchEvent:
        return pending
