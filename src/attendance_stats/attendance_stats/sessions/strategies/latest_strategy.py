from __future__ import annotations

from ...punches.model import PunchEvent
from .base import DuplicateArrivalStrategy


class KeepLatestArrivalStrategy(DuplicateArrivalStrategy):
    """Most-recent-wins: the later arrival overwrites the pending one."""

    def resolve(self, *, pending: PunchEvent, incoming: PunchEvent) -> PunchEvent:
        return incoming
