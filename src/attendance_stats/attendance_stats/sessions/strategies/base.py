from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...punches.model import PunchEvent
from ..model import WorkSession


class DuplicateArrivalStrategy(ABC):
    """Strategy Pattern: which arrival stays pending after a second Arrival."""

    @abstractmethod
    def resolve(self, *, pending: PunchEvent, incoming: PunchEvent) -> PunchEvent:
        raise NotImplementedError


class OpenSessionStrategy(ABC):
    """Strategy Pattern: what a trailing unmatched arrival turns into."""

    @abstractmethod
    def close(self, *, pending: PunchEvent) -> Optional[WorkSession]:
        raise NotImplementedError
