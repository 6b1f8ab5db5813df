from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PunchEvent


class PunchRepository(Protocol):
    """Read-only access to the punch event log."""

    def list_for_users(
        self,
        user_ids: Sequence[int],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[PunchEvent]:
        """Events of the given users whose UTC date is within [start, end]."""

        raise NotImplementedError

    def list_between(self, *, start: date, end: date) -> Sequence[PunchEvent]:
        raise NotImplementedError
