from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftSchedule


class TimetableRepository(Protocol):
    def get_by_id(self, timetable_id: int) -> Optional[ShiftSchedule]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ShiftSchedule]:
        raise NotImplementedError
