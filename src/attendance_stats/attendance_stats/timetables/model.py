from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_time_of_day
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftSchedule:
    """Domain entity: the shift a team works (a Timetable in the source system)."""

    shift_start: time
    shift_end: time
    timetable_id: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ShiftSchedule":
        """Build from ``{shiftStart, shiftEnd}`` (``Shift_start``/``Shift_end`` also accepted)."""

        start = record.get("shiftStart", record.get("Shift_start"))
        end = record.get("shiftEnd", record.get("Shift_end"))
        raw_id = record.get("id")
        try:
            return cls(
                shift_start=parse_time_of_day(start),
                shift_end=parse_time_of_day(end),
                timetable_id=int(raw_id) if raw_id is not None else None,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed timetable record {dict(record)!r}: {e}") from e
