from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.exceptions import InvalidRangeError, ValidationError
from .datetime_utils import parse_iso_date


@dataclass(frozen=True)
class DateRange:
    """Inclusive UTC date range; either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        if self.start and self.end and self.end < self.start:
            raise InvalidRangeError(f"end date {self.end.isoformat()} precedes start date {self.start.isoformat()}")

    @classmethod
    def from_params(cls, start_date: Optional[str] = None, end_date: Optional[str] = None) -> "DateRange":
        try:
            start = parse_iso_date(start_date) if start_date else None
            end = parse_iso_date(end_date) if end_date else None
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Dates must be YYYY-MM-DD, got start={start_date!r} end={end_date!r}") from e
        return cls(start=start, end=end)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: date) -> bool:
        if self.start and day < self.start:
            return False
        if self.end and day > self.end:
            return False
        return True

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }
