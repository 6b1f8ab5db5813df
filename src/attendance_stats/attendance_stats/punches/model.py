from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from ..common.datetime_utils import parse_iso_timestamp
from ..core.enums import PunchKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: one Arrival or Departure punch.

    Append-only in the source system; this package never mutates it.
    """

    event_id: int
    timestamp: datetime
    kind: PunchKind
    user_id: int

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    @property
    def is_arrival(self) -> bool:
        return self.kind == PunchKind.ARRIVAL

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PunchEvent":
        """Build from ``{id, timestamp, type, userId}`` (``id_user`` also accepted)."""

        user_id = record.get("userId", record.get("id_user"))
        try:
            return cls(
                event_id=int(record["id"]),
                timestamp=parse_iso_timestamp(record["timestamp"]),
                kind=PunchKind(record["type"]),
                user_id=int(user_id),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Malformed punch record {dict(record)!r}: {e}") from e
