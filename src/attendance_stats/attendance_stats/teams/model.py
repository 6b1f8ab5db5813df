from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Team:
    """Domain entity: a team, its manager, its timetable and its members."""

    team_id: int
    name: str
    manager_id: int
    timetable_id: Optional[int] = None
    member_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def has_timetable(self) -> bool:
        return self.timetable_id is not None

    @property
    def size(self) -> int:
        return len(set(self.member_ids))
