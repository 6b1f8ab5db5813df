from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.date_range import DateRange
from ..rollup.model import AdminStatistics, TeamStatsAggregated
from ..statistics.model import UserStatistics
from ..teams.model import Team
from ..users.model import User


@dataclass(frozen=True)
class UsersStatsResponse:
    statistics: tuple[UserStatistics, ...]
    period: DateRange

    def to_dict(self) -> dict:
        return {
            "statistics": [s.to_dict() for s in self.statistics],
            "period": self.period.to_dict(),
        }


@dataclass(frozen=True)
class TeamStatsResponse:
    team: Team
    manager: Optional[User]
    statistics: tuple[UserStatistics, ...]
    aggregated: TeamStatsAggregated
    period: DateRange

    def to_dict(self) -> dict:
        return {
            "team": {
                "id": self.team.team_id,
                "name": self.team.name,
                "manager": self.manager.to_ref() if self.manager else None,
            },
            "statistics": [s.to_dict() for s in self.statistics],
            "aggregated": self.aggregated.to_dict(),
            "period": self.period.to_dict(),
        }


@dataclass(frozen=True)
class AdminStatsResponse:
    statistics: AdminStatistics
    as_of: date

    def to_dict(self) -> dict:
        return {**self.statistics.to_dict(), "asOf": self.as_of.isoformat()}
