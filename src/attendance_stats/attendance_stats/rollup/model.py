from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.datetime_utils import round_half_up
from ..core.constants import HOURS_PRECISION
from ..statistics.model import UserStatistics


def _dec(value: float) -> Decimal:
    return Decimal(repr(value))


@dataclass(frozen=True)
class TeamRollup:
    """Partial reduction over members.

    Decimal sums are exact, so merging partials in any order (or on any
    worker) yields the same aggregate.
    """

    members: int = 0
    hours_sum: Decimal = Decimal(0)
    days_sum: Decimal = Decimal(0)
    daily_average_sum: Decimal = Decimal(0)

    @classmethod
    def of(cls, stats: UserStatistics) -> "TeamRollup":
        return cls(
            members=1,
            hours_sum=_dec(stats.total_hours),
            days_sum=Decimal(stats.total_days),
            daily_average_sum=_dec(stats.average_hours_per_day),
        )

    def merge(self, other: "TeamRollup") -> "TeamRollup":
        return TeamRollup(
            members=self.members + other.members,
            hours_sum=self.hours_sum + other.hours_sum,
            days_sum=self.days_sum + other.days_sum,
            daily_average_sum=self.daily_average_sum + other.daily_average_sum,
        )

    def finalize(self) -> "TeamStatsAggregated":
        if self.members == 0:
            return TeamStatsAggregated()
        return TeamStatsAggregated(
            total_members=self.members,
            total_hours=round_half_up(float(self.hours_sum), HOURS_PRECISION),
            average_days_worked=round_half_up(float(self.days_sum / self.members), HOURS_PRECISION),
            average_hours_per_day=round_half_up(float(self.daily_average_sum / self.members), HOURS_PRECISION),
        )


@dataclass(frozen=True)
class TeamStatsAggregated:
    total_members: int = 0
    total_hours: float = 0.0
    average_days_worked: float = 0.0
    average_hours_per_day: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalMembers": self.total_members,
            "totalHours": self.total_hours,
            "averageDaysWorked": self.average_days_worked,
            "averageHoursPerDay": self.average_hours_per_day,
        }


@dataclass(frozen=True)
class RoleCounts:
    managers: int = 0
    employees: int = 0
    admins: int = 0

    def to_dict(self) -> dict:
        return {"managers": self.managers, "employees": self.employees, "admins": self.admins}


@dataclass(frozen=True)
class AdminStatistics:
    total_users: int
    total_teams: int
    total_timetables: int
    roles: RoleCounts
    today_recordings: int
    currently_present: int
    teams_without_timetable: int
    avg_team_size: float
    active_managers: int
    inactive_managers: int

    def to_dict(self) -> dict:
        return {
            "totalUsers": self.total_users,
            "totalTeams": self.total_teams,
            "totalTimetables": self.total_timetables,
            "roles": self.roles.to_dict(),
            "todayRecordings": self.today_recordings,
            "currentlyPresent": self.currently_present,
            "teamsWithoutTimetable": self.teams_without_timetable,
            "avgTeamSize": self.avg_team_size,
            "activeManagers": self.active_managers,
            "inactiveManagers": self.inactive_managers,
        }
