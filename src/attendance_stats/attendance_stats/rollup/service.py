from __future__ import annotations

import logging
from datetime import date
from functools import reduce
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import round_half_up
from ..core.constants import AVG_TEAM_SIZE_PRECISION
from ..core.enums import Role
from ..punches.model import PunchEvent
from ..statistics.model import UserStatistics
from ..teams.model import Team
from ..users.model import User
from .model import AdminStatistics, RoleCounts, TeamRollup, TeamStatsAggregated
from .rules.base import ActiveManagerRule, OrganizationView
from .rules.open_session_rule import OpenSessionReportRule

logger = logging.getLogger(__name__)


def aggregate_team(stats: Iterable[UserStatistics]) -> TeamStatsAggregated:
    """Reduce member statistics; the member order never changes the result."""

    return reduce(TeamRollup.merge, (TeamRollup.of(s) for s in stats), TeamRollup()).finalize()


class AdminStatisticsBuilder:
    def __init__(self, *, active_manager_rule: Optional[ActiveManagerRule] = None):
        self._rule = active_manager_rule or OpenSessionReportRule()

    def build(
        self,
        *,
        users: Sequence[User],
        teams: Sequence[Team],
        timetable_count: int,
        today: date,
        today_events: Sequence[PunchEvent],
        present_user_ids: frozenset[int],
    ) -> AdminStatistics:
        roles = RoleCounts(
            managers=sum(1 for u in users if u.role == Role.MANAGER),
            employees=sum(1 for u in users if u.role == Role.EMPLOYEE),
            admins=sum(1 for u in users if u.role == Role.ADMIN),
        )

        # Teams without members are left out of the average.
        sizes = [t.size for t in teams if t.size > 0]
        avg_team_size = round_half_up(sum(sizes) / len(sizes), AVG_TEAM_SIZE_PRECISION) if sizes else 0.0

        org = OrganizationView(users=users, teams=teams, present_user_ids=present_user_ids)
        managers = [u for u in users if u.is_manager]
        active = sum(1 for m in managers if self._rule.is_active(m, org))

        stats = AdminStatistics(
            total_users=len(users),
            total_teams=len(teams),
            total_timetables=int(timetable_count),
            roles=roles,
            today_recordings=sum(1 for e in today_events if e.work_date == today),
            currently_present=len(present_user_ids),
            teams_without_timetable=sum(1 for t in teams if not t.has_timetable),
            avg_team_size=avg_team_size,
            active_managers=active,
            inactive_managers=len(managers) - active,
        )
        logger.info(
            "Admin statistics for %s: %d users, %d present, %d/%d managers active",
            today.isoformat(),
            stats.total_users,
            stats.currently_present,
            active,
            len(managers),
        )
        return stats
