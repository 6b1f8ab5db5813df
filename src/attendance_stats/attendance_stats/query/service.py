from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..common.date_range import DateRange
from ..common.datetime_utils import now_utc
from ..common.validators import require_positive_id
from ..core.constants import DEFAULT_MAX_WORKERS
from ..core.exceptions import UnknownTeamError, UnknownUserError
from ..punches.model import PunchEvent
from ..punches.repository import PunchRepository
from ..rollup.service import AdminStatisticsBuilder, aggregate_team
from ..sessions.reconstructor import SessionReconstructor
from ..statistics.aggregator import StatisticsAggregator
from ..statistics.model import UserStatistics
from ..teams.hierarchy import ensure_valid_hierarchy
from ..teams.model import Team
from ..teams.repository import TeamRepository
from ..timetables.model import ShiftSchedule
from ..timetables.repository import TimetableRepository
from ..users.model import User
from ..users.repository import UserRepository
from .model import AdminStatsResponse, TeamStatsResponse, UsersStatsResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _group_by_user(events: Iterable[PunchEvent]) -> dict[int, list[PunchEvent]]:
    grouped: dict[int, list[PunchEvent]] = defaultdict(list)
    for e in events:
        grouped[e.user_id].append(e)
    return grouped


def _schedule_from_teams(user_id: int, teams: Sequence[Team], timetables: dict[int, ShiftSchedule]) -> Optional[ShiftSchedule]:
    # A user in several teams follows the lowest-id team that has a timetable.
    for team in sorted(teams, key=lambda t: t.team_id):
        if user_id in team.member_ids and team.timetable_id in timetables:
            return timetables[team.timetable_id]
    return None


class AttendanceStatisticsService:
    """Read-only query facade.

    Each call fetches one snapshot from the repositories, then computes
    everything in memory. Nothing is written back, so calls can run
    concurrently and repeat with identical results.
    """

    def __init__(
        self,
        punches: PunchRepository,
        users: UserRepository,
        teams: TeamRepository,
        timetables: TimetableRepository,
        *,
        reconstructor: Optional[SessionReconstructor] = None,
        aggregator: Optional[StatisticsAggregator] = None,
        admin_builder: Optional[AdminStatisticsBuilder] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        validate_hierarchy: bool = False,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._punches = punches
        self._users = users
        self._teams = teams
        self._timetables = timetables
        self._reconstructor = reconstructor or SessionReconstructor()
        self._aggregator = aggregator or StatisticsAggregator()
        self._admin_builder = admin_builder or AdminStatisticsBuilder()
        self._max_workers = max(1, int(max_workers))
        self._validate_hierarchy = bool(validate_hierarchy)
        self._clock = clock

    def get_user_statistics(self, user_id: int, date_range: Optional[DateRange] = None) -> UserStatistics:
        user_id = require_positive_id(user_id, "user_id")
        period = date_range or DateRange()

        user = self._users.get_by_id(user_id)
        if not user:
            raise UnknownUserError(user_id)

        if self._validate_hierarchy:
            self._check_hierarchy([user_id], self._teams.list_for_user(user_id))

        schedule = self._schedule_for_user(user_id)
        events = self._punches.list_for_users([user_id], start=period.start, end=period.end)
        return self._compute(user, events, schedule, period)

    def get_users_statistics(self, user_ids: Iterable[int], date_range: Optional[DateRange] = None) -> UsersStatsResponse:
        ids = sorted({require_positive_id(u, "user_id") for u in user_ids})
        period = date_range or DateRange()

        users = {u.user_id: u for u in self._users.list_by_ids(ids)}
        for uid in ids:
            if uid not in users:
                raise UnknownUserError(uid)

        teams = self._teams.list_all()
        if self._validate_hierarchy:
            self._check_hierarchy(ids, [t for t in teams if not set(ids).isdisjoint(t.member_ids)])
        timetables = self._timetables_by_id()
        events = _group_by_user(self._punches.list_for_users(ids, start=period.start, end=period.end))

        statistics = self._map_users(
            lambda uid: self._compute(users[uid], events.get(uid, []), _schedule_from_teams(uid, teams, timetables), period),
            ids,
        )
        return UsersStatsResponse(statistics=tuple(statistics), period=period)

    def get_team_statistics(self, team_id: int, date_range: Optional[DateRange] = None) -> TeamStatsResponse:
        team_id = require_positive_id(team_id, "team_id")
        period = date_range or DateRange()

        team = self._teams.get_by_id(team_id)
        if not team:
            raise UnknownTeamError(team_id)

        if self._validate_hierarchy:
            self._check_hierarchy(team.member_ids, [team])

        member_ids = sorted(set(team.member_ids))
        members = {u.user_id: u for u in self._users.list_by_ids(member_ids)}
        missing = [uid for uid in member_ids if uid not in members]
        if missing:
            logger.warning("Team %s lists unknown members %s, skipped", team_id, missing)
            member_ids = [uid for uid in member_ids if uid in members]

        manager = self._users.get_by_id(team.manager_id)
        schedule = self._timetables.get_by_id(team.timetable_id) if team.has_timetable else None
        events = _group_by_user(self._punches.list_for_users(member_ids, start=period.start, end=period.end))

        statistics = self._map_users(
            lambda uid: self._compute(members[uid], events.get(uid, []), schedule, period),
            member_ids,
        )
        logger.info("Team %s statistics computed for %d members", team_id, len(statistics))
        return TeamStatsResponse(
            team=team,
            manager=manager,
            statistics=tuple(statistics),
            aggregated=aggregate_team(statistics),
            period=period,
        )

    def get_admin_statistics(self) -> AdminStatsResponse:
        today = self._clock().date()

        users = list(self._users.list_all())
        teams = list(self._teams.list_all())
        timetables = self._timetables.list_all()
        if self._validate_hierarchy:
            ensure_valid_hierarchy(users, teams)

        today_events = list(self._punches.list_between(start=today, end=today))
        by_user = _group_by_user(today_events)

        open_flags = self._map_users(
            lambda uid: self._reconstructor.reconstruct(by_user[uid]).has_open_session,
            sorted(by_user),
        )
        present = frozenset(uid for uid, is_open in zip(sorted(by_user), open_flags) if is_open)

        statistics = self._admin_builder.build(
            users=users,
            teams=teams,
            timetable_count=len(timetables),
            today=today,
            today_events=today_events,
            present_user_ids=present,
        )
        return AdminStatsResponse(statistics=statistics, as_of=today)

    def _compute(
        self,
        user: User,
        events: Sequence[PunchEvent],
        schedule: Optional[ShiftSchedule],
        period: DateRange,
    ) -> UserStatistics:
        reconstruction = self._reconstructor.reconstruct(events, date_range=period)
        return self._aggregator.compute(user, reconstruction.sessions, schedule, anomalies=reconstruction.anomalies)

    def _check_hierarchy(self, user_ids: Sequence[int], teams: Sequence[Team]) -> None:
        ensure_valid_hierarchy(self._users.list_all(), teams, only_user_ids=set(user_ids))

    def _schedule_for_user(self, user_id: int) -> Optional[ShiftSchedule]:
        for team in sorted(self._teams.list_for_user(user_id), key=lambda t: t.team_id):
            if team.has_timetable:
                schedule = self._timetables.get_by_id(team.timetable_id)
                if schedule:
                    return schedule
        return None

    def _timetables_by_id(self) -> dict[int, ShiftSchedule]:
        return {t.timetable_id: t for t in self._timetables.list_all() if t.timetable_id is not None}

    def _map_users(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        # Per-user work is independent; results come back in input order.
        if self._max_workers <= 1 or len(items) <= 1:
            return [fn(i) for i in items]
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(items)), thread_name_prefix="stats") as pool:
            return list(pool.map(fn, items))
