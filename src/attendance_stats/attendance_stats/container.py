from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DatabaseConnection, as_db_config
from .punches.mysql_punch_repository import MySQLPunchRepository
from .query.service import AttendanceStatisticsService
from .rollup.rules.factory import active_manager_rule
from .rollup.service import AdminStatisticsBuilder
from .sessions.factory import ReconstructionPolicyFactory
from .sessions.reconstructor import SessionReconstructor
from .settings import StatsSettings
from .statistics.aggregator import StatisticsAggregator
from .statistics.punctuality import ArrivalClassifier
from .teams.mysql_team_repository import MySQLTeamRepository
from .timetables.mysql_timetable_repository import MySQLTimetableRepository
from .users.mysql_user_repository import MySQLUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    punches_repo: MySQLPunchRepository
    users_repo: MySQLUserRepository
    teams_repo: MySQLTeamRepository
    timetables_repo: MySQLTimetableRepository

    stats_service: AttendanceStatisticsService


def build_reconstructor(settings: StatsSettings) -> SessionReconstructor:
    policies = ReconstructionPolicyFactory()
    return SessionReconstructor(
        duplicate_arrival=policies.duplicate_arrival(settings.duplicate_arrival_policy),
        open_session=policies.open_session(settings.open_session_policy),
    )


def build_container(settings: StatsSettings) -> Container:
    conn = DatabaseConnection.get_instance(as_db_config(settings.db_config))

    punches_repo = MySQLPunchRepository(conn)
    users_repo = MySQLUserRepository(conn)
    teams_repo = MySQLTeamRepository(conn)
    timetables_repo = MySQLTimetableRepository(conn)

    stats_service = AttendanceStatisticsService(
        punches_repo,
        users_repo,
        teams_repo,
        timetables_repo,
        reconstructor=build_reconstructor(settings),
        aggregator=StatisticsAggregator(classifier=ArrivalClassifier(grace_minutes=settings.late_grace_minutes)),
        admin_builder=AdminStatisticsBuilder(active_manager_rule=active_manager_rule(settings.active_manager_rule)),
        max_workers=settings.max_workers,
        validate_hierarchy=settings.validate_hierarchy,
    )

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        users_repo=users_repo,
        teams_repo=teams_repo,
        timetables_repo=timetables_repo,
        stats_service=stats_service,
    )
