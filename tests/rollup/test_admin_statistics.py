from __future__ import annotations

from datetime import date, datetime, timezone

from src.attendance_stats.attendance_stats.core.enums import PunchKind, Role
from src.attendance_stats.attendance_stats.punches.model import PunchEvent
from src.attendance_stats.attendance_stats.rollup.rules.base import OrganizationView
from src.attendance_stats.attendance_stats.rollup.rules.factory import active_manager_rule
from src.attendance_stats.attendance_stats.rollup.rules.manages_team_rule import ManagesTeamRule
from src.attendance_stats.attendance_stats.rollup.service import AdminStatisticsBuilder
from src.attendance_stats.attendance_stats.teams.model import Team
from src.attendance_stats.attendance_stats.users.model import User

TODAY = date(2026, 1, 6)


def user(user_id: int, role: Role, manager_id=None) -> User:
    return User(user_id=user_id, name=f"U{user_id}", surname="S", email=f"u{user_id}@example.com", role=role, manager_id=manager_id)


USERS = [
    user(1, Role.ADMIN),
    user(2, Role.MANAGER),
    user(3, Role.MANAGER),
    user(4, Role.EMPLOYEE, manager_id=2),
    user(5, Role.EMPLOYEE, manager_id=2),
    user(6, Role.EMPLOYEE),
    user(7, Role.MANAGER),
]

TEAMS = [
    Team(team_id=10, name="Support", manager_id=2, timetable_id=100, member_ids=(4, 5)),
    Team(team_id=11, name="Ops", manager_id=3, member_ids=(6,)),
    Team(team_id=12, name="New", manager_id=3),
]


def event(event_id: int, user_id: int, kind: PunchKind, hour: int) -> PunchEvent:
    return PunchEvent(event_id=event_id, timestamp=datetime(2026, 1, 6, hour, tzinfo=timezone.utc), kind=kind, user_id=user_id)


TODAY_EVENTS = [
    event(1, 4, PunchKind.ARRIVAL, 8),
    event(2, 5, PunchKind.ARRIVAL, 8),
    event(3, 5, PunchKind.DEPARTURE, 11),
    event(4, 6, PunchKind.DEPARTURE, 9),
]


def build(builder: AdminStatisticsBuilder, present=frozenset({4})):
    return builder.build(
        users=USERS,
        teams=TEAMS,
        timetable_count=1,
        today=TODAY,
        today_events=TODAY_EVENTS,
        present_user_ids=present,
    )


def test_admin_counters():
    stats = build(AdminStatisticsBuilder())

    assert stats.total_users == 7
    assert stats.total_teams == 3
    assert stats.total_timetables == 1
    assert stats.roles.to_dict() == {"managers": 3, "employees": 3, "admins": 1}
    assert stats.today_recordings == 4
    assert stats.currently_present == 1
    assert stats.teams_without_timetable == 2
    # Team 12 has no members and is left out: (2 + 1) / 2
    assert stats.avg_team_size == 1.5


def test_default_rule_counts_managers_with_present_reports():
    stats = build(AdminStatisticsBuilder())

    assert stats.active_managers == 1
    assert stats.inactive_managers == 2


def test_manages_team_rule_counts_team_owners():
    stats = build(AdminStatisticsBuilder(active_manager_rule=ManagesTeamRule()))

    assert stats.active_managers == 2
    assert stats.inactive_managers == 1


def test_nobody_present_means_no_active_manager():
    stats = build(AdminStatisticsBuilder(), present=frozenset())

    assert stats.currently_present == 0
    assert stats.active_managers == 0
    assert stats.inactive_managers == 3


def test_direct_reports_include_team_members_and_named_reports():
    org = OrganizationView(users=USERS, teams=TEAMS, present_user_ids=frozenset())

    assert org.direct_reports(2) == frozenset({4, 5})
    assert org.direct_reports(3) == frozenset({6})
    assert org.direct_reports(7) == frozenset()


def test_rule_factory():
    assert isinstance(active_manager_rule("manages_team"), ManagesTeamRule)


def test_to_dict_keys():
    out = build(AdminStatisticsBuilder()).to_dict()

    assert out["roles"] == {"managers": 3, "employees": 3, "admins": 1}
    assert out["avgTeamSize"] == 1.5
    assert set(out) == {
        "totalUsers",
        "totalTeams",
        "totalTimetables",
        "roles",
        "todayRecordings",
        "currentlyPresent",
        "teamsWithoutTimetable",
        "avgTeamSize",
        "activeManagers",
        "inactiveManagers",
    }
