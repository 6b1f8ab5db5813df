from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import Team
from .repository import TeamRepository


class MySQLTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, team_id: int) -> Optional[Team]:
        teams = self._select("t.id=%s", [int(team_id)])
        return teams[0] if teams else None

    def list_all(self) -> Sequence[Team]:
        return self._select("1=1", [])

    def list_for_user(self, user_id: int) -> Sequence[Team]:
        return self._select(
            "t.id IN (SELECT id_team FROM TeamMember WHERE id_user=%s)",
            [int(user_id)],
        )

    def _select(self, where: str, params: list[object]) -> Sequence[Team]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT t.id, t.name, t.id_manager, t.id_timetable
                FROM Team t
                WHERE {where}
                ORDER BY t.id
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            if not rows:
                return []

            team_ids = [int(r["id"]) for r in rows]
            cur.execute(
                f"""
                SELECT id_team, id_user
                FROM TeamMember
                WHERE id_team IN ({in_clause(team_ids)})
                ORDER BY id_team, id_user
                """,
                tuple(team_ids),
            )
            members: dict[int, list[int]] = defaultdict(list)
            for m in fetchall(cur):
                members[int(m["id_team"])].append(int(m["id_user"]))

            return [
                Team(
                    team_id=int(r["id"]),
                    name=r["name"],
                    manager_id=int(r["id_manager"]),
                    timetable_id=int(r["id_timetable"]) if r.get("id_timetable") is not None else None,
                    member_ids=tuple(members.get(int(r["id"]), [])),
                )
                for r in rows
            ]
