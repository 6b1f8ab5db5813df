from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import PunchEvent
from .repository import PunchRepository


def _day_start(value: date) -> datetime:
    return datetime.combine(value, time.min)


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_users(
        self,
        user_ids: Sequence[int],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[PunchEvent]:
        if not user_ids:
            return []

        clauses = [f"id_user IN ({in_clause(user_ids)})"]
        params: list[object] = [int(u) for u in user_ids]

        if start is not None:
            clauses.append("timestamp >= %s")
            params.append(_day_start(start))
        if end is not None:
            clauses.append("timestamp < %s")
            params.append(_day_start(end + timedelta(days=1)))

        return self._select(" AND ".join(clauses), params)

    def list_between(self, *, start: date, end: date) -> Sequence[PunchEvent]:
        return self._select(
            "timestamp >= %s AND timestamp < %s",
            [_day_start(start), _day_start(end + timedelta(days=1))],
        )

    def _select(self, where: str, params: list[object]) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, timestamp, type, id_user
                FROM TimeRecording
                WHERE {where}
                ORDER BY id_user ASC, timestamp ASC, id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                PunchEvent.from_record(
                    {
                        "id": r["id"],
                        # DATETIME columns hold UTC wall-clock values.
                        "timestamp": r["timestamp"].replace(tzinfo=timezone.utc)
                        if isinstance(r["timestamp"], datetime)
                        else r["timestamp"],
                        "type": r["type"],
                        "id_user": r["id_user"],
                    }
                )
                for r in rows
            ]
