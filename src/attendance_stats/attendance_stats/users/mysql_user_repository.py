from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import User
from .repository import UserRepository

_COLUMNS = "id, name, surname, email, role, id_manager"


def _to_user(r: dict) -> User:
    return User(
        user_id=int(r["id"]),
        name=r["name"],
        surname=r["surname"],
        email=r["email"],
        role=Role(r["role"]),
        manager_id=int(r["id_manager"]) if r.get("id_manager") is not None else None,
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM User WHERE id=%s", (int(user_id),))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def list_by_ids(self, user_ids: Sequence[int]) -> Sequence[User]:
        if not user_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM User WHERE id IN ({in_clause(user_ids)}) ORDER BY id",
                tuple(int(u) for u in user_ids),
            )
            return [_to_user(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM User ORDER BY id")
            return [_to_user(r) for r in fetchall(cur)]
