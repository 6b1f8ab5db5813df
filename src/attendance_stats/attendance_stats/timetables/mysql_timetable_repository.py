from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ShiftSchedule
from .repository import TimetableRepository


class MySQLTimetableRepository(TimetableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, timetable_id: int) -> Optional[ShiftSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, Shift_start, Shift_end FROM Timetable WHERE id=%s",
                (int(timetable_id),),
            )
            r = fetchone(cur)
            return ShiftSchedule.from_record(r) if r else None

    def list_all(self) -> Sequence[ShiftSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, Shift_start, Shift_end FROM Timetable ORDER BY id")
            return [ShiftSchedule.from_record(r) for r in fetchall(cur)]
