from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..access.model import ChildOwnership
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import PresenceRow
from .repository import PresenceRepository


class MySQLPresenceRepository(PresenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_presence_rows(self, *, child_id: int, start_date: date, end_date: date) -> Sequence[PresenceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT child_id, work_date, duration_minutes
                FROM child_attendance
                WHERE child_id=%s AND status='present' AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (child_id, start_date, end_date),
            )
            return [
                PresenceRow(
                    child_id=int(r["child_id"]),
                    work_date=normalize_mysql_date(r["work_date"]),
                    duration_minutes=int(r["duration_minutes"]) if r.get("duration_minutes") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def get_child_ownership(self, child_id: int) -> Optional[ChildOwnership]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.child_id, c.parent_id, cl.assigned_teacher_id
                FROM children c
                LEFT JOIN classrooms cl ON cl.classroom_id = c.classroom_id
                WHERE c.child_id=%s
                """,
                (child_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            teacher_id = row.get("assigned_teacher_id")
            return ChildOwnership(
                child_id=int(row["child_id"]),
                parent_id=int(row["parent_id"]),
                teacher_id=int(teacher_id) if teacher_id is not None else None,
            )
