from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_many(self, entries: Sequence[Tuple[int, str, Optional[str]]]) -> List[int]:
        ids: List[int] = []
        if not entries:
            return ids
        with db_cursor(self._conn_factory) as (_, cur):
            for student_id, date, status in entries:
                cur.execute(
                    "INSERT INTO attendance(student_id, date, status) VALUES(%s,%s,%s)",
                    (student_id, date, status),
                )
                ids.append(int(cur.lastrowid))
        return ids

    def list_for_user(self, user_id: int, *, date: Optional[str] = None) -> Sequence[AttendanceEntry]:
        sql = """
            SELECT a.id, a.student_id, s.roll_number, s.name, a.date, a.status
            FROM attendance a
            JOIN students s ON s.id = a.student_id
            WHERE s.user_id=%s
        """
        params: list = [user_id]
        if date:
            sql += " AND a.date=%s"
            params.append(date)
        sql += " ORDER BY a.date, s.roll_number, a.id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [
                AttendanceEntry(
                    attendance_id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    roll_number=r["roll_number"],
                    name=r.get("name"),
                    date=r["date"],
                    status=r.get("status"),
                )
                for r in fetchall(cur)
            ]
