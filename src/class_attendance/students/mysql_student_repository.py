from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


def _row_to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["id"]),
        user_id=int(row["user_id"]),
        roll_number=row["roll_number"],
        name=row.get("name"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_many(self, *, user_id: int, entries: Sequence[Tuple[str, Optional[str]]]) -> List[int]:
        ids: List[int] = []
        if not entries:
            return ids
        with db_cursor(self._conn_factory) as (_, cur):
            for roll_number, name in entries:
                cur.execute(
                    "INSERT INTO students(user_id, roll_number, name) VALUES(%s,%s,%s)",
                    (user_id, roll_number, name),
                )
                ids.append(int(cur.lastrowid))
        return ids

    def find_by_roll(self, *, user_id: int, roll_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, roll_number, name
                FROM students
                WHERE roll_number=%s AND user_id=%s
                ORDER BY id
                LIMIT 1
                """,
                (roll_number, user_id),
            )
            row = fetchone(cur)
            return _row_to_student(row) if row else None

    def list_for_user(self, user_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, user_id, roll_number, name FROM students WHERE user_id=%s ORDER BY id",
                (user_id,),
            )
            return [_row_to_student(r) for r in fetchall(cur)]
