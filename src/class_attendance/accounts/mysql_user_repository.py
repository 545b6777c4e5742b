from __future__ import annotations

from typing import Mapping, Optional

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import User
from .repository import UserRepository

# Wire field name -> users column
PROFILE_COLUMNS = {
    "name": "name",
    "phone": "phone",
    "institutionType": "institution_type",
    "school": "school",
    "class": "class_name",
    "section": "section",
    "college": "college",
    "year": "year",
    "branch": "branch",
    "role": "role",
}

_SELECT_USER = """
    SELECT id, name, phone, email, password_hash, institution_type, school,
           class_name, section, college, year, branch, role
    FROM users
"""


def _row_to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row.get("name"),
        phone=row.get("phone"),
        institution_type=row.get("institution_type"),
        school=row.get("school"),
        class_name=row.get("class_name"),
        section=row.get("section"),
        college=row.get("college"),
        year=row.get("year"),
        branch=row.get("branch"),
        role=row.get("role"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USER + " WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USER + " WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def create_user(self, *, email: str, password_hash: str, profile: Mapping[str, Optional[str]]) -> int:
        columns = ["email", "password_hash"]
        values: list = [email, password_hash]
        for field, column in PROFILE_COLUMNS.items():
            columns.append(column)
            values.append(profile.get(field))

        placeholders = ",".join(["%s"] * len(columns))
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"INSERT INTO users({', '.join(columns)}) VALUES({placeholders})",
                    tuple(values),
                )
                return int(cur.lastrowid)
        except Exception as e:
            if is_duplicate_key(e):
                raise ConflictError("This email is already registered. Please use a different email.") from e
            raise

    def update_password(self, *, email_or_phone: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET password_hash=%s WHERE email=%s OR phone=%s",
                (password_hash, email_or_phone, email_or_phone),
            )
            return int(cur.rowcount)

    def update_profile(self, user_id: int, fields: Mapping[str, Optional[str]]) -> bool:
        assignments = []
        values: list = []
        for field, value in fields.items():
            assignments.append(f"{PROFILE_COLUMNS[field]}=%s")
            values.append(value)
        if not assignments:
            return False

        values.append(user_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE users SET {', '.join(assignments)} WHERE id=%s", tuple(values))
            return cur.rowcount > 0
