from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .accounts.mysql_user_repository import MySQLUserRepository
from .accounts.service import AccountService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .students.importer import RosterImporter
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    students_repo: MySQLStudentRepository
    attendance_repo: MySQLAttendanceRepository

    account_service: AccountService
    roster_service: RosterService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.conn.close()


def build_container(*, db_config: dict, upload_folder: Union[str, Path], pool_size: int = 5) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size)).open()

    users_repo = MySQLUserRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    account_service = AccountService(users_repo)
    roster_service = RosterService(students_repo, RosterImporter(upload_folder))
    attendance_service = AttendanceService(attendance_repo, students_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        account_service=account_service,
        roster_service=roster_service,
        attendance_service=attendance_service,
    )
