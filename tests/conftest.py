from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional, Tuple

import pytest

from class_attendance.accounts.model import User
from class_attendance.accounts.service import AccountService
from class_attendance.attendance.model import AttendanceEntry
from class_attendance.attendance.service import AttendanceService
from class_attendance.container import Container
from class_attendance.core.exceptions import ConflictError
from class_attendance.students.importer import RosterImporter
from class_attendance.students.model import Student
from class_attendance.students.service import RosterService

_FIELD_TO_ATTR = {
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


class InMemoryUsers:
    def __init__(self):
        self.users: Dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def create_user(self, *, email, password_hash, profile) -> int:
        if self.get_by_email(email):
            raise ConflictError("This email is already registered. Please use a different email.")
        self._id += 1
        attrs = {_FIELD_TO_ATTR[k]: v for k, v in profile.items()}
        self.users[self._id] = User(user_id=self._id, email=email, password_hash=password_hash, **attrs)
        return self._id

    def update_password(self, *, email_or_phone, password_hash) -> int:
        changed = 0
        for uid, u in list(self.users.items()):
            if email_or_phone in (u.email, u.phone):
                self.users[uid] = dataclasses.replace(u, password_hash=password_hash)
                changed += 1
        return changed

    def update_profile(self, user_id, fields) -> bool:
        user = self.users.get(user_id)
        if not user:
            return False
        self.users[user_id] = dataclasses.replace(user, **{_FIELD_TO_ATTR[k]: v for k, v in fields.items()})
        return True


class InMemoryStudents:
    def __init__(self):
        self.students: List[Student] = []
        self.fail_on_insert = False

    def create_many(self, *, user_id, entries) -> List[int]:
        if self.fail_on_insert:
            raise RuntimeError("insert failed")
        ids = []
        for roll, name in entries:
            sid = len(self.students) + 1
            self.students.append(Student(student_id=sid, user_id=user_id, roll_number=roll, name=name))
            ids.append(sid)
        return ids

    def find_by_roll(self, *, user_id, roll_number) -> Optional[Student]:
        return next(
            (s for s in self.students if s.user_id == user_id and s.roll_number == roll_number),
            None,
        )

    def list_for_user(self, user_id):
        return [s for s in self.students if s.user_id == user_id]


class InMemoryAttendance:
    def __init__(self, students: InMemoryStudents):
        self._students = students
        self.rows: List[Tuple[int, int, str, Optional[str]]] = []

    def create_many(self, entries) -> List[int]:
        ids = []
        for student_id, date, status in entries:
            aid = len(self.rows) + 1
            self.rows.append((aid, student_id, date, status))
            ids.append(aid)
        return ids

    def list_for_user(self, user_id, *, date=None):
        by_id = {s.student_id: s for s in self._students.list_for_user(user_id)}
        return [
            AttendanceEntry(
                attendance_id=aid,
                student_id=sid,
                roll_number=by_id[sid].roll_number,
                name=by_id[sid].name,
                date=d,
                status=status,
            )
            for aid, sid, d, status in self.rows
            if sid in by_id and (date is None or d == date)
        ]


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def attendance_repo(students_repo):
    return InMemoryAttendance(students_repo)


@pytest.fixture
def container(tmp_path, users_repo, students_repo, attendance_repo):
    return Container(
        conn=FakeConnection(),
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        account_service=AccountService(users_repo),
        roster_service=RosterService(students_repo, RosterImporter(tmp_path / "uploads")),
        attendance_service=AttendanceService(attendance_repo, students_repo),
    )


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from class_attendance.main import create_app

    app = create_app(container=container)
    return app.test_client()
