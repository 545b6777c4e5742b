from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from ..common.validators import optional_str, require_int, require_list, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceEntry, AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_marks(raw: Sequence[Any]) -> List[AttendanceMark]:
    marks = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValidationError("Each attendance record must be an object with roll and status")
        roll = item.get("roll")
        if roll is None or not str(roll).strip():
            raise ValidationError("Each attendance record needs a roll number")
        marks.append(AttendanceMark(roll=str(roll).strip(), status=optional_str(item.get("status"))))
    return marks


class AttendanceService:
    """Record a day's attendance for one class owner's roster."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def save_attendance(self, date: Any, user_id: Any, attendance: Any) -> List[AttendanceRecord]:
        if not date or user_id in (None, "") or attendance is None:
            raise ValidationError("Missing required fields: date, attendance, or userId")
        date = require_non_empty(date, "date")
        user_id = require_int(user_id, "userId")
        marks = parse_marks(require_list(attendance, "attendance"))

        # Resolve every roll before writing so an unknown roll leaves nothing behind.
        entries = []
        for mark in marks:
            student = self._students.find_by_roll(user_id=user_id, roll_number=mark.roll)
            if not student:
                logger.warning("Student with rollNumber %s not found for userId %s", mark.roll, user_id)
                raise NotFoundError(f"Student with roll number {mark.roll} not found")
            entries.append((student.student_id, date, mark.status))

        ids = self._attendance.create_many(entries)
        logger.info("Saved %s attendance marks for user %s on %s", len(ids), user_id, date)

        return [
            AttendanceRecord(attendance_id=attendance_id, student_id=student_id, date=day, status=status)
            for attendance_id, (student_id, day, status) in zip(ids, entries)
        ]

    def list_attendance(self, user_id: Any, *, date: Optional[str] = None) -> Sequence[AttendanceEntry]:
        return self._attendance.list_for_user(require_int(user_id, "userId"), date=date or None)
