from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """One status mark for one student on one date."""

    attendance_id: int
    student_id: int
    date: str
    status: Optional[str]


@dataclass(frozen=True)
class AttendanceMark:
    """A ``{roll, status}`` entry as submitted by the class owner."""

    roll: str
    status: Optional[str]


@dataclass(frozen=True)
class AttendanceEntry:
    """Read-model joining a mark with its student, used when listing marks."""

    attendance_id: int
    student_id: int
    roll_number: str
    name: Optional[str]
    date: str
    status: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "roll": self.roll_number,
            "name": self.name,
            "date": self.date,
            "status": self.status,
        }
