from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """A roster entry owned by exactly one user (the class owner)."""

    student_id: int
    user_id: int
    roll_number: str
    name: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "userId": self.user_id,
            "rollNumber": self.roll_number,
            "name": self.name,
        }
