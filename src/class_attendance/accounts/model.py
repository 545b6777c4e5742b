from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """A registered teacher or institution account.

    ``institution_type`` decides which half of the profile is meaningful:
    school accounts fill class/section, college accounts fill year/branch.
    """

    user_id: int
    email: str
    password_hash: str
    name: Optional[str] = None
    phone: Optional[str] = None
    institution_type: Optional[str] = None
    school: Optional[str] = None
    class_name: Optional[str] = None
    section: Optional[str] = None
    college: Optional[str] = None
    year: Optional[str] = None
    branch: Optional[str] = None
    role: Optional[str] = None

    def to_profile(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "institutionType": self.institution_type,
            "school": self.school,
            "class": self.class_name,
            "section": self.section,
            "college": self.college,
            "year": self.year,
            "branch": self.branch,
            "role": self.role,
        }


@dataclass(frozen=True)
class LoginResult:
    user_id: int
    institution_type: Optional[str]
