from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

from ..common.validators import optional_str, require_int, require_list, require_non_empty
from ..core.exceptions import ValidationError
from .importer import RosterImporter
from .model import Student
from .repository import StudentRepository
from .rolls import assign_rolls

logger = logging.getLogger(__name__)


class RosterService:
    def __init__(self, students: StudentRepository, importer: RosterImporter):
        self._students = students
        self._importer = importer

    def import_roster(self, source: Union[str, Path, BinaryIO]) -> List[Dict[str, Optional[str]]]:
        return self._importer.read_names(source)

    def import_upload(self, file) -> List[Dict[str, Optional[str]]]:
        path = self._importer.save_upload(file)
        return self.import_roster(path)

    def save_students(self, user_id: Any, students: Any, start_roll: Any) -> List[Student]:
        """Assign sequential roll numbers and store the roster.

        All rows go in one transaction: a failure leaves no partial roster.
        """
        user_id = require_int(user_id, "userId")
        start_roll = require_non_empty(start_roll, "startRoll")
        students = require_list(students, "students")

        names = []
        for entry in students:
            if not isinstance(entry, dict):
                raise ValidationError("Each student must be an object with a name")
            names.append(optional_str(entry.get("name")))

        entries = assign_rolls(start_roll, names)
        ids = self._students.create_many(user_id=user_id, entries=entries)
        logger.info("Saved %s students for user %s starting at %s", len(ids), user_id, start_roll)

        return [
            Student(student_id=student_id, user_id=user_id, roll_number=roll, name=name)
            for student_id, (roll, name) in zip(ids, entries)
        ]

    def list_students(self, user_id: Any) -> Sequence[Student]:
        return self._students.list_for_user(require_int(user_id, "userId"))
