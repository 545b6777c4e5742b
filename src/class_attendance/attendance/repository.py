from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def create_many(self, entries: Sequence[Tuple[int, str, Optional[str]]]) -> List[int]:
        """Insert ``(student_id, date, status)`` rows as a single transaction.

        No de-duplication: the same student and date may be marked repeatedly.
        """

        raise NotImplementedError

    def list_for_user(self, user_id: int, *, date: Optional[str] = None) -> Sequence[AttendanceEntry]:
        raise NotImplementedError
