from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple

from .model import Student


class StudentRepository(Protocol):
    def create_many(self, *, user_id: int, entries: Sequence[Tuple[str, Optional[str]]]) -> List[int]:
        """Insert ``(roll_number, name)`` rows for one user as a single transaction."""

        raise NotImplementedError

    def find_by_roll(self, *, user_id: int, roll_number: str) -> Optional[Student]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Student]:
        raise NotImplementedError
