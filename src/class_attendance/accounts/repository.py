from __future__ import annotations

from typing import Mapping, Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Storage interface for accounts; services depend on this, not on MySQL."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, email: str, password_hash: str, profile: Mapping[str, Optional[str]]) -> int:
        """Insert a user; raises ConflictError when the email is already taken."""

        raise NotImplementedError

    def update_password(self, *, email_or_phone: str, password_hash: str) -> int:
        """Return the number of accounts whose password changed."""

        raise NotImplementedError

    def update_profile(self, user_id: int, fields: Mapping[str, Optional[str]]) -> bool:
        raise NotImplementedError
