from __future__ import annotations

import logging
from typing import Any, Mapping

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_str, require_int, require_non_empty
from ..core.constants import MUTABLE_PROFILE_FIELDS, PROFILE_FIELDS
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import LoginResult, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Registration, login, password reset and profile maintenance."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, payload: Mapping[str, Any]) -> int:
        email = require_non_empty(payload.get("email"), "email")
        password = require_non_empty(payload.get("password"), "password")

        profile = {field: optional_str(payload.get(field)) for field in PROFILE_FIELDS}
        # The UNIQUE(email) index decides duplicates; the repository raises ConflictError.
        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            profile=profile,
        )
        logger.info("Registered user id=%s", user_id)
        return user_id

    def login(self, email: Any, password: Any) -> LoginResult:
        # Same normalisation as register, so whatever registered can log in.
        try:
            email = require_non_empty(email, "email")
            password = require_non_empty(password, "password")
        except ValidationError:
            raise AuthenticationError("Invalid email or password")

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # unknown hash method in a corrupted row
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return LoginResult(user_id=user.user_id, institution_type=user.institution_type)

    def reset_password(self, email_or_phone: str, new_password: str) -> None:
        email_or_phone = require_non_empty(email_or_phone, "emailOrPhone")
        new_password = require_non_empty(new_password, "newPassword")

        changed = self._users.update_password(
            email_or_phone=email_or_phone,
            password_hash=generate_password_hash(new_password),
        )
        if changed == 0:
            raise NotFoundError("Email or phone not found")
        logger.info("Password reset for %s account(s)", changed)

    def get_profile(self, user_id: Any) -> User:
        user_id = require_int(user_id, "userId")
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: Any, payload: Mapping[str, Any]) -> None:
        """Update the mutable profile fields present in ``payload``.

        Email and password are never touched here, even if sent.
        """
        user_id = require_int(user_id, "userId")
        fields = {
            field: optional_str(payload[field])
            for field in MUTABLE_PROFILE_FIELDS
            if field in payload
        }
        if not fields:
            raise ValidationError("No profile fields to update")

        if not self._users.get_by_id(user_id):
            raise NotFoundError("User not found")

        self._users.update_profile(user_id, fields)
