class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request fields are missing or malformed."""


class ConflictError(DomainError):
    """Raised when a write collides with existing data (e.g. duplicate email)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a user, student or roll number does not exist."""
