from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, violations: Sequence[str] | None = None):
        super().__init__(message)
        self.violations = list(violations) if violations is not None else [message]


class MalformedIdentifierError(ValidationError):
    """Raised when a path identifier is not a decimal number."""

    def __init__(self, entity: str):
        super().__init__(f"{entity} id should be a number")
        self.entity = entity


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AccessDeniedError(AuthenticationError):
    """Raised when a protected route is called without a valid token.

    Callers never learn why the token was refused.
    """


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, entity_id: int, *, message: str | None = None):
        super().__init__(message or f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(DomainError):
    """Raised when a write clashes with existing data (duplicate username, ...)."""
