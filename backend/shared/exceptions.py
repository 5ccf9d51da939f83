"""
Base exception classes for the identity backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the login pipeline.
"""

from typing import Optional, Any


class IdentityError(Exception):
    """
    Base exception for all identity errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for the caller rejecting the login."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(IdentityError):
    """Resource not found."""

    pass


class ValidationError(IdentityError):
    """Input validation failed."""

    pass


class AuthenticationError(IdentityError):
    """Authentication failed (unreadable or untrusted identity data)."""

    pass
