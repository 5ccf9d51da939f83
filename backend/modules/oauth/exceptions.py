"""
OAuth module exceptions.

These exceptions are raised while turning provider responses into users.
Callers are expected to reject the login attempt when they see one.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, NotFoundError, ValidationError


class DecodeError(AuthenticationError):
    """Raised when a userinfo payload is not a well-formed JSON object of the expected shape."""

    def __init__(self, message: str = "Invalid userinfo payload", errors: Optional[list[str]] = None):
        super().__init__(
            message,
            code="DECODE_ERROR",
            details={"errors": errors or []},
        )


class MissingClaimError(ValidationError):
    """Raised when a required userinfo claim is empty."""

    def __init__(self, claim: str, message: str):
        super().__init__(
            message,
            code="MISSING_CLAIM",
            details={"claim": claim},
        )
        self.claim = claim


class ProviderNotFoundError(NotFoundError):
    """Raised when no OAuth provider is registered for a service."""

    def __init__(self, service: str):
        super().__init__(
            f"No OAuth provider registered for service: {service}",
            code="PROVIDER_NOT_FOUND",
            details={"service": service},
        )
