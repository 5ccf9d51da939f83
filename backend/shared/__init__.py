"""
Shared infrastructure for the identity backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: The internal user record and identity service tags

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, SSOSettings, get_settings
from .exceptions import (
    IdentityError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)
from .models import AuthService, User

__all__ = [
    "Settings",
    "SSOSettings",
    "get_settings",
    "IdentityError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthService",
    "User",
]
