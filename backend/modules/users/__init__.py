"""
User-management module.

Public API:
- clean_username: Turn a provider-suggested login name into a valid username
- is_valid_username: Check a username against the platform rules
- new_id: Generate a random identifier
"""

from .usernames import (
    RESERVED_USERNAMES,
    USERNAME_MAX_LENGTH,
    clean_username,
    is_valid_username,
    new_id,
    normalize_username,
)

__all__ = [
    "RESERVED_USERNAMES",
    "USERNAME_MAX_LENGTH",
    "clean_username",
    "is_valid_username",
    "new_id",
    "normalize_username",
]
