"""
Username rules for the user-management module.

Identity providers hand over whatever login name the upstream service
suggests; clean_username turns it into something the platform accepts,
generating a fresh name when nothing usable is left.
"""

import base64
import logging
import re
import uuid

logger = logging.getLogger(__name__)


USERNAME_MIN_LENGTH = 1
USERNAME_MAX_LENGTH = 64

RESERVED_USERNAMES = ("all", "channel", "matterbot", "system")

_VALID_USERNAME_CHARS = re.compile(r"[a-z0-9.\-_]+")
_RESTRICTED_USERNAME_CHAR = re.compile(r"[^a-z0-9.\-_]")

# Standard base32 alphabet mapped onto one without easily confused characters
_ID_ALPHABET = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
    "ybndrfg8ejkmcpqxot1uwisza345h769",
)


def new_id() -> str:
    """Generate a random 26 character lower-case identifier."""
    encoded = base64.b32encode(uuid.uuid4().bytes).decode("ascii")
    return encoded.rstrip("=").translate(_ID_ALPHABET)


def normalize_username(username: str) -> str:
    return username.lower()


def is_valid_username(username: str) -> bool:
    """
    Check a username against the platform rules.

    Valid usernames are 1-64 characters of lower-case letters, digits,
    '.', '-' and '_', start with a letter, and are not reserved.
    """
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False

    if not _VALID_USERNAME_CHARS.fullmatch(username):
        return False

    if not username[0].isalpha():
        return False

    return username not in RESERVED_USERNAMES


def clean_username(username: str) -> str:
    """
    Turn a suggested login name into a valid username.

    Args:
        username: Raw candidate, e.g. a nickname or the local part of an email

    Returns:
        The cleaned username, or a generated one if cleaning leaves
        nothing valid
    """
    cleaned = normalize_username(username.replace(" ", "-"))

    if cleaned in RESERVED_USERNAMES:
        cleaned = ""

    cleaned = cleaned.strip()
    cleaned = _RESTRICTED_USERNAME_CHAR.sub("-", cleaned)
    cleaned = cleaned.strip("-")

    if not is_valid_username(cleaned):
        cleaned = "a" + new_id()
        logger.warning(
            "Generating new username since provided username was invalid "
            f"(provided_username={username!r}, new_username={cleaned!r})"
        )

    return cleaned
