"""
OpenID Connect provider implementation.

Turns a userinfo response into the platform's internal user record.
"""

import logging
from typing import Any, Callable, Optional, Union

from modules.users import clean_username as default_clean_username
from shared.config import Settings, SSOSettings
from shared.models import AuthService, User

from .interfaces import IOAuthProvider
from .models import OpenIDUserInfo

logger = logging.getLogger(__name__)


def _local_part(value: str) -> str:
    """Everything before the first '@', or the whole string."""
    return value.split("@", 1)[0]


def _pick_username(info: OpenIDUserInfo, settings: Optional[SSOSettings]) -> str:
    if settings is not None and settings.use_preferred_username and info.preferred_username:
        return _local_part(info.preferred_username)
    if info.nickname:
        return info.nickname
    if info.preferred_username:
        return _local_part(info.preferred_username)
    return _local_part(info.email)


def _split_name(info: OpenIDUserInfo) -> tuple[str, str]:
    first_name = info.given_name
    last_name = info.family_name

    # Fall back to the full name only when neither part was provided
    if not first_name and not last_name and info.name:
        parts = info.name.split(" ")
        first_name = parts[0]
        last_name = " ".join(parts[1:])

    return first_name, last_name


def user_from_userinfo(
    info: OpenIDUserInfo,
    settings: Optional[SSOSettings] = None,
    clean_username: Callable[[str], str] = default_clean_username,
) -> User:
    """
    Map OpenID claims onto a new internal user.

    Username preference: preferred_username (when enabled in settings),
    nickname, preferred_username, then the local part of the email.
    preferred_username is always cut at the first '@'.

    Args:
        info: Decoded, validated userinfo claims
        settings: The OpenID SSO settings, if available
        clean_username: Turns the chosen candidate into a valid username

    Returns:
        User bound to the openid service with auth_data set to the subject
    """
    first_name, last_name = _split_name(info)

    return User(
        username=clean_username(_pick_username(info, settings)),
        first_name=first_name,
        last_name=last_name,
        email=info.email.lower(),
        auth_data=info.sub,
        auth_service=AuthService.OPENID.value,
    )


class OpenIDProvider(IOAuthProvider):
    """
    Identity provider adapter for generic OpenID Connect servers.

    Stateless: one instance can serve every login attempt.
    """

    def __init__(self, clean_username: Callable[[str], str] = default_clean_username):
        self._clean_username = clean_username

    def get_user_from_json(
        self,
        data: Union[bytes, str, Any],
        token_user: Optional[User] = None,
        settings: Optional[SSOSettings] = None,
    ) -> User:
        """
        Decode, validate and map a userinfo response.

        token_user is not used by this provider.
        """
        info = OpenIDUserInfo.from_json(data)
        info.validate_claims()

        user = user_from_userinfo(info, settings, self._clean_username)
        logger.debug(f"Mapped OpenID subject to username {user.username!r}")
        return user

    def get_sso_settings(self, config: Settings, service: str = AuthService.OPENID.value) -> SSOSettings:
        """Return the OpenID section of the settings unchanged."""
        return config.openid_settings

    def get_user_from_id_token(self, id_token: str) -> Optional[User]:
        # Identity comes from the userinfo endpoint, not the ID token
        return None

    def is_same_user(self, db_user: User, oauth_user: User) -> bool:
        """Accounts match when their stored subject identifiers are equal."""
        return db_user.auth_data == oauth_user.auth_data
