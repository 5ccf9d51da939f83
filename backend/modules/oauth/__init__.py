"""
OAuth module.

Adapts identity provider responses into internal user records.

Public API:
- IOAuthProvider: Interface every identity provider implements
- OpenIDProvider: OpenID Connect implementation
- OpenIDUserInfo: Decoded userinfo claims
- OAuthProviderRegistry: Service tag -> provider lookup
- init_oauth_providers: Startup registration of the shipped providers
- OAuth exceptions: DecodeError, MissingClaimError, ProviderNotFoundError
"""

from .interfaces import IOAuthProvider
from .models import OpenIDUserInfo
from .service import OpenIDProvider, user_from_userinfo
from .registry import (
    OAuthProviderRegistry,
    get_registry,
    init_oauth_providers,
    register_openid_provider,
    reset_registry,
)
from .exceptions import (
    DecodeError,
    MissingClaimError,
    ProviderNotFoundError,
)

__all__ = [
    # Interface
    "IOAuthProvider",
    # Models
    "OpenIDUserInfo",
    # Providers
    "OpenIDProvider",
    "user_from_userinfo",
    # Registry
    "OAuthProviderRegistry",
    "get_registry",
    "init_oauth_providers",
    "register_openid_provider",
    "reset_registry",
    # Exceptions
    "DecodeError",
    "MissingClaimError",
    "ProviderNotFoundError",
]
