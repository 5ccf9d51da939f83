"""
Registry of identity provider adapters.

The host application calls init_oauth_providers() once during startup;
the login pipeline then looks providers up by service tag. Tests build
their own OAuthProviderRegistry instead of touching the default one.
"""

import logging
from typing import Optional

from shared.models import AuthService

from .exceptions import ProviderNotFoundError
from .interfaces import IOAuthProvider
from .service import OpenIDProvider

logger = logging.getLogger(__name__)


class OAuthProviderRegistry:
    """Maps identity service tags (e.g. "openid") to provider adapters."""

    def __init__(self):
        self._providers: dict[str, IOAuthProvider] = {}

    def register(self, service: str, provider: IOAuthProvider) -> None:
        """
        Register a provider for a service.

        Registering the same service again replaces the earlier provider.
        """
        if service in self._providers:
            logger.info(f"Replacing OAuth provider for service {service!r}")
        else:
            logger.debug(f"Registered OAuth provider for service {service!r}")
        self._providers[service] = provider

    def get(self, service: str) -> IOAuthProvider:
        """
        Get the provider registered for a service.

        Raises:
            ProviderNotFoundError: If nothing is registered for the service
        """
        try:
            return self._providers[service]
        except KeyError:
            raise ProviderNotFoundError(service)

    def services(self) -> list[str]:
        """Registered service tags, in registration order."""
        return list(self._providers)

    def __contains__(self, service: object) -> bool:
        return service in self._providers

    def __len__(self) -> int:
        return len(self._providers)


def register_openid_provider(registry: OAuthProviderRegistry) -> OpenIDProvider:
    """Register the OpenID Connect provider and return it."""
    provider = OpenIDProvider()
    registry.register(AuthService.OPENID.value, provider)
    return provider


def init_oauth_providers(registry: Optional[OAuthProviderRegistry] = None) -> OAuthProviderRegistry:
    """
    Register every provider shipped with the backend.

    Args:
        registry: Registry to populate. Defaults to the process-wide one.

    Returns:
        The populated registry
    """
    if registry is None:
        registry = get_registry()

    register_openid_provider(registry)
    logger.info(f"OAuth providers initialized: {', '.join(registry.services())}")
    return registry


# Module-level instance getter
_registry_instance: Optional[OAuthProviderRegistry] = None


def get_registry() -> OAuthProviderRegistry:
    """Get the process-wide provider registry."""
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = OAuthProviderRegistry()
    return _registry_instance


def reset_registry() -> None:
    """Reset the process-wide provider registry (for testing)."""
    global _registry_instance
    _registry_instance = None
