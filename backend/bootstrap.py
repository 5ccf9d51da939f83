"""
Process startup for the identity backend.

The host application calls startup() once before serving logins. It
configures logging from the settings and registers the identity providers.
"""

import logging
from typing import Optional

from modules.oauth import OAuthProviderRegistry, init_oauth_providers
from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)


def startup(
    settings: Optional[Settings] = None,
    registry: Optional[OAuthProviderRegistry] = None,
) -> OAuthProviderRegistry:
    """
    Run startup logic.

    Args:
        settings: Application settings. Defaults to get_settings().
        registry: Provider registry to populate. Defaults to the process-wide one.

    Returns:
        The populated provider registry
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting {settings.app_name} {settings.app_version}")

    return init_oauth_providers(registry)
