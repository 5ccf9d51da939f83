"""
Centralized configuration for the identity backend.

All settings are loaded from environment variables with sensible defaults.
Provider sections are nested models, addressed with a double underscore
(e.g., OPENID_SETTINGS__USE_PREFERRED_USERNAME=true).
"""

from functools import lru_cache
from typing import Optional
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class SSOSettings(BaseModel):
    """Settings for one single sign-on identity provider."""

    enable: bool = False
    secret: str = ""
    id: str = ""
    scope: str = ""
    auth_endpoint: str = ""
    token_endpoint: str = ""
    user_api_endpoint: str = ""
    discovery_endpoint: str = ""
    button_text: str = ""
    button_color: str = ""

    # None means "not configured" and behaves like False
    use_preferred_username: Optional[bool] = None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Identity API"
    app_version: str = "0.1.0"
    debug: bool = False

    # SSO providers
    gitlab_settings: SSOSettings = SSOSettings()
    google_settings: SSOSettings = SSOSettings()
    office365_settings: SSOSettings = SSOSettings()
    openid_settings: SSOSettings = SSOSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
