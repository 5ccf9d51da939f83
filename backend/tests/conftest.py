"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import json
from typing import Any

import pytest

from modules.oauth.registry import reset_registry
from shared.config import SSOSettings, get_settings


def _userinfo_json(**claims: Any) -> bytes:
    """
    Build a userinfo response body.

    Args:
        **claims: Claims to set or override. Pass None to drop a default claim.

    Returns:
        JSON bytes as an OpenID userinfo endpoint would return them
    """
    payload: dict[str, Any] = {
        "sub": "248289761001",
        "email": "Jane.Doe@Example.com",
        "email_verified": True,
    }
    payload.update(claims)
    payload = {key: value for key, value in payload.items() if value is not None}
    return json.dumps(payload).encode("utf-8")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the provider registry and settings cache before and after each test."""
    reset_registry()
    get_settings.cache_clear()
    yield
    reset_registry()
    get_settings.cache_clear()


@pytest.fixture
def openid_settings() -> SSOSettings:
    """OpenID settings with preferred_username preferred."""
    return SSOSettings(enable=True, use_preferred_username=True)


@pytest.fixture
def make_userinfo():
    """Factory for userinfo response bodies (see _userinfo_json)."""
    return _userinfo_json
