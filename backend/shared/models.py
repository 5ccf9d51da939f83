"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AuthService(str, Enum):
    """Identity services a user account can be bound to."""

    EMAIL = "email"
    GITLAB = "gitlab"
    GOOGLE = "google"
    OFFICE365 = "office365"
    OPENID = "openid"


class User(BaseModel):
    """
    Internal user record produced by an identity provider.

    Providers build a fresh instance per login attempt and hand it to the
    provisioning pipeline, which persists it or merges it into an existing
    account. auth_data holds the provider-issued subject identifier used to
    match returning users.
    """

    username: str = Field(..., description="Cleaned login name")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    email: str = Field(..., description="Lower-cased email address")
    auth_data: Optional[str] = Field(None, description="Provider subject identifier")
    auth_service: str = Field(default="", description="Identity service tag")

    model_config = {"frozen": True}
