"""
OAuth module data models.

OpenIDUserInfo mirrors the standard OpenID Connect userinfo claims the
platform reads. It is decoded once per login attempt and discarded after
the user record has been built.
"""

import logging
from typing import Any, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import DecodeError, MissingClaimError

logger = logging.getLogger(__name__)


class OpenIDUserInfo(BaseModel):
    """
    Claims returned by an OpenID Connect userinfo endpoint.

    Only sub and email are required (see validate_claims); every other
    claim defaults to an empty string. email_verified is kept for
    completeness but never enforced.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    sub: str = Field(default="", description="Subject (provider user ID)")
    email: str = Field(default="", description="Email address")
    email_verified: bool = Field(default=False, description="Whether the provider verified the email")
    name: str = Field(default="", description="Full display name")
    preferred_username: str = Field(default="", description="Suggested login name")
    given_name: str = Field(default="", description="First name")
    family_name: str = Field(default="", description="Last name")
    nickname: str = Field(default="", description="Casual name")

    @field_validator(
        "sub",
        "email",
        "name",
        "preferred_username",
        "given_name",
        "family_name",
        "nickname",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # A JSON null claim counts as absent
        return "" if value is None else value

    @field_validator("email_verified", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def from_json(cls, data: Union[bytes, str, Any]) -> "OpenIDUserInfo":
        """
        Decode a userinfo response body.

        Args:
            data: The raw JSON body as bytes or str, or a stream to read it from

        Returns:
            The decoded claims

        Raises:
            DecodeError: If the body is not a JSON object of the expected shape
        """
        if hasattr(data, "read"):
            data = data.read()

        try:
            return cls.model_validate_json(data)
        except pydantic.ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            logger.debug(f"Rejected userinfo payload: {errors}")
            raise DecodeError(errors=errors) from e

    def validate_claims(self) -> None:
        """
        Check that the claims needed to identify the user are present.

        Raises:
            MissingClaimError: If sub or email is empty
        """
        if not self.sub:
            raise MissingClaimError("sub", "missing subject")

        if not self.email:
            raise MissingClaimError("email", "missing email")
