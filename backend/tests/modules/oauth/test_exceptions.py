"""Tests for OAuth module exceptions."""

from modules.oauth.exceptions import DecodeError, MissingClaimError, ProviderNotFoundError
from shared.exceptions import (
    AuthenticationError,
    IdentityError,
    NotFoundError,
    ValidationError,
)


class TestDecodeError:
    def test_defaults(self):
        """Should create a decode error with a default message."""
        error = DecodeError()
        assert str(error) == "Invalid userinfo payload"
        assert error.code == "DECODE_ERROR"
        assert error.details == {"errors": []}
        assert isinstance(error, AuthenticationError)

    def test_with_errors(self):
        """Should list parser errors in details."""
        error = DecodeError(errors=["<root>: Invalid JSON"])
        assert error.to_dict() == {
            "error": "DECODE_ERROR",
            "message": "Invalid userinfo payload",
            "details": {"errors": ["<root>: Invalid JSON"]},
        }


class TestMissingClaimError:
    def test_missing_claim(self):
        """Should carry the claim name."""
        error = MissingClaimError("sub", "missing subject")
        assert str(error) == "missing subject"
        assert error.claim == "sub"
        assert error.code == "MISSING_CLAIM"
        assert error.details["claim"] == "sub"
        assert isinstance(error, ValidationError)
        assert isinstance(error, IdentityError)


class TestProviderNotFoundError:
    def test_provider_not_found(self):
        """Should name the unknown service."""
        error = ProviderNotFoundError("gitlab")
        assert "gitlab" in str(error)
        assert error.code == "PROVIDER_NOT_FOUND"
        assert error.details == {"service": "gitlab"}
        assert isinstance(error, NotFoundError)
