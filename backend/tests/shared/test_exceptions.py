"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    IdentityError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)


class TestIdentityError:
    def test_identity_error_message(self):
        """IdentityError should store message."""
        error = IdentityError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_identity_error_default_code(self):
        """IdentityError should default code to class name."""
        error = IdentityError("Test error")
        assert error.code == "IdentityError"

    def test_identity_error_custom_code(self):
        """IdentityError should accept custom code."""
        error = IdentityError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_identity_error_default_details(self):
        """IdentityError should default details to empty dict."""
        error = IdentityError("Test error")
        assert error.details == {}

    def test_identity_error_to_dict(self):
        """IdentityError should convert to dict."""
        error = IdentityError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestSubclasses:
    def test_not_found_error(self):
        """NotFoundError should inherit from IdentityError."""
        error = NotFoundError("Resource not found")
        assert isinstance(error, IdentityError)
        assert error.code == "NotFoundError"

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError("Validation failed", details={"claim": "email"})
        assert isinstance(error, IdentityError)
        assert error.details["claim"] == "email"

    def test_authentication_error(self):
        """AuthenticationError should inherit from IdentityError."""
        error = AuthenticationError("Bad payload")
        assert isinstance(error, IdentityError)
