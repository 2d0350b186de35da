"""Tests for shared hook machinery."""

from modules.auth.exceptions import AuthBackendError, AuthTransportError
from modules.hooks.base import DEFAULT_ERROR_MESSAGE, failure_message


class TestFailureMessage:
    def test_backend_message_is_used_verbatim(self):
        error = AuthBackendError("User already exists")
        assert failure_message(error, "Failed to register") == "User already exists"

    def test_backend_error_without_message_uses_fallback(self):
        assert failure_message(AuthBackendError(), "Failed to register") == "Failed to register"

    def test_unexpected_error_uses_own_message(self):
        assert failure_message(RuntimeError("kaboom"), "Failed to register") == "kaboom"

    def test_unexpected_error_without_message(self):
        assert failure_message(RuntimeError(), "Failed to register") == DEFAULT_ERROR_MESSAGE

    def test_unexpected_fallback_override(self):
        assert failure_message(ValueError(), "x", "An error occurred while listing sessions") == (
            "An error occurred while listing sessions"
        )

    def test_transport_error_message(self):
        error = AuthTransportError("Auth backend request failed: timeout")
        assert failure_message(error, "Failed to sign in") == "Auth backend request failed: timeout"
