"""
Base exception classes for the LaunchKit auth backend.

Every error raised by this service derives from LaunchKitError and carries
a machine-readable `code` plus optional `details`. The API layer renders
them as {"error": code, "message": ..., "details": ...} and picks the HTTP
status from the base class (see api/errors.py).

Module-specific errors (modules/auth/exceptions.py) subclass these bases.
"""

from typing import Optional, Any


class LaunchKitError(Exception):
    """
    Base exception for all LaunchKit errors.

    `code` defaults to the class name. `details` is copied, so subclasses
    may add keys without touching the caller's dict.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details: dict[str, Any] = dict(details) if details else {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Body of the API error response."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(LaunchKitError):
    """A user, session or other record does not exist (404)."""


class ValidationError(LaunchKitError):
    """Input rejected by the service itself (422)."""


class AuthenticationError(LaunchKitError):
    """No usable credentials: missing, invalid or expired session (401)."""


class AuthorizationError(LaunchKitError):
    """Authenticated, but not allowed: wrong role or banned account (403)."""


class ExternalServiceError(LaunchKitError):
    """
    A dependency such as the auth backend or Supabase failed (502).

    The failing service's name is recorded in `details["service"]`.
    """

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
