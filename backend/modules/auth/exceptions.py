"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional, Sequence

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    LaunchKitError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token does not resolve to a session."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a session has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class NotAuthenticatedError(AuthenticationError):
    """Raised by guards when there is no authenticated session."""

    def __init__(self, message: str = "Unauthorized: Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_roles: Sequence[str], user_role: Optional[str]):
        roles = list(required_roles)
        if len(roles) == 1:
            message = f"Forbidden: {roles[0]} role required"
        else:
            message = f"Forbidden: One of [{', '.join(roles)}] roles required"
        super().__init__(
            message,
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_roles": roles, "user_role": user_role},
        )


class AccountBannedError(AuthorizationError):
    """Raised when a banned user tries to act."""

    def __init__(self, reason: Optional[str] = None):
        reason = reason or "No reason provided"
        super().__init__(
            f"Account banned: {reason}",
            code="ACCOUNT_BANNED",
            details={"reason": reason},
        )


class AuthBackendError(LaunchKitError):
    """
    Raised when the auth backend reports a failure.

    The message is the backend's own text and may be empty; callers
    substitute an operation-specific fallback in that case.
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            message,
            code=code or "AUTH_BACKEND_ERROR",
            details={"status_code": status_code} if status_code else {},
        )
        self.status_code = status_code


class AuthTransportError(ExternalServiceError):
    """Raised when the auth backend cannot be reached or answers garbage."""

    def __init__(self, message: str):
        super().__init__(message, service="auth", code="AUTH_UNAVAILABLE")


class AuthActionError(LaunchKitError):
    """Error handed to sign-out callbacks, carrying the surfaced message."""

    def __init__(self, message: str):
        super().__init__(message, code="AUTH_ACTION_FAILED")


class InvalidFlowStepError(ValidationError):
    """Raised when a flow operation is invoked outside its step."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            f"Operation requires step '{expected}', flow is at '{actual}'",
            code="INVALID_FLOW_STEP",
            details={"expected": expected, "actual": actual},
        )
