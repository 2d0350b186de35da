"""
Authentication module interfaces.

IAuthBackend is the contract of the external authentication backend as this
layer consumes it. Hooks and services depend on the protocol, never on the
HTTP client, so tests can substitute an AsyncMock.

IAuthService is what the API layer uses to resolve requests to users.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    OAuthProvider,
    OTPType,
    SessionData,
    SessionInfo,
    SignInResult,
    SocialSignInResult,
    TwoFactorSetup,
    UserProfile,
)


@runtime_checkable
class IAuthBackend(Protocol):
    """
    Operations offered by the authentication backend.

    Every method raises AuthBackendError when the backend reports a failure
    and AuthTransportError when it cannot be reached.
    """

    async def sign_up_email(
        self,
        name: str,
        email: str,
        password: str,
        image: Optional[str] = None,
    ) -> SignInResult:
        """Create an account with email and password."""
        ...

    async def sign_in_email(
        self,
        email: str,
        password: str,
        remember_me: Optional[bool] = None,
        callback_url: Optional[str] = None,
    ) -> SignInResult:
        """Sign in with email and password."""
        ...

    async def sign_in_social(
        self,
        provider: OAuthProvider,
        callback_url: str,
        error_callback_url: str,
    ) -> SocialSignInResult:
        """Start an OAuth handshake; returns the provider authorization URL."""
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...

    async def get_session(self, session_token: Optional[str] = None) -> Optional[SessionInfo]:
        """
        Resolve the current session.

        Args:
            session_token: Token to resolve. Defaults to the client's own session.

        Returns:
            SessionInfo, or None when there is no active session
        """
        ...

    async def list_sessions(self) -> list[SessionData]:
        """List all active sessions of the current user."""
        ...

    async def revoke_session(self, token: str) -> None:
        """Revoke one session by token."""
        ...

    async def revoke_other_sessions(self) -> None:
        """Revoke every session of the current user except the current one."""
        ...

    async def enable_two_factor(self, password: str) -> TwoFactorSetup:
        """Start TOTP enrollment; returns the otpauth URI and backup codes."""
        ...

    async def verify_totp(self, code: str) -> None:
        """Verify a TOTP code, activating two-factor on first success."""
        ...

    async def disable_two_factor(self, password: str) -> None:
        """Turn two-factor authentication off."""
        ...

    async def send_verification_otp(self, email: str, otp_type: OTPType) -> None:
        """Issue and deliver an OTP for the given purpose."""
        ...

    async def check_verification_otp(self, email: str, otp: str, otp_type: OTPType) -> None:
        """Check an OTP without consuming it. Raises AuthBackendError if invalid."""
        ...

    async def verify_email(self, email: str, otp: str) -> None:
        """Consume an email-verification OTP and mark the email verified."""
        ...

    async def forget_password_email_otp(self, email: str) -> None:
        """Issue and deliver a password-reset OTP."""
        ...

    async def reset_password_email_otp(self, email: str, otp: str, password: str) -> None:
        """Consume a password-reset OTP and set a new password."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for server-side authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def get_session(self, token: str) -> Optional[SessionInfo]:
        """
        Resolve a session token through the auth backend.

        Returns:
            SessionInfo if the token maps to a session, None otherwise
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, unknown or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their email.

        Returns:
            UserProfile if found, None otherwise
        """
        ...
