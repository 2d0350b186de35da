"""
HTTP client for the external authentication backend.

Talks to a Better-Auth-compatible API mounted at BETTER_AUTH_URL +
BETTER_AUTH_BASE_PATH. Session state is carried the way a browser would
carry it: cookies are kept in the underlying httpx client, and a bearer
token (from construction or from a `set-auth-token` response header) is
sent when present.

Backend-reported failures (4xx/5xx with a JSON `{message, code}` body)
become AuthBackendError; network failures become AuthTransportError.
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import Settings

from .exceptions import AuthBackendError, AuthTransportError
from .interfaces import IAuthBackend
from .models import (
    OAuthProvider,
    OTPType,
    SessionData,
    SessionInfo,
    SignInResult,
    SocialSignInResult,
    TwoFactorSetup,
)

logger = logging.getLogger(__name__)


class AuthBackendClient(IAuthBackend):
    """
    Async client for the authentication backend.

    One instance represents one browser-like context: it owns a cookie jar
    and an optional session token. Use it as an async context manager or
    call aclose() when done.
    """

    TOKEN_HEADER = "set-auth-token"

    def __init__(
        self,
        settings: Settings,
        session_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._session_token = session_token
        self._client = httpx.AsyncClient(
            base_url=settings.auth_api_url,
            timeout=settings.auth_request_timeout,
            headers={"Origin": settings.app_url},
            transport=transport,
        )

    @property
    def session_token(self) -> Optional[str]:
        """Bearer token of the client's current session, if any."""
        return self._session_token

    async def __aenter__(self) -> "AuthBackendClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # Email and social sign-in
    # -------------------------------------------------------------------------

    async def sign_up_email(
        self,
        name: str,
        email: str,
        password: str,
        image: Optional[str] = None,
    ) -> SignInResult:
        payload: dict[str, Any] = {"name": name, "email": email, "password": password}
        if image:
            payload["image"] = image
        data = await self._request("POST", "/sign-up/email", json=payload)
        return SignInResult.model_validate(data or {})

    async def sign_in_email(
        self,
        email: str,
        password: str,
        remember_me: Optional[bool] = None,
        callback_url: Optional[str] = None,
    ) -> SignInResult:
        payload: dict[str, Any] = {"email": email, "password": password}
        if remember_me is not None:
            payload["rememberMe"] = remember_me
        if callback_url:
            payload["callbackURL"] = callback_url
        data = await self._request("POST", "/sign-in/email", json=payload)
        return SignInResult.model_validate(data or {})

    async def sign_in_social(
        self,
        provider: OAuthProvider,
        callback_url: str,
        error_callback_url: str,
    ) -> SocialSignInResult:
        data = await self._request(
            "POST",
            "/sign-in/social",
            json={
                "provider": OAuthProvider(provider).value,
                "callbackURL": callback_url,
                "errorCallbackURL": error_callback_url,
            },
        )
        return SocialSignInResult.model_validate(data or {})

    async def sign_out(self) -> None:
        await self._request("POST", "/sign-out", json={})
        self._session_token = None

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    async def get_session(self, session_token: Optional[str] = None) -> Optional[SessionInfo]:
        data = await self._request("GET", "/get-session", session_token=session_token)
        if not data:
            return None
        info = SessionInfo.model_validate(data)
        if info.user is None or info.session is None:
            return None
        return info

    async def list_sessions(self) -> list[SessionData]:
        data = await self._request("GET", "/list-sessions")
        return [SessionData.model_validate(item) for item in data or []]

    async def revoke_session(self, token: str) -> None:
        await self._request("POST", "/revoke-session", json={"token": token})

    async def revoke_other_sessions(self) -> None:
        await self._request("POST", "/revoke-other-sessions", json={})

    # -------------------------------------------------------------------------
    # Two-factor (TOTP)
    # -------------------------------------------------------------------------

    async def enable_two_factor(self, password: str) -> TwoFactorSetup:
        data = await self._request("POST", "/two-factor/enable", json={"password": password})
        return TwoFactorSetup.model_validate(data or {})

    async def verify_totp(self, code: str) -> None:
        await self._request("POST", "/two-factor/verify-totp", json={"code": code})

    async def disable_two_factor(self, password: str) -> None:
        await self._request("POST", "/two-factor/disable", json={"password": password})

    # -------------------------------------------------------------------------
    # Email OTP
    # -------------------------------------------------------------------------

    async def send_verification_otp(self, email: str, otp_type: OTPType) -> None:
        await self._request(
            "POST",
            "/email-otp/send-verification-otp",
            json={"email": email, "type": OTPType(otp_type).value},
        )

    async def check_verification_otp(self, email: str, otp: str, otp_type: OTPType) -> None:
        await self._request(
            "POST",
            "/email-otp/check-verification-otp",
            json={"email": email, "otp": otp, "type": OTPType(otp_type).value},
        )

    async def verify_email(self, email: str, otp: str) -> None:
        await self._request("POST", "/email-otp/verify-email", json={"email": email, "otp": otp})

    async def forget_password_email_otp(self, email: str) -> None:
        await self._request("POST", "/forget-password/email-otp", json={"email": email})

    async def reset_password_email_otp(self, email: str, otp: str, password: str) -> None:
        await self._request(
            "POST",
            "/email-otp/reset-password",
            json={"email": email, "otp": otp, "password": password},
        )

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        session_token: Optional[str] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body (None when empty).

        An explicit session_token is used for that request only and does not
        replace the client's own session.
        """
        headers = {}
        token = session_token or self._session_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug(f"Auth backend request: {method} {path}")
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Auth backend unreachable for {method} {path}: {e}")
            raise AuthTransportError(f"Auth backend request failed: {e}") from e

        issued_token = response.headers.get(self.TOKEN_HEADER)
        if issued_token and session_token is None:
            self._session_token = issued_token

        if response.is_error:
            error = self._to_backend_error(response)
            logger.warning(
                f"Auth backend rejected {method} {path}: "
                f"{response.status_code} {error.code} {error.message!r}"
            )
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise AuthTransportError(f"Auth backend returned invalid JSON for {path}") from e

    @staticmethod
    def _to_backend_error(response: httpx.Response) -> AuthBackendError:
        """Map an error response to AuthBackendError, keeping the backend's text."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}
        return AuthBackendError(
            message=body.get("message") or "",
            code=body.get("code"),
            status_code=response.status_code,
        )
