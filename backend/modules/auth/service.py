"""
Authentication service implementation.

Resolves session tokens through the auth backend and reads user profiles
from the auth schema.
"""

import logging
from typing import Optional

from shared.config import Settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IAuthBackend, IAuthService
from .models import SessionInfo, UserProfile
from .repository import AccountRepository
from .exceptions import (
    AuthBackendError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Session tokens are opaque; only the auth backend can tell whether one
    is valid, so every validation is a get-session round trip.
    """

    def __init__(
        self,
        settings: Settings,
        backend: IAuthBackend,
        repository: Optional[AccountRepository] = None,
    ):
        self._settings = settings
        self._backend = backend
        self._repository = repository

    @property
    def accounts(self) -> AccountRepository:
        """Account repository, connected on first use."""
        if self._repository is None:
            self._repository = AccountRepository(get_supabase_client(self._settings))
        return self._repository

    async def get_session(self, token: str) -> Optional[SessionInfo]:
        """Resolve a session token; None when the backend does not know it."""
        if not token:
            return None
        try:
            return await self._backend.get_session(session_token=token)
        except AuthBackendError as e:
            if e.status_code == 401:
                return None
            raise

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        The backend answers for unknown or revoked tokens; expiry is checked
        locally against the session's expires_at as well.
        """
        if not token:
            raise MissingTokenError()

        info = await self.get_session(token)
        if info is None:
            raise InvalidTokenError()

        if info.session.is_expired():
            logger.debug(f"Rejected expired session {info.session.id}")
            raise ExpiredTokenError()

        user = info.user
        return AuthenticatedUser(
            id=user.id,
            email=user.email,
            name=user.name,
            email_verified=user.email_verified,
            role=user.role or "user",
            session_id=info.session.id,
            session_expires_at=info.session.expires_at,
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile by their ID."""
        return self.accounts.get_user_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """Get a user's profile by their email."""
        return self.accounts.get_user_by_email(email)
