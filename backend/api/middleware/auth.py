"""
Session authentication middleware.

Resolves bearer session tokens through the auth service. Tokens are opaque,
so every check is a round trip to the auth backend.
"""

import logging
from typing import AsyncIterator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.backend import AuthBackendClient
from modules.auth.guards import require_admin, require_not_banned
from modules.auth.interfaces import IAuthService
from modules.auth.models import SessionInfo
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_container

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Dependency that requires a bearer session token."""
    if credentials is None:
        raise AuthError("Missing authorization header")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_session_token),
    service: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    try:
        return await service.validate_token(token)
    except AuthenticationError as e:
        logger.debug(f"Rejected bearer token: {e.code}")
        raise AuthError(e.message)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    """
    if credentials is None:
        return None

    try:
        return await service.validate_token(credentials.credentials)
    except AuthenticationError:
        return None


async def get_current_session(
    token: str = Depends(get_session_token),
    service: IAuthService = Depends(get_auth_service),
) -> SessionInfo:
    """Dependency that resolves the full session (user record included)."""
    session = await service.get_session(token)
    if session is None:
        raise AuthError("Invalid authentication token")
    return session


async def get_admin_session(
    session: SessionInfo = Depends(get_current_session),
) -> SessionInfo:
    """Dependency that requires an admin who is not banned."""
    return require_admin(require_not_banned(session))


async def get_user_backend(
    token: str = Depends(get_session_token),
) -> AsyncIterator[AuthBackendClient]:
    """Auth backend client acting as the request's session, closed after the request."""
    backend = get_container().user_backend(token)
    try:
        yield backend
    finally:
        await backend.aclose()


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
RequireAdmin = Depends(get_admin_session)
