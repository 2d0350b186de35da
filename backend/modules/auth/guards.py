"""
Session guards.

Checks over an already-resolved session. The `is_*` / `has_*` functions
answer questions and never raise; the `require_*` functions return the
session when the check passes and raise otherwise.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional, Union

from .exceptions import (
    AccountBannedError,
    InsufficientPermissionsError,
    NotAuthenticatedError,
)
from .models import Role, SessionInfo

RoleLike = Union[Role, str]


def _role_value(role: RoleLike) -> str:
    return role.value if isinstance(role, Role) else role


def is_authenticated(session: Optional[SessionInfo]) -> bool:
    """Check if the session belongs to a user."""
    return session is not None and session.user is not None


def require_auth(session: Optional[SessionInfo]) -> SessionInfo:
    """Require an authenticated session."""
    if not is_authenticated(session):
        raise NotAuthenticatedError()
    return session


def has_role(session: Optional[SessionInfo], role: RoleLike) -> bool:
    """Check if the session's user has exactly this role."""
    if not is_authenticated(session):
        return False
    return session.user.role == _role_value(role)


def has_any_role(session: Optional[SessionInfo], roles: Iterable[RoleLike]) -> bool:
    """Check if the session's user has one of the roles."""
    if not is_authenticated(session):
        return False
    return session.user.role in {_role_value(r) for r in roles}


def require_role(session: Optional[SessionInfo], role: RoleLike) -> SessionInfo:
    """Require the session's user to have the role."""
    session = require_auth(session)
    if session.user.role != _role_value(role):
        raise InsufficientPermissionsError([_role_value(role)], session.user.role)
    return session


def require_any_role(session: Optional[SessionInfo], roles: Iterable[RoleLike]) -> SessionInfo:
    """Require the session's user to have at least one of the roles."""
    session = require_auth(session)
    required = [_role_value(r) for r in roles]
    if session.user.role not in required:
        raise InsufficientPermissionsError(required, session.user.role)
    return session


def is_admin(session: Optional[SessionInfo]) -> bool:
    return has_role(session, Role.ADMIN)


def is_owner(session: Optional[SessionInfo]) -> bool:
    return has_role(session, Role.OWNER)


def require_admin(session: Optional[SessionInfo]) -> SessionInfo:
    return require_role(session, Role.ADMIN)


def require_owner(session: Optional[SessionInfo]) -> SessionInfo:
    return require_role(session, Role.OWNER)


def is_banned(session: Optional[SessionInfo], now: Optional[datetime] = None) -> bool:
    """
    Check if the session's user is banned.

    A ban without an expiry is permanent; otherwise the user stays banned
    until `ban_expires`.
    """
    if not is_authenticated(session):
        return False

    user = session.user
    if not user.banned:
        return False
    if user.ban_expires is None:
        return True

    now = now or datetime.now(timezone.utc)
    expires = user.ban_expires
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return now < expires


def require_not_banned(session: Optional[SessionInfo], now: Optional[datetime] = None) -> SessionInfo:
    """Require an authenticated session whose user is not banned."""
    session = require_auth(session)
    if is_banned(session, now=now):
        raise AccountBannedError(session.user.ban_reason)
    return session
