"""
Auth API endpoints.

Session management for the signed-in user, the OTP delivery callback used
by the auth backend, and admin lookups over users and organizations.
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, Field

from api.dependencies import get_account_repository, get_app_settings, get_auth_service
from api.middleware.auth import get_admin_session, get_user_backend
from shared.config import Settings
from shared.exceptions import AuthenticationError, NotFoundError

from .interfaces import IAuthBackend, IAuthService
from .models import (
    Invitation,
    InvitationStatus,
    Member,
    Organization,
    OTPDeliveryRequest,
    SessionData,
    SessionInfo,
    UserProfile,
)
from .otp_delivery import send_verification_otp
from .repository import AccountRepository

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()


class RevokeSessionRequest(BaseModel):
    """Request to revoke one of the current user's sessions."""

    token: str = Field(..., min_length=1, description="Token of the session to revoke")


def _secret_matches(given: Optional[str], expected: str) -> bool:
    # Header values may hold any latin-1 text; compare_digest only takes ASCII str
    if not expected or not given:
        return False
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


@router.get("/sessions", response_model=list[SessionData])
async def list_sessions(
    backend: IAuthBackend = Depends(get_user_backend),
) -> list[SessionData]:
    """
    List the current user's active sessions.
    """
    return await backend.list_sessions()


@router.post("/sessions/revoke", status_code=204)
async def revoke_session(
    request: RevokeSessionRequest,
    backend: IAuthBackend = Depends(get_user_backend),
) -> None:
    """
    Revoke one of the current user's sessions.

    Tokens that don't belong to the user are reported as not found.
    """
    sessions = await backend.list_sessions()
    if not any(s.token == request.token for s in sessions):
        raise NotFoundError("Session not found", code="SESSION_NOT_FOUND")
    await backend.revoke_session(request.token)


@router.post("/otp-delivery", status_code=204)
async def deliver_otp(
    request: OTPDeliveryRequest,
    x_auth_secret: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """
    Deliver a one-time code generated by the auth backend.

    Called by the backend itself; authenticated with the shared auth secret.
    """
    if not _secret_matches(x_auth_secret, settings.better_auth_secret):
        logger.warning("Rejected OTP delivery request with invalid auth secret")
        raise AuthenticationError("Invalid auth secret", code="INVALID_AUTH_SECRET")
    await send_verification_otp(request, settings)


@admin_router.get("/users/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    session: SessionInfo = Depends(get_admin_session),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Look up any user's profile. Admins only.
    """
    profile = await service.get_user_by_id(user_id)
    if profile is None:
        raise NotFoundError("User not found", code="USER_NOT_FOUND", details={"user_id": user_id})
    logger.info(f"Admin {session.user.id} looked up user {user_id}")
    return profile


@admin_router.get("/users/{user_id}/sessions", response_model=list[SessionData])
def list_user_sessions(
    user_id: str,
    session: SessionInfo = Depends(get_admin_session),
    accounts: AccountRepository = Depends(get_account_repository),
) -> list[SessionData]:
    """List any user's sessions, newest first. Admins only."""
    logger.info(f"Admin {session.user.id} listed sessions of user {user_id}")
    return accounts.list_sessions_for_user(user_id)


@admin_router.get("/organizations/{organization_id}", response_model=Organization)
def get_organization(
    organization_id: str,
    session: SessionInfo = Depends(get_admin_session),
    accounts: AccountRepository = Depends(get_account_repository),
) -> Organization:
    organization = accounts.get_organization(organization_id)
    if organization is None:
        raise NotFoundError(
            "Organization not found",
            code="ORGANIZATION_NOT_FOUND",
            details={"organization_id": organization_id},
        )
    return organization


@admin_router.get(
    "/organizations/{organization_id}/members/{user_id}", response_model=Member
)
def get_member(
    organization_id: str,
    user_id: str,
    session: SessionInfo = Depends(get_admin_session),
    accounts: AccountRepository = Depends(get_account_repository),
) -> Member:
    member = accounts.get_member(organization_id, user_id)
    if member is None:
        raise NotFoundError(
            "Member not found",
            code="MEMBER_NOT_FOUND",
            details={"organization_id": organization_id, "user_id": user_id},
        )
    return member


@admin_router.get(
    "/organizations/{organization_id}/invitations", response_model=list[Invitation]
)
def list_invitations(
    organization_id: str,
    status: Optional[InvitationStatus] = None,
    session: SessionInfo = Depends(get_admin_session),
    accounts: AccountRepository = Depends(get_account_repository),
) -> list[Invitation]:
    """
    List an organization's invitations, soonest to expire first.

    `status` narrows the list to pending, accepted, rejected or expired ones.
    """
    return accounts.list_invitations(organization_id, status=status)
