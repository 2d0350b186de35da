"""
Account repository for read-only access to the auth schema.

The tables are written by the auth backend; this repository only reads:
- user
- session
- organization
- member
- invitation
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import (
    Invitation,
    InvitationStatus,
    Member,
    Organization,
    SessionData,
    UserProfile,
)


class AccountRepository(BaseRepository[UserProfile]):
    """
    Repository for account data.

    All methods return Pydantic models mapped from database rows.

    Note: This repository does NOT perform authorization checks.
    Callers are responsible for verifying what the requester may see.
    """

    # -------------------------------------------------------------------------
    # Users and sessions
    # -------------------------------------------------------------------------

    def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        row = self._fetch_one("user", {"id": user_id})
        return self._map_to_profile(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        row = self._fetch_one("user", {"email": email.strip().lower()})
        return self._map_to_profile(row) if row else None

    def list_sessions_for_user(self, user_id: str) -> list[SessionData]:
        """List a user's sessions, newest first."""
        rows = self._fetch_all(
            "session", {"user_id": user_id}, order_by="created_at", desc=True
        )
        return [SessionData.model_validate(row) for row in rows]

    # -------------------------------------------------------------------------
    # Organizations
    # -------------------------------------------------------------------------

    def get_organization(self, organization_id: str) -> Optional[Organization]:
        row = self._fetch_one("organization", {"id": organization_id})
        return Organization.model_validate(row) if row else None

    def get_member(self, organization_id: str, user_id: str) -> Optional[Member]:
        row = self._fetch_one(
            "member", {"organization_id": organization_id, "user_id": user_id}
        )
        return Member.model_validate(row) if row else None

    def list_invitations(
        self,
        organization_id: str,
        status: Optional[InvitationStatus] = None,
    ) -> list[Invitation]:
        filters: dict[str, Any] = {"organization_id": organization_id}
        if status is not None:
            filters["status"] = status.value
        rows = self._fetch_all("invitation", filters, order_by="expires_at")
        return [Invitation.model_validate(row) for row in rows]

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map a user row to UserProfile."""
        return UserProfile(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name") or "",
            image=data.get("image"),
            email_verified=bool(data.get("email_verified", False)),
            role=data.get("role") or "user",
            banned=bool(data.get("banned", False)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
