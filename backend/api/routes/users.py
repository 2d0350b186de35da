"""
User-related endpoints.

Everything here acts on the signed-in user resolved from the bearer session.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """The signed-in user and the session the request was made with."""

    id: str
    email: EmailStr
    name: str
    email_verified: bool
    role: str
    session_expires_at: Optional[datetime] = None


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> UserProfileResponse:
    """
    Get the current user's profile.

    Requires a valid, unexpired session.
    """
    return UserProfileResponse(**user.model_dump(exclude={"session_id"}))
