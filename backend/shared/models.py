"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is built from the session resolved by the auth backend and
    made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID")
    email: EmailStr = Field(..., description="User's email address")
    name: str = Field(default="", description="Display name")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    role: str = Field(default="user", description="User role")

    session_id: Optional[str] = Field(None, description="ID of the resolved session")
    session_expires_at: Optional[datetime] = Field(None, description="When the session expires")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
