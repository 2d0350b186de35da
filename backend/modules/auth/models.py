"""
Authentication module data models.

These models define the data structures used by the auth module and
exposed to other modules through the interface.

Records come from two sources: the auth backend's JSON API (camelCase keys)
and the relational schema (snake_case columns). Both map onto the same
models through camelCase aliases with population by field name.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """User and organization-member roles."""

    USER = "user"
    ADMIN = "admin"
    MEMBER = "member"
    OWNER = "owner"


class InvitationStatus(str, Enum):
    """Lifecycle of an organization invitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class OTPType(str, Enum):
    """Purpose an email OTP was issued for."""

    SIGN_IN = "sign-in"
    EMAIL_VERIFICATION = "email-verification"
    FORGET_PASSWORD = "forget-password"


class OAuthProvider(str, Enum):
    """Social sign-in providers."""

    GITHUB = "github"
    GOOGLE = "google"
    DISCORD = "discord"


class BackendModel(BaseModel):
    """Base for records shared with the auth backend and the schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class UserData(BackendModel):
    """A user record as owned by the auth backend."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    name: str = Field(default="", description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    # Admin plugin fields
    role: Optional[str] = Field(default=Role.USER.value, description="User role")
    banned: bool = Field(default=False, description="Whether the user is banned")
    ban_reason: Optional[str] = Field(None, description="Reason for the ban")
    ban_expires: Optional[datetime] = Field(None, description="When the ban ends")


class SessionData(BackendModel):
    """A server-issued session with its device metadata."""

    id: str = Field(..., description="Session ID")
    user_id: str = Field(..., description="Owning user ID")
    token: str = Field(..., description="Session token")
    expires_at: datetime = Field(..., description="Expiry time")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")
    ip_address: Optional[str] = Field(None, description="Originating IP address")
    user_agent: Optional[str] = Field(None, description="Originating user agent")

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the session is past its expiry."""
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return now >= expires_at


class SessionInfo(BackendModel):
    """The current session as returned by the backend's get-session."""

    user: Optional[UserData] = None
    session: Optional[SessionData] = None


class SignInResult(BackendModel):
    """Result of an email sign-in or sign-up."""

    token: Optional[str] = None
    user: Optional[UserData] = None
    url: Optional[str] = None
    redirect: bool = False
    two_factor_redirect: bool = False


class SocialSignInResult(BackendModel):
    """Authorization URL for a social sign-in."""

    url: Optional[str] = None
    redirect: bool = True


class TwoFactorSetup(BackendModel):
    """TOTP enrollment data: the otpauth URI and one-time backup codes."""

    totp_uri: Optional[str] = Field(None, alias="totpURI")
    backup_codes: list[str] = Field(default_factory=list)


class UserProfile(BaseModel):
    """
    Full user profile with additional metadata.

    Read from the relational schema when more than the session's user
    is needed.
    """

    id: str = Field(..., description="User ID")
    email: EmailStr = Field(..., description="Email address")
    name: str = Field(default="", description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    role: str = Field(default=Role.USER.value, description="User role")
    banned: bool = Field(default=False, description="Whether the user is banned")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class Organization(BackendModel):
    """An organization (tenant)."""

    id: str
    name: str
    slug: Optional[str] = None
    logo: Optional[str] = None
    created_at: Optional[datetime] = None


class Member(BackendModel):
    """Membership of a user in an organization."""

    id: str
    organization_id: str
    user_id: str
    role: Role = Role.MEMBER
    created_at: Optional[datetime] = None


class Invitation(BackendModel):
    """An invitation to join an organization."""

    id: str
    organization_id: str
    email: str
    role: Optional[Role] = None
    status: InvitationStatus = InvitationStatus.PENDING
    expires_at: datetime
    inviter_id: str


# ---------------------------------------------------------------------------
# Validated form input
# ---------------------------------------------------------------------------


class LoginInput(BaseModel):
    """Validated login form."""

    email: str
    password: str


class RegisterInput(BaseModel):
    """Validated registration form."""

    name: str
    email: str
    password: str
    confirm_password: str


class ForgotPasswordInput(BaseModel):
    """Validated password-reset request form."""

    email: str


class ResetPasswordInput(BaseModel):
    """Validated new-password form."""

    password: str
    confirm_password: str


class OtpVerificationInput(BaseModel):
    """Validated one-time code."""

    otp: str


class OTPDeliveryRequest(BaseModel):
    """Payload the OTP backend posts when a code must be delivered."""

    email: EmailStr
    otp: str
    type: OTPType
