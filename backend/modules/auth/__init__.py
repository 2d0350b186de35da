"""
Authentication module.

Handles session resolution against the auth backend, form validation,
role guards, account lookups and OTP delivery.

Public API:
- IAuthBackend / AuthBackendClient: the external auth backend
- IAuthService / AuthService: session-token validation and profiles
- Guards: require_auth, require_role, require_admin, ...
- Validation: validate_login, validate_register, ...
- Auth exceptions: InvalidTokenError, AuthBackendError, etc.
"""

from .interfaces import IAuthBackend, IAuthService
from .backend import AuthBackendClient
from .service import AuthService
from .repository import AccountRepository
from .models import (
    OAuthProvider,
    OTPDeliveryRequest,
    OTPType,
    Role,
    SessionData,
    SessionInfo,
    TwoFactorSetup,
    UserData,
    UserProfile,
)
from .guards import (
    has_any_role,
    has_role,
    is_admin,
    is_authenticated,
    is_banned,
    is_owner,
    require_admin,
    require_any_role,
    require_auth,
    require_not_banned,
    require_owner,
    require_role,
)
from .validation import (
    FormResult,
    validate_forgot_password,
    validate_login,
    validate_otp,
    validate_register,
    validate_reset_password,
)
from .exceptions import (
    AccountBannedError,
    AuthActionError,
    AuthBackendError,
    AuthTransportError,
    ExpiredTokenError,
    InsufficientPermissionsError,
    InvalidFlowStepError,
    InvalidTokenError,
    MissingTokenError,
    NotAuthenticatedError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces and implementations
    "IAuthBackend",
    "IAuthService",
    "AuthBackendClient",
    "AuthService",
    "AccountRepository",
    # Models
    "OAuthProvider",
    "OTPDeliveryRequest",
    "OTPType",
    "Role",
    "SessionData",
    "SessionInfo",
    "TwoFactorSetup",
    "UserData",
    "UserProfile",
    # Guards
    "has_any_role",
    "has_role",
    "is_admin",
    "is_authenticated",
    "is_banned",
    "is_owner",
    "require_admin",
    "require_any_role",
    "require_auth",
    "require_not_banned",
    "require_owner",
    "require_role",
    # Validation
    "FormResult",
    "validate_forgot_password",
    "validate_login",
    "validate_otp",
    "validate_register",
    "validate_reset_password",
    # Exceptions
    "AccountBannedError",
    "AuthActionError",
    "AuthBackendError",
    "AuthTransportError",
    "ExpiredTokenError",
    "InsufficientPermissionsError",
    "InvalidFlowStepError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotAuthenticatedError",
    "UserNotFoundError",
]
