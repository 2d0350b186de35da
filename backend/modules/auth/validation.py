"""
Local form validation.

One validator per form. Each returns a FormResult that either carries the
typed, validated input or a map of field name -> first error message.
Validation runs before any network call; a failed result must block
submission.

Field keys match the form field names (`confirmPassword` included), so
errors can be attached to inputs directly.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Generic, Mapping, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email

from .models import (
    ForgotPasswordInput,
    LoginInput,
    OtpVerificationInput,
    RegisterInput,
    ResetPasswordInput,
)

T = TypeVar("T")

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
OTP_LENGTH = 6

NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")
DIGITS_PATTERN = re.compile(r"[0-9]+")

# (pattern, message) pairs checked in order after the length rule
PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
    (re.compile(r"[^A-Za-z0-9]"), "Password must contain at least one special character"),
]


@dataclass(frozen=True)
class FormResult(Generic[T]):
    """Outcome of validating one form."""

    value: Optional[T] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


# ---------------------------------------------------------------------------
# Field checks: each returns an error message or None
# ---------------------------------------------------------------------------


def check_email(value: str) -> Optional[str]:
    if not value:
        return "Email is required"
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Please enter a valid email address"
    return None


def check_strong_password(value: str) -> Optional[str]:
    if len(value) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(value):
            return message
    return None


def check_name(value: str) -> Optional[str]:
    if len(value) < NAME_MIN_LENGTH:
        return f"Name must be at least {NAME_MIN_LENGTH} characters"
    if len(value) > NAME_MAX_LENGTH:
        return f"Name must not exceed {NAME_MAX_LENGTH} characters"
    if not NAME_PATTERN.match(value):
        return "Name can only contain letters, spaces, hyphens, and apostrophes"
    return None


def check_otp(value: str) -> Optional[str]:
    if len(value) != OTP_LENGTH:
        return f"OTP must be exactly {OTP_LENGTH} digits"
    if not DIGITS_PATTERN.fullmatch(value):
        return "OTP must contain only numbers"
    return None


def check_password_confirmation(password: str, confirm_password: str) -> Optional[str]:
    if not confirm_password:
        return "Please confirm your password"
    if password != confirm_password:
        return "Passwords do not match"
    return None


def _collect(data: Mapping[str, str], checks: dict[str, Callable[[str], Optional[str]]]) -> dict[str, str]:
    errors = {}
    for name, check in checks.items():
        message = check(data.get(name, "") or "")
        if message:
            errors[name] = message
    return errors


# ---------------------------------------------------------------------------
# Form validators
# ---------------------------------------------------------------------------


def validate_login(data: Mapping[str, str]) -> FormResult[LoginInput]:
    """Validate the login form (`email`, `password`)."""
    errors = _collect(data, {
        "email": check_email,
        "password": lambda v: None if v else "Password is required",
    })
    if errors:
        return FormResult(errors=errors)
    return FormResult(value=LoginInput(email=data["email"], password=data["password"]))


def validate_register(data: Mapping[str, str]) -> FormResult[RegisterInput]:
    """Validate the registration form (`name`, `email`, `password`, `confirmPassword`)."""
    errors = _collect(data, {
        "name": check_name,
        "email": check_email,
        "password": check_strong_password,
    })
    mismatch = check_password_confirmation(
        data.get("password", "") or "", data.get("confirmPassword", "") or ""
    )
    if mismatch:
        errors["confirmPassword"] = mismatch
    if errors:
        return FormResult(errors=errors)
    return FormResult(value=RegisterInput(
        name=data["name"],
        email=data["email"],
        password=data["password"],
        confirm_password=data["confirmPassword"],
    ))


def validate_forgot_password(data: Mapping[str, str]) -> FormResult[ForgotPasswordInput]:
    """Validate the password-reset request form (`email`)."""
    errors = _collect(data, {"email": check_email})
    if errors:
        return FormResult(errors=errors)
    return FormResult(value=ForgotPasswordInput(email=data["email"]))


def validate_reset_password(data: Mapping[str, str]) -> FormResult[ResetPasswordInput]:
    """Validate the new-password form (`password`, `confirmPassword`)."""
    errors = _collect(data, {"password": check_strong_password})
    mismatch = check_password_confirmation(
        data.get("password", "") or "", data.get("confirmPassword", "") or ""
    )
    if mismatch:
        errors["confirmPassword"] = mismatch
    if errors:
        return FormResult(errors=errors)
    return FormResult(value=ResetPasswordInput(
        password=data["password"],
        confirm_password=data["confirmPassword"],
    ))


def validate_otp(data: Mapping[str, str]) -> FormResult[OtpVerificationInput]:
    """Validate a one-time code (`otp`)."""
    errors = _collect(data, {"otp": check_otp})
    if errors:
        return FormResult(errors=errors)
    return FormResult(value=OtpVerificationInput(otp=data["otp"]))
