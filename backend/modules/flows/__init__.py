"""
Auth flows.

Multi-step flow controllers and the form objects they activate.

Public API:
- PasswordResetFlow / PasswordResetStep
- EmailVerificationFlow
- Forms: LoginForm, RegisterForm, ForgotPasswordForm, ResetPasswordForm,
  OtpForm, LogoutButton
"""

from .forms import (
    ForgotPasswordForm,
    LoginForm,
    LogoutButton,
    OtpForm,
    RegisterForm,
    ResetPasswordForm,
)
from .password_reset import RESET_SUCCESS_URL, PasswordResetFlow, PasswordResetStep
from .email_verification import VERIFIED_URL, EmailVerificationFlow

__all__ = [
    "ForgotPasswordForm",
    "LoginForm",
    "LogoutButton",
    "OtpForm",
    "RegisterForm",
    "ResetPasswordForm",
    "RESET_SUCCESS_URL",
    "PasswordResetFlow",
    "PasswordResetStep",
    "VERIFIED_URL",
    "EmailVerificationFlow",
]
