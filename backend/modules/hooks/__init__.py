"""
Auth hooks.

Stateful wrappers around the auth backend, one instance per UI component.
Each exposes async actions plus loading / error / success state that the
UI renders from.

Public API:
- LoginHook, RegisterHook, SignOutHook
- OTPVerificationHook, ForgotPasswordHook
- SessionHook, TwoFactorHook
- INavigator: what hooks and flows use to move the user
"""

from .interfaces import INavigator
from .base import DEFAULT_ERROR_MESSAGE, failure_message
from .login import LoginHook
from .register import RegisterHook
from .sign_out import SignOutHook
from .otp_verification import OTPVerificationHook
from .forgot_password import ForgotPasswordHook
from .session import SessionHook
from .two_factor import TwoFactorHook

__all__ = [
    "INavigator",
    "DEFAULT_ERROR_MESSAGE",
    "failure_message",
    "LoginHook",
    "RegisterHook",
    "SignOutHook",
    "OTPVerificationHook",
    "ForgotPasswordHook",
    "SessionHook",
    "TwoFactorHook",
]
