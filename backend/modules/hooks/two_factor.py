"""TOTP two-factor enrollment, verification and removal."""

from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import TwoFactorSetup

from .base import log_failure, failure_message


class TwoFactorHook:
    """
    Two-factor settings for the signed-in user.

    Enrollment is two calls: enable_two_factor() returns the otpauth URI
    and backup codes to show the user, and verify_two_factor() confirms a
    code from their authenticator app.
    """

    def __init__(self, backend: IAuthBackend):
        self._backend = backend

        self.is_enabling = False
        self.enable_error: Optional[str] = None

        self.is_verifying = False
        self.verify_error: Optional[str] = None
        self.verify_success = False

        self.is_disabling = False
        self.disable_error: Optional[str] = None
        self.disable_success = False

    def _clear_errors(self) -> None:
        self.enable_error = None
        self.verify_error = None
        self.disable_error = None

    async def enable_two_factor(self, password: str) -> Optional[TwoFactorSetup]:
        """Start enrollment; None on failure."""
        self.is_enabling = True
        self._clear_errors()
        try:
            return await self._backend.enable_two_factor(password)
        except Exception as e:
            log_failure("Enable two-factor", e)
            self.enable_error = failure_message(
                e,
                "Failed to enable two-factor authentication",
                "An error occurred while enabling 2FA",
            )
            return None
        finally:
            self.is_enabling = False

    async def verify_two_factor(self, code: str) -> None:
        self.is_verifying = True
        self._clear_errors()
        self.verify_success = False
        try:
            await self._backend.verify_totp(code)
        except Exception as e:
            log_failure("Verify two-factor", e)
            self.verify_error = failure_message(
                e, "Failed to verify code", "An error occurred during verification"
            )
        else:
            self.verify_success = True
        finally:
            self.is_verifying = False

    async def disable_two_factor(self, password: str) -> None:
        self.is_disabling = True
        self._clear_errors()
        self.disable_success = False
        try:
            await self._backend.disable_two_factor(password)
        except Exception as e:
            log_failure("Disable two-factor", e)
            self.disable_error = failure_message(
                e,
                "Failed to disable two-factor authentication",
                "An error occurred while disabling 2FA",
            )
        else:
            self.disable_success = True
        finally:
            self.is_disabling = False
