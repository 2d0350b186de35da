"""Password reset by email OTP."""

import logging
from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import OTPType
from shared.exceptions import LaunchKitError

from .base import ActionHook

logger = logging.getLogger(__name__)


class ForgotPasswordHook(ActionHook):
    """
    Sends reset codes and resets passwords.

    A successful reset also revokes the account's other sessions. The
    password has changed by then, so a failed revoke is logged and does
    not turn the reset into a failure.
    """

    def __init__(self, backend: IAuthBackend):
        super().__init__(backend)
        self.success = False
        self.is_otp_valid: Optional[bool] = None

    async def send_reset_otp(self, email: str) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.forget_password_email_otp(email)
        except Exception as e:
            self.error = self._failure("Send reset OTP", e, "Failed to send reset OTP")
        else:
            self.success = True
        finally:
            self.is_loading = False

    async def check_reset_otp(self, email: str, otp: str) -> bool:
        self._start()
        self.is_otp_valid = None
        try:
            await self._backend.check_verification_otp(email, otp, OTPType.FORGET_PASSWORD)
        except Exception as e:
            self.error = self._failure("Check reset OTP", e, "Invalid OTP")
            self.is_otp_valid = False
        else:
            self.is_otp_valid = True
        finally:
            self.is_loading = False
        return self.is_otp_valid

    async def reset_password(self, email: str, otp: str, password: str) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.reset_password_email_otp(email, otp, password)
            await self._revoke_other_sessions()
        except Exception as e:
            self.error = self._failure("Reset password", e, "Failed to reset password")
        else:
            self.success = True
        finally:
            self.is_loading = False

    async def _revoke_other_sessions(self) -> None:
        try:
            await self._backend.revoke_other_sessions()
        except LaunchKitError as e:
            logger.warning(f"Password reset succeeded but revoking other sessions failed: {e}")
