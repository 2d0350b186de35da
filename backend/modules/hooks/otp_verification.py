"""Email OTP: send a code, check it, verify the email address with it."""

from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import OTPType

from .base import ActionHook


class OTPVerificationHook(ActionHook):
    """
    Wraps the email-OTP operations.

    `is_valid` is None until a code has been checked, then holds the result
    of the most recent check.
    """

    def __init__(self, backend: IAuthBackend):
        super().__init__(backend)
        self.success = False
        self.is_valid: Optional[bool] = None

    async def send_otp(
        self,
        email: str,
        otp_type: OTPType = OTPType.EMAIL_VERIFICATION,
    ) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.send_verification_otp(email, otp_type)
        except Exception as e:
            self.error = self._failure("Send OTP", e, "Failed to send OTP")
        else:
            self.success = True
        finally:
            self.is_loading = False

    async def check_otp(
        self,
        email: str,
        otp: str,
        otp_type: OTPType = OTPType.EMAIL_VERIFICATION,
    ) -> bool:
        """Check a code without consuming it; returns whether it is valid."""
        self._start()
        self.is_valid = None
        try:
            await self._backend.check_verification_otp(email, otp, otp_type)
        except Exception as e:
            self.error = self._failure("Check OTP", e, "Invalid OTP")
            self.is_valid = False
        else:
            self.is_valid = True
        finally:
            self.is_loading = False
        return self.is_valid

    async def verify_email(self, email: str, otp: str) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.verify_email(email, otp)
        except Exception as e:
            self.error = self._failure("Verify email", e, "Failed to verify email")
        else:
            self.success = True
        finally:
            self.is_loading = False
