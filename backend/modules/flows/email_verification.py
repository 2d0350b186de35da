"""Email verification flow: enter the emailed code, then go home."""

import logging
from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import OTPType
from modules.hooks import INavigator, OTPVerificationHook

from .forms import OtpForm

logger = logging.getLogger(__name__)

VERIFIED_URL = "/"


class EmailVerificationFlow:
    """
    Drives the verify-email page for one address.

    The user is sent to VERIFIED_URL only after verify-email succeeds.
    A resend marks the hook successful too, but never navigates.
    """

    def __init__(self, backend: IAuthBackend, navigator: INavigator, email: str):
        self._navigator = navigator
        self.email = email
        self.verified = False
        self.hook = OTPVerificationHook(backend)
        self.otp_form = OtpForm(
            self.hook,
            on_submit=self._verify,
            on_resend=self.resend_otp,
            email=email,
        )

    @property
    def otp(self) -> str:
        return self.otp_form.value

    @property
    def error(self) -> Optional[str]:
        return self.hook.error

    @property
    def is_loading(self) -> bool:
        return self.hook.is_loading

    @property
    def can_submit(self) -> bool:
        return self.otp_form.can_submit

    def set_otp(self, value: str) -> None:
        self.otp_form.set_value(value)

    async def submit(self) -> bool:
        """Verify the entered code; False if refused locally or rejected."""
        if not await self.otp_form.submit():
            return False
        return self.verified

    async def _verify(self, otp: str) -> None:
        await self.hook.verify_email(self.email, otp)
        if self.hook.success:
            logger.info(f"Email verified for {self.email}")
            self.verified = True
            self._navigator.push(VERIFIED_URL)

    async def resend_otp(self) -> None:
        if not self.email:
            return
        await self.hook.send_otp(self.email, OTPType.EMAIL_VERIFICATION)
