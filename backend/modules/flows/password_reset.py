"""
Password reset flow.

    request --(reset code sent)--> verify --(6 digits entered)--> reset
        --(password reset)--> complete

The code is not checked on its way from `verify` to `reset`: it is carried
forward and the backend validates it when the new password is submitted.
A failed call leaves the flow where it is with the error on the active
form; nothing is retried automatically.
"""

import logging
from enum import Enum
from typing import Optional, Union

from modules.auth.exceptions import InvalidFlowStepError
from modules.auth.interfaces import IAuthBackend
from modules.hooks import ForgotPasswordHook, INavigator

from .forms import ForgotPasswordForm, OtpForm, ResetPasswordForm

logger = logging.getLogger(__name__)

RESET_SUCCESS_URL = "/login?reset=success"


class PasswordResetStep(str, Enum):
    REQUEST = "request"
    VERIFY = "verify"
    RESET = "reset"
    COMPLETE = "complete"


class PasswordResetFlow:
    """
    Drives the forgot-password page.

    Each step has its own form and hook instance, so a failure in one step
    never shows up on another. Passing `email` (the page's deep link)
    starts the flow at `verify` for that address.

    Step operations raise InvalidFlowStepError when called from any other
    step, leaving the flow unchanged.
    """

    def __init__(
        self,
        backend: IAuthBackend,
        navigator: INavigator,
        email: Optional[str] = None,
    ):
        self._backend = backend
        self._navigator = navigator

        self.email = email or ""
        self.step = PasswordResetStep.VERIFY if email else PasswordResetStep.REQUEST

        # Resends in `verify` go through the flow's own hook
        self.hook = ForgotPasswordHook(backend)

        self.request_form = ForgotPasswordForm(
            ForgotPasswordHook(backend), on_otp_sent=self.handle_otp_sent
        )
        self.otp_form = OtpForm(
            self.hook,
            on_submit=self._accept_otp,
            on_resend=self.resend_otp,
            email=self.email,
        )
        self.reset_form: Optional[ResetPasswordForm] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def active_form(self) -> Union[ForgotPasswordForm, OtpForm, ResetPasswordForm, None]:
        """Form to render for the current step; None once complete."""
        if self.step == PasswordResetStep.REQUEST:
            return self.request_form
        if self.step == PasswordResetStep.VERIFY:
            return self.otp_form
        if self.step == PasswordResetStep.RESET:
            return self.reset_form
        return None

    @property
    def error(self) -> Optional[str]:
        form = self.active_form
        return form.error if form is not None else None

    @property
    def is_loading(self) -> bool:
        form = self.active_form
        return form.is_loading if form is not None else False

    @property
    def otp(self) -> str:
        return self.otp_form.value

    @property
    def can_submit_otp(self) -> bool:
        return self.step == PasswordResetStep.VERIFY and self.otp_form.can_submit

    def _require(self, step: PasswordResetStep) -> None:
        if self.step != step:
            raise InvalidFlowStepError(step.value, self.step.value)

    def _move_to(self, step: PasswordResetStep) -> None:
        logger.debug(f"Password reset: {self.step.value} -> {step.value}")
        self.step = step

    # -------------------------------------------------------------------------
    # request
    # -------------------------------------------------------------------------

    async def submit_email(self, email: str) -> bool:
        """Send a reset code to `email`; moves to `verify` on success."""
        self._require(PasswordResetStep.REQUEST)
        self.request_form.set_field("email", email)
        return await self.request_form.submit()

    def handle_otp_sent(self, email: str) -> None:
        """
        Record the address a code went to and show the code entry.

        Overlapping sends may settle after the flow already reached
        `verify`; the last one to settle sets the carried email.
        """
        if self.step != PasswordResetStep.VERIFY:
            self._require(PasswordResetStep.REQUEST)
        self.email = email
        self.otp_form.email = email
        if self.step == PasswordResetStep.REQUEST:
            self._move_to(PasswordResetStep.VERIFY)
        else:
            logger.debug("Password reset: later send settled, email updated")

    # -------------------------------------------------------------------------
    # verify
    # -------------------------------------------------------------------------

    def set_otp(self, value: str) -> None:
        self._require(PasswordResetStep.VERIFY)
        self.otp_form.set_value(value)

    async def submit_otp(self) -> bool:
        """Move to `reset` once a full code is entered; no network call."""
        self._require(PasswordResetStep.VERIFY)
        return await self.otp_form.submit()

    async def _accept_otp(self, otp: str) -> None:
        self._require(PasswordResetStep.VERIFY)
        self.reset_form = ResetPasswordForm(
            ForgotPasswordHook(self._backend),
            email=self.email,
            otp=otp,
            on_password_reset=self.handle_password_reset,
        )
        self._move_to(PasswordResetStep.RESET)

    async def resend_otp(self) -> bool:
        """Send another code to the carried email; the step does not change."""
        self._require(PasswordResetStep.VERIFY)
        if not self.email:
            return False
        await self.hook.send_reset_otp(self.email)
        return self.hook.success

    # -------------------------------------------------------------------------
    # reset
    # -------------------------------------------------------------------------

    async def submit_new_password(self, password: str, confirm_password: str) -> bool:
        """Reset the password with the carried email and code."""
        self._require(PasswordResetStep.RESET)
        self.reset_form.update({"password": password, "confirmPassword": confirm_password})
        return await self.reset_form.submit()

    def handle_password_reset(self) -> None:
        self._require(PasswordResetStep.RESET)
        self._move_to(PasswordResetStep.COMPLETE)
        self._navigator.push(RESET_SUCCESS_URL)
