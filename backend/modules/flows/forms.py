"""
Auth form objects.

A form holds its field values and field errors, validates locally on
submit and only then calls into its hook. A submit that fails validation
never reaches the network.

Backend failures are not field errors: they are exposed as `error`, read
through from the form's hook.
"""

import logging
import re
from typing import Awaitable, Callable, Generic, Mapping, Optional, TypeVar
from urllib.parse import quote

from modules.auth.models import OAuthProvider
from modules.auth.validation import (
    FormResult,
    OTP_LENGTH,
    validate_forgot_password,
    validate_login,
    validate_register,
    validate_reset_password,
)
from modules.hooks import (
    ForgotPasswordHook,
    INavigator,
    LoginHook,
    RegisterHook,
    SignOutHook,
)
from modules.hooks.base import ActionHook

logger = logging.getLogger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=ActionHook)

NON_DIGITS = re.compile(r"[^0-9]")


class _Form(Generic[H]):
    """Field state shared by all forms."""

    FIELDS: tuple[str, ...] = ()

    def __init__(self, hook: H):
        self.hook = hook
        self.data: dict[str, str] = {name: "" for name in self.FIELDS}
        self.field_errors: dict[str, str] = {}

    @property
    def is_loading(self) -> bool:
        return self.hook.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.hook.error

    def set_field(self, name: str, value: str) -> None:
        """Update a field and clear its error."""
        if name not in self.data:
            raise KeyError(f"Unknown field for {type(self).__name__}: {name}")
        self.data[name] = value
        self.field_errors.pop(name, None)

    def update(self, values: Mapping[str, str]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def _validate(self, validator: Callable[[Mapping[str, str]], FormResult[T]]) -> Optional[T]:
        self.field_errors = {}
        result = validator(self.data)
        if not result.ok:
            self.field_errors = dict(result.errors)
            logger.debug(f"{type(self).__name__} rejected locally: {sorted(result.errors)}")
            return None
        return result.value


class LoginForm(_Form[LoginHook]):
    """Email/password sign-in, plus social sign-in buttons."""

    FIELDS = ("email", "password")

    def __init__(self, hook: LoginHook, oauth_hook: RegisterHook):
        super().__init__(hook)
        self.oauth_hook = oauth_hook

    async def submit(self) -> bool:
        value = self._validate(validate_login)
        if value is None:
            return False
        await self.hook.login(value.email, value.password, remember_me=True, callback_url="/")
        return self.hook.success

    async def oauth_login(self, provider: OAuthProvider) -> None:
        await self.oauth_hook.register_with_oauth(
            provider, callback_url="/", error_callback_url="/login"
        )


class RegisterForm(_Form[RegisterHook]):
    """
    Account creation.

    A successful registration sends the user to the email verification
    page for the address they registered with.
    """

    FIELDS = ("name", "email", "password", "confirmPassword")

    def __init__(self, hook: RegisterHook, navigator: INavigator):
        super().__init__(hook)
        self._navigator = navigator

    async def submit(self) -> bool:
        value = self._validate(validate_register)
        if value is None:
            return False
        await self.hook.register(value.name, value.email, value.password)
        if not self.hook.success:
            return False
        self._navigator.push(f"/verify-email?email={quote(value.email, safe='')}")
        return True

    async def oauth_register(self, provider: OAuthProvider) -> None:
        await self.hook.register_with_oauth(
            provider, callback_url="/dashboard", error_callback_url="/register"
        )


class ForgotPasswordForm(_Form[ForgotPasswordHook]):
    """Asks for the account email and sends it a reset code."""

    FIELDS = ("email",)

    def __init__(
        self,
        hook: ForgotPasswordHook,
        on_otp_sent: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(hook)
        self._on_otp_sent = on_otp_sent

    async def submit(self) -> bool:
        value = self._validate(validate_forgot_password)
        if value is None:
            return False
        await self.hook.send_reset_otp(value.email)
        if not self.hook.success:
            return False
        if self._on_otp_sent is not None:
            self._on_otp_sent(value.email)
        return True


class ResetPasswordForm(_Form[ForgotPasswordHook]):
    """Collects the new password for an email and code already obtained."""

    FIELDS = ("password", "confirmPassword")

    def __init__(
        self,
        hook: ForgotPasswordHook,
        email: str,
        otp: str,
        on_password_reset: Optional[Callable[[], None]] = None,
    ):
        super().__init__(hook)
        self.email = email
        self.otp = otp
        self._on_password_reset = on_password_reset

    async def submit(self) -> bool:
        value = self._validate(validate_reset_password)
        if value is None:
            return False
        await self.hook.reset_password(self.email, self.otp, value.password)
        if not self.hook.success:
            return False
        if self._on_password_reset is not None:
            self._on_password_reset()
        return True


class OtpForm:
    """
    One-time code entry.

    Input is reduced to digits and cut at OTP_LENGTH characters. Loading
    and error state come from whichever hook the surrounding flow uses.
    """

    def __init__(
        self,
        hook: ActionHook,
        on_submit: Callable[[str], Awaitable[None]],
        on_resend: Optional[Callable[[], Awaitable[None]]] = None,
        email: str = "",
    ):
        self.hook = hook
        self.email = email
        self.value = ""
        self._on_submit = on_submit
        self._on_resend = on_resend

    @property
    def is_loading(self) -> bool:
        return self.hook.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.hook.error

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and len(self.value) == OTP_LENGTH

    @property
    def can_resend(self) -> bool:
        return self._on_resend is not None and not self.is_loading

    def set_value(self, value: str) -> None:
        self.value = NON_DIGITS.sub("", value)[:OTP_LENGTH]

    async def submit(self) -> bool:
        """Hand the code to the flow; refused while `can_submit` is false."""
        if not self.can_submit:
            return False
        await self._on_submit(self.value)
        return True

    async def resend(self) -> bool:
        if not self.can_resend:
            return False
        await self._on_resend()
        return True


class LogoutButton:
    """Signs out and redirects, to /login unless told otherwise."""

    def __init__(self, hook: SignOutHook, redirect_to: str = "/login"):
        self.hook = hook
        self.redirect_to = redirect_to

    @property
    def is_loading(self) -> bool:
        return self.hook.is_loading

    async def click(self) -> None:
        if self.is_loading:
            return
        await self.hook.sign_out(redirect_to=self.redirect_to)
