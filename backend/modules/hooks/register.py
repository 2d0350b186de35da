"""Registration: email sign-up, social sign-up and the follow-up verification OTP."""

import logging
from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import OAuthProvider, OTPType

from .base import ActionHook
from .interfaces import INavigator

logger = logging.getLogger(__name__)

OAUTH_ERROR_MESSAGE = "Failed to sign in with OAuth"


class RegisterHook(ActionHook):
    """
    Creates accounts.

    Social sign-up resolves to a provider authorization URL. It is kept in
    `redirect_url` and, when a navigator is attached, followed immediately.
    """

    def __init__(self, backend: IAuthBackend, navigator: Optional[INavigator] = None):
        super().__init__(backend)
        self._navigator = navigator
        self.success = False
        self.redirect_url: Optional[str] = None

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        image: Optional[str] = None,
    ) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.sign_up_email(name, email, password, image=image)
        except Exception as e:
            self.error = self._failure("Registration", e, "Failed to register")
        else:
            self.success = True
        finally:
            self.is_loading = False

    async def register_with_oauth(
        self,
        provider: OAuthProvider,
        callback_url: str = "/",
        error_callback_url: str = "/register",
    ) -> None:
        self._start()
        self.success = False
        try:
            result = await self._backend.sign_in_social(
                provider,
                callback_url=callback_url,
                error_callback_url=error_callback_url,
            )
        except Exception as e:
            self.error = self._failure("OAuth sign-in", e, OAUTH_ERROR_MESSAGE, OAUTH_ERROR_MESSAGE)
        else:
            self.redirect_url = result.url
            self.success = True
            if result.url and self._navigator is not None:
                logger.debug(f"Redirecting to {OAuthProvider(provider).value} authorization")
                self._navigator.push(result.url)
        finally:
            self.is_loading = False

    async def send_verification_otp(self, email: str) -> None:
        self._start()
        try:
            await self._backend.send_verification_otp(email, OTPType.EMAIL_VERIFICATION)
        except Exception as e:
            self.error = self._failure(
                "Verification OTP", e, "Failed to send verification OTP"
            )
        else:
            self.success = True
        finally:
            self.is_loading = False
