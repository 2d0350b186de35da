"""Email/password sign-in."""

from typing import Optional

from modules.auth.interfaces import IAuthBackend

from .base import ActionHook


class LoginHook(ActionHook):
    """Signs a user in with email and password."""

    def __init__(self, backend: IAuthBackend):
        super().__init__(backend)
        self.success = False

    async def login(
        self,
        email: str,
        password: str,
        remember_me: Optional[bool] = None,
        callback_url: Optional[str] = None,
    ) -> None:
        self._start()
        self.success = False
        try:
            await self._backend.sign_in_email(
                email,
                password,
                remember_me=remember_me,
                callback_url=callback_url,
            )
        except Exception as e:
            self.error = self._failure("Sign-in", e, "Failed to sign in")
        else:
            self.success = True
        finally:
            self.is_loading = False
