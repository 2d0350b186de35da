"""Sign-out with optional callbacks and redirect."""

from typing import Callable, Optional

from modules.auth.exceptions import AuthActionError
from modules.auth.interfaces import IAuthBackend

from .base import ActionHook
from .interfaces import INavigator


class SignOutHook(ActionHook):
    """Ends the current session."""

    def __init__(self, backend: IAuthBackend, navigator: INavigator):
        super().__init__(backend)
        self._navigator = navigator

    async def sign_out(
        self,
        on_success: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[AuthActionError], None]] = None,
        redirect_to: Optional[str] = None,
    ) -> None:
        """
        Sign out of the current session.

        On success, calls on_success and then navigates to redirect_to (if
        given). On failure, records the error and hands it to on_error.
        """
        self._start()
        try:
            await self._backend.sign_out()
        except Exception as e:
            message = self._failure("Sign-out", e, "Failed to sign out")
            self.error = message
            if on_error is not None:
                on_error(AuthActionError(message))
        else:
            if on_success is not None:
                on_success()
            if redirect_to:
                self._navigator.push(redirect_to)
        finally:
            self.is_loading = False
