"""
Current session and session management.

SessionHook tracks the signed-in session and lets the user list and revoke
the sessions of their account. Each action has its own in-flight flag;
starting any action clears every error so that at most one is set once
that action settles.
"""

from typing import Optional

from modules.auth.interfaces import IAuthBackend
from modules.auth.models import SessionData, SessionInfo

from .base import log_failure, failure_message


class SessionHook:
    """
    Session state for one UI context.

    `is_loading` starts True and stays True until the first load() settles,
    mirroring a component that fetches its session on mount.
    """

    def __init__(self, backend: IAuthBackend):
        self._backend = backend
        self.session: Optional[SessionInfo] = None
        self.is_loading = True
        self.error: Optional[str] = None

        self.is_refreshing = False
        self.is_listing_sessions = False
        self.is_revoking_session = False
        self.is_revoking_other_sessions = False
        self.list_error: Optional[str] = None
        self.revoke_error: Optional[str] = None

    def _clear_errors(self) -> None:
        self.error = None
        self.list_error = None
        self.revoke_error = None

    async def _fetch_session(self) -> None:
        try:
            info = await self._backend.get_session()
        except Exception as e:
            log_failure("Fetch session", e)
            self.error = failure_message(e, "Failed to fetch session")
            self.session = None
        else:
            self.session = info

    async def load(self) -> None:
        """Fetch the current session."""
        self.is_loading = True
        self._clear_errors()
        try:
            await self._fetch_session()
        finally:
            self.is_loading = False

    async def refresh_session(self) -> None:
        """Re-fetch the current session without touching `is_loading`."""
        self.is_refreshing = True
        self._clear_errors()
        try:
            await self._fetch_session()
        finally:
            self.is_refreshing = False

    async def list_sessions(self) -> list[SessionData]:
        """List the account's sessions; empty on failure."""
        self.is_listing_sessions = True
        self._clear_errors()
        try:
            return await self._backend.list_sessions()
        except Exception as e:
            log_failure("List sessions", e)
            self.list_error = failure_message(
                e, "Failed to list sessions", "An error occurred while listing sessions"
            )
            return []
        finally:
            self.is_listing_sessions = False

    async def revoke_session(self, token: str) -> None:
        """Revoke one session by its token, then refresh the current one."""
        self.is_revoking_session = True
        self._clear_errors()
        try:
            await self._backend.revoke_session(token)
        except Exception as e:
            log_failure("Revoke session", e)
            self.revoke_error = failure_message(
                e, "Failed to revoke session", "An error occurred while revoking session"
            )
            return
        finally:
            self.is_revoking_session = False
        await self.refresh_session()

    async def revoke_other_sessions(self) -> None:
        """Revoke every session except the current one, then refresh."""
        self.is_revoking_other_sessions = True
        self._clear_errors()
        try:
            await self._backend.revoke_other_sessions()
        except Exception as e:
            log_failure("Revoke other sessions", e)
            self.revoke_error = failure_message(
                e,
                "Failed to revoke other sessions",
                "An error occurred while revoking other sessions",
            )
            return
        finally:
            self.is_revoking_other_sessions = False
        await self.refresh_session()
