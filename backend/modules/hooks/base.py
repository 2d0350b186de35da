"""
Shared machinery for action hooks.

A hook instance owns the state of one UI component's auth actions. The
state contract:
- `is_loading` is True only while an action is in flight
- `error` holds the last failure and is cleared when the next attempt starts
- hooks never raise for backend or transport failures; they record them

Concurrent calls on one instance are not serialized. Whichever call settles
last decides the final state.
"""

import logging
from typing import Optional

from modules.auth.exceptions import AuthBackendError, AuthTransportError
from modules.auth.interfaces import IAuthBackend

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


def failure_message(
    error: Exception,
    fallback: str,
    unexpected_fallback: str = DEFAULT_ERROR_MESSAGE,
) -> str:
    """
    Message to surface for a failed action.

    Backend-reported errors are shown verbatim, or `fallback` when the
    backend sent no text. Anything else is shown by its own message, or
    `unexpected_fallback` when it has none.
    """
    if isinstance(error, AuthBackendError):
        return error.message or fallback
    return str(error) or unexpected_fallback


class ActionHook:
    """Base for hooks with a single loading flag and error message."""

    def __init__(self, backend: IAuthBackend):
        self._backend = backend
        self.is_loading = False
        self.error: Optional[str] = None

    def _start(self) -> None:
        self.is_loading = True
        self.error = None

    def _failure(
        self,
        action: str,
        error: Exception,
        fallback: str,
        unexpected_fallback: str = DEFAULT_ERROR_MESSAGE,
    ) -> str:
        """Log a failed action and return the message to surface."""
        log_failure(action, error)
        return failure_message(error, fallback, unexpected_fallback)


def log_failure(action: str, error: Exception) -> None:
    """Log a failed action; full traceback only for unexpected errors."""
    if isinstance(error, AuthBackendError):
        logger.warning(f"{action} rejected by auth backend: {error.code} {error.message!r}")
    elif isinstance(error, AuthTransportError):
        logger.warning(f"{action} failed: {error.message}")
    else:
        logger.exception(f"{action} failed unexpectedly", exc_info=error)
