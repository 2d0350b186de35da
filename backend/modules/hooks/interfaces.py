"""
Hooks module interfaces.

INavigator is the one piece of the hosting UI the hooks and flows need:
the ability to send the user somewhere else.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class INavigator(Protocol):
    """Moves the user to another location (client-side route or full URL)."""

    def push(self, url: str) -> None:
        """
        Navigate to a URL.

        Args:
            url: Path within the app (e.g. "/login") or an absolute URL
        """
        ...
