"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The auth backend is an external HTTP service; swapping it for another
implementation of IAuthBackend only requires a change here.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.backend import AuthBackendClient
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import AccountRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.

    The shared auth backend client carries no session of its own; requests
    made on behalf of a user go through user_backend() instead.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._auth_backend: "AuthBackendClient | None" = None
        self._account_repository: "AccountRepository | None" = None
        self._auth_service: "IAuthService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def auth_backend(self) -> "AuthBackendClient":
        """Get the shared auth backend client."""
        if self._auth_backend is None:
            from modules.auth.backend import AuthBackendClient
            self._auth_backend = AuthBackendClient(self.settings)
        return self._auth_backend

    @property
    def accounts(self) -> "AccountRepository":
        """Get the account repository instance."""
        if self._account_repository is None:
            from modules.auth.repository import AccountRepository
            from shared.database import get_supabase_client
            self._account_repository = AccountRepository(get_supabase_client(self.settings))
        return self._account_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                self.settings,
                backend=self.auth_backend,
                repository=self._account_repository,
            )
        return self._auth_service

    def user_backend(self, session_token: str) -> "AuthBackendClient":
        """Create a backend client acting as the holder of session_token."""
        from modules.auth.backend import AuthBackendClient
        return AuthBackendClient(self.settings, session_token=session_token)

    async def aclose(self) -> None:
        """Close the shared backend client, if one was created."""
        if self._auth_backend is not None:
            await self._auth_backend.aclose()
        self._auth_backend = None

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_backend = None
        self._account_repository = None
        self._auth_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for settings."""
    return get_container().settings


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_account_repository() -> "AccountRepository":
    """FastAPI dependency for account repository."""
    return get_container().accounts

