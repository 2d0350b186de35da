"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.dependencies import reset_container
from modules.auth.interfaces import IAuthBackend
from modules.auth.models import SessionData, SessionInfo, UserData
from shared.config import Settings
from shared.database import reset_client_cache


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and database client before and after each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        better_auth_secret="test-auth-secret",
        better_auth_url="http://auth.test",
        app_url="http://app.test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-service-key",
    )


@pytest.fixture
def backend() -> AsyncMock:
    """Auth backend double; every operation succeeds unless told otherwise."""
    return AsyncMock(spec=IAuthBackend)


@pytest.fixture
def navigator() -> MagicMock:
    """Records navigation through navigator.push."""
    return MagicMock()


@pytest.fixture
def make_session():
    """Factory for resolved sessions."""

    def _make(
        user_id: str = "user-123",
        email: str = "test@example.com",
        role: Optional[str] = "user",
        banned: bool = False,
        ban_reason: Optional[str] = None,
        ban_expires: Optional[datetime] = None,
        token: str = "session-token",
        expires_in: timedelta = timedelta(days=7),
    ) -> SessionInfo:
        now = datetime.now(timezone.utc)
        return SessionInfo(
            user=UserData(
                id=user_id,
                email=email,
                name="Test User",
                email_verified=True,
                role=role,
                banned=banned,
                ban_reason=ban_reason,
                ban_expires=ban_expires,
            ),
            session=SessionData(
                id=f"session-{user_id}",
                user_id=user_id,
                token=token,
                expires_at=now + expires_in,
                created_at=now,
            ),
        )

    return _make


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "user-123"


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers carrying a session token."""
    return {"Authorization": "Bearer session-token"}
