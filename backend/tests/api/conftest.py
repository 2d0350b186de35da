"""
Fixtures for API tests.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import get_app_settings, get_auth_service
from modules.auth.interfaces import IAuthService


@pytest.fixture
def app(settings):
    """Fresh application with settings pinned for the test."""
    application = create_app()
    application.dependency_overrides[get_app_settings] = lambda: settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_service(app) -> AsyncMock:
    """Auth service double wired into the app."""
    service = AsyncMock(spec=IAuthService)
    app.dependency_overrides[get_auth_service] = lambda: service
    return service
