"""
Tests for bearer session authentication.
"""

from datetime import datetime, timezone

from shared.models import AuthenticatedUser
from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError


def make_user(**overrides) -> AuthenticatedUser:
    data = {
        "id": "user-123",
        "email": "test@example.com",
        "name": "Test User",
        "email_verified": True,
        "role": "user",
    }
    data.update(overrides)
    return AuthenticatedUser(**data)


class TestAuthentication:

    def test_missing_header(self, client, auth_service):
        """Requests without a bearer token are rejected before the service is called."""
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing authorization header"
        assert response.headers["www-authenticate"] == "Bearer"
        auth_service.validate_token.assert_not_awaited()

    def test_valid_token(self, client, auth_service, auth_headers):
        auth_service.validate_token.return_value = make_user()

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "id": "user-123",
            "email": "test@example.com",
            "name": "Test User",
            "email_verified": True,
            "role": "user",
            "session_expires_at": None,
        }
        auth_service.validate_token.assert_awaited_once_with("session-token")

    def test_reports_session_expiry(self, client, auth_service, auth_headers):
        auth_service.validate_token.return_value = make_user(
            session_id="session-user-123",
            session_expires_at=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.json()["session_expires_at"].startswith("2030-01-01T00:00:00")
        assert "session_id" not in response.json()

    def test_invalid_token(self, client, auth_service, auth_headers):
        auth_service.validate_token.side_effect = InvalidTokenError()

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid authentication token"

    def test_expired_session(self, client, auth_service, auth_headers):
        auth_service.validate_token.side_effect = ExpiredTokenError()

        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 401
        assert "expired" in response.json()["detail"].lower()

    def test_non_bearer_scheme(self, client, auth_service):
        response = client.get("/api/users/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401
