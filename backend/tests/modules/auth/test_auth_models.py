"""Tests for auth models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from modules.auth.models import (
    OTPDeliveryRequest,
    OTPType,
    SessionData,
    TwoFactorSetup,
    UserData,
)


class TestUserData:
    def test_accepts_camel_and_snake_case(self):
        camel = UserData.model_validate({"id": "1", "email": "a@b.com", "emailVerified": True})
        snake = UserData.model_validate({"id": "1", "email": "a@b.com", "email_verified": True})
        assert camel.email_verified is True
        assert snake.email_verified is True

    def test_defaults(self):
        user = UserData(id="1", email="a@b.com")
        assert user.role == "user"
        assert user.banned is False

    def test_ignores_unknown_fields(self):
        user = UserData.model_validate({"id": "1", "email": "a@b.com", "twoFactorEnabled": True})
        assert user.id == "1"


class TestSessionData:
    def test_is_expired(self):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        session = SessionData(id="s", user_id="u", token="t", expires_at=now)
        assert session.is_expired(now=now) is True
        assert session.is_expired(now=now - timedelta(seconds=1)) is False

    def test_naive_expiry_is_utc(self):
        session = SessionData(id="s", user_id="u", token="t", expires_at=datetime(2025, 1, 1))
        assert session.is_expired(now=datetime(2025, 1, 2, tzinfo=timezone.utc)) is True


class TestTwoFactorSetup:
    def test_parses_backend_keys(self):
        setup = TwoFactorSetup.model_validate({"totpURI": "otpauth://x", "backupCodes": ["1"]})
        assert setup.totp_uri == "otpauth://x"
        assert setup.backup_codes == ["1"]


class TestOTPDeliveryRequest:
    def test_valid(self):
        request = OTPDeliveryRequest(email="a@b.com", otp="123456", type="sign-in")
        assert request.type == OTPType.SIGN_IN

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            OTPDeliveryRequest(email="a@b.com", otp="123456", type="magic-link")
