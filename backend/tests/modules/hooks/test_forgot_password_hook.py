"""Tests for ForgotPasswordHook."""

from unittest.mock import call

import pytest

from modules.auth.exceptions import AuthBackendError, AuthTransportError
from modules.auth.models import OTPType
from modules.hooks import ForgotPasswordHook


class TestSendResetOtp:
    @pytest.mark.asyncio
    async def test_success(self, backend):
        hook = ForgotPasswordHook(backend)
        await hook.send_reset_otp("a@b.com")
        backend.forget_password_email_otp.assert_awaited_once_with("a@b.com")
        assert hook.success is True

    @pytest.mark.asyncio
    async def test_failure(self, backend):
        backend.forget_password_email_otp.side_effect = AuthBackendError()
        hook = ForgotPasswordHook(backend)
        await hook.send_reset_otp("a@b.com")
        assert hook.error == "Failed to send reset OTP"
        assert hook.success is False


class TestCheckResetOtp:
    @pytest.mark.asyncio
    async def test_checks_forget_password_type(self, backend):
        hook = ForgotPasswordHook(backend)
        assert await hook.check_reset_otp("a@b.com", "123456") is True
        backend.check_verification_otp.assert_awaited_once_with(
            "a@b.com", "123456", OTPType.FORGET_PASSWORD
        )
        assert hook.is_otp_valid is True

    @pytest.mark.asyncio
    async def test_invalid(self, backend):
        backend.check_verification_otp.side_effect = AuthBackendError("Invalid OTP code")
        hook = ForgotPasswordHook(backend)
        assert await hook.check_reset_otp("a@b.com", "000000") is False
        assert hook.is_otp_valid is False
        assert hook.error == "Invalid OTP code"


class TestResetPassword:
    @pytest.mark.asyncio
    async def test_resets_then_revokes_other_sessions(self, backend):
        hook = ForgotPasswordHook(backend)

        await hook.reset_password("a@b.com", "123456", "NewSecret1!")

        assert backend.mock_calls == [
            call.reset_password_email_otp("a@b.com", "123456", "NewSecret1!"),
            call.revoke_other_sessions(),
        ]
        assert hook.success is True
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_reset_failure_skips_revoke(self, backend):
        backend.reset_password_email_otp.side_effect = AuthBackendError("Invalid OTP")
        hook = ForgotPasswordHook(backend)

        await hook.reset_password("a@b.com", "000000", "NewSecret1!")

        backend.revoke_other_sessions.assert_not_awaited()
        assert hook.error == "Invalid OTP"
        assert hook.success is False

    @pytest.mark.asyncio
    async def test_reset_failure_without_message(self, backend):
        backend.reset_password_email_otp.side_effect = AuthBackendError()
        hook = ForgotPasswordHook(backend)
        await hook.reset_password("a@b.com", "000000", "NewSecret1!")
        assert hook.error == "Failed to reset password"

    @pytest.mark.parametrize("revoke_error", [
        AuthBackendError("Unauthorized", status_code=401),
        AuthTransportError("down"),
    ])
    @pytest.mark.asyncio
    async def test_revoke_failure_does_not_fail_reset(self, backend, revoke_error):
        backend.revoke_other_sessions.side_effect = revoke_error
        hook = ForgotPasswordHook(backend)

        await hook.reset_password("a@b.com", "123456", "NewSecret1!")

        assert hook.success is True
        assert hook.error is None
