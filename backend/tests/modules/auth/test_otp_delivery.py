"""Tests for OTP delivery."""

import logging

import pytest

from modules.auth.models import OTPDeliveryRequest, OTPType
from modules.auth.otp_delivery import otp_subject, send_verification_otp


class TestOtpSubject:
    @pytest.mark.parametrize("otp_type,subject", [
        (OTPType.SIGN_IN, "Sign In - LaunchKit"),
        (OTPType.EMAIL_VERIFICATION, "Email Verification - LaunchKit"),
        (OTPType.FORGET_PASSWORD, "Password Reset - LaunchKit"),
    ])
    def test_subjects(self, otp_type, subject):
        assert otp_subject(otp_type, "LaunchKit") == subject

    def test_accepts_raw_value(self):
        assert otp_subject("forget-password", "Acme") == "Password Reset - Acme"


class TestSendVerificationOtp:
    @pytest.mark.asyncio
    async def test_logs_code_and_expiry(self, settings, caplog):
        request = OTPDeliveryRequest(email="a@b.com", otp="123456", type=OTPType.FORGET_PASSWORD)

        with caplog.at_level(logging.INFO, logger="modules.auth.otp_delivery"):
            await send_verification_otp(request, settings)

        messages = [record.getMessage() for record in caplog.records]
        assert "[OTP] Password Reset - LaunchKit" in messages
        assert "[OTP] Email: a@b.com" in messages
        assert "[OTP] Code: 123456" in messages
        assert "[OTP] Expires in: 5 minutes" in messages
