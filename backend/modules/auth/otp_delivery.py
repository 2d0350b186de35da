"""
Email OTP delivery.

The OTP backend generates and stores codes; delivering them is this
service's job. Delivery currently writes the code to the log, which is what
development and test environments need.
"""

import logging

from shared.config import Settings

from .models import OTPDeliveryRequest, OTPType

logger = logging.getLogger(__name__)

OTP_SUBJECTS = {
    OTPType.SIGN_IN: "Sign In",
    OTPType.EMAIL_VERIFICATION: "Email Verification",
    OTPType.FORGET_PASSWORD: "Password Reset",
}


def otp_subject(otp_type: OTPType, project_name: str) -> str:
    """Subject line for an OTP email, e.g. "Password Reset - LaunchKit"."""
    return f"{OTP_SUBJECTS[OTPType(otp_type)]} - {project_name}"


async def send_verification_otp(request: OTPDeliveryRequest, settings: Settings) -> None:
    """Deliver an OTP to its recipient."""
    logger.info(f"[OTP] {otp_subject(request.type, settings.project_name)}")
    logger.info(f"[OTP] Email: {request.email}")
    logger.info(f"[OTP] Code: {request.otp}")
    logger.info(f"[OTP] Expires in: {settings.otp_expiry_minutes} minutes")
