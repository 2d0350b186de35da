"""Tests for local form validation."""

import pytest

from modules.auth.validation import (
    check_email,
    check_name,
    check_otp,
    check_strong_password,
    validate_forgot_password,
    validate_login,
    validate_otp,
    validate_register,
    validate_reset_password,
)


class TestFieldChecks:
    def test_email_required(self):
        assert check_email("") == "Email is required"

    @pytest.mark.parametrize("value", ["plainaddress", "a@", "@b.com", "a b@c.com"])
    def test_email_invalid(self, value):
        assert check_email(value) == "Please enter a valid email address"

    def test_email_valid(self):
        assert check_email("a@b.com") is None

    @pytest.mark.parametrize("password,message", [
        ("Ab1!", "Password must be at least 8 characters"),
        ("abcdefg1!", "Password must contain at least one uppercase letter"),
        ("ABCDEFG1!", "Password must contain at least one lowercase letter"),
        ("Abcdefgh!", "Password must contain at least one number"),
        ("Abcdefgh1", "Password must contain at least one special character"),
    ])
    def test_weak_passwords(self, password, message):
        assert check_strong_password(password) == message

    def test_strong_password(self):
        assert check_strong_password("Abcdefg1!") is None

    @pytest.mark.parametrize("name,message", [
        ("J", "Name must be at least 2 characters"),
        ("J" * 101, "Name must not exceed 100 characters"),
        ("J0hn", "Name can only contain letters, spaces, hyphens, and apostrophes"),
    ])
    def test_invalid_names(self, name, message):
        assert check_name(name) == message

    def test_name_allows_hyphens_and_apostrophes(self):
        assert check_name("Mary-Jane O'Neil") is None

    def test_otp_length(self):
        assert check_otp("12345") == "OTP must be exactly 6 digits"

    def test_otp_digits_only(self):
        assert check_otp("12a456") == "OTP must contain only numbers"


class TestLogin:
    def test_valid(self):
        result = validate_login({"email": "a@b.com", "password": "x"})
        assert result.ok
        assert result.value.email == "a@b.com"

    def test_reports_each_field(self):
        result = validate_login({"email": "", "password": ""})
        assert not result.ok
        assert result.value is None
        assert result.errors == {
            "email": "Email is required",
            "password": "Password is required",
        }


class TestRegister:
    VALID = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "Secret1!x",
        "confirmPassword": "Secret1!x",
    }

    def test_valid(self):
        result = validate_register(self.VALID)
        assert result.ok
        assert result.value.confirm_password == "Secret1!x"

    def test_mismatch_on_confirm_password(self):
        result = validate_register({**self.VALID, "confirmPassword": "Secret1!y"})
        assert result.errors == {"confirmPassword": "Passwords do not match"}

    def test_mismatch_reported_alongside_weak_password(self):
        result = validate_register({**self.VALID, "password": "weak", "confirmPassword": "other"})
        assert result.errors["password"] == "Password must be at least 8 characters"
        assert result.errors["confirmPassword"] == "Passwords do not match"

    def test_confirm_required(self):
        result = validate_register({**self.VALID, "confirmPassword": ""})
        assert result.errors == {"confirmPassword": "Please confirm your password"}


class TestOtherForms:
    def test_forgot_password(self):
        assert validate_forgot_password({"email": "a@b.com"}).ok
        assert validate_forgot_password({}).errors == {"email": "Email is required"}

    def test_reset_password_mismatch(self):
        result = validate_reset_password({"password": "Secret1!x", "confirmPassword": "Secret1!y"})
        assert result.errors == {"confirmPassword": "Passwords do not match"}

    def test_reset_password_complexity(self):
        result = validate_reset_password({"password": "secret1!x", "confirmPassword": "secret1!x"})
        assert result.errors == {"password": "Password must contain at least one uppercase letter"}

    def test_otp(self):
        assert validate_otp({"otp": "123456"}).value.otp == "123456"
        assert validate_otp({"otp": ""}).errors == {"otp": "OTP must be exactly 6 digits"}

    @pytest.mark.parametrize("otp", ["12345\n", "١٢٣٤٥٦", "12345 "])
    def test_otp_rejects_non_ascii_digits_and_trailing_whitespace(self, otp):
        result = validate_otp({"otp": otp})
        assert not result.ok
        assert result.errors == {"otp": "OTP must contain only numbers"}
