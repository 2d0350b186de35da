"""
Centralized configuration for the LaunchKit auth backend.

All settings are loaded from environment variables with sensible defaults.
Settings are read once and frozen; components receive the instance they need
instead of reading the environment themselves.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "LaunchKit API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "production", "test"] = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Public app info
    project_name: str = "LaunchKit"
    app_url: str = "http://localhost:3000"
    support_email: str = "contact@launchkit.com"

    # Database
    database_url: str = ""
    direct_database_url: str = ""
    database_logging: bool = False

    # Supabase (read-only access to the auth schema)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Better Auth backend
    better_auth_secret: str = ""
    better_auth_url: str = "http://localhost:3000"
    better_auth_base_path: str = "/api/auth"
    better_auth_trust_host: bool = True
    better_auth_session_max_age: int = 604_800  # seconds (7 days)
    auth_request_timeout: float = 10.0  # seconds

    # OAuth providers
    github_client_id: str = ""
    github_client_secret: str = ""
    google_client_id: str = ""
    google_client_secret: str = ""

    # Email (Resend)
    resend_api_key: str = ""
    resend_from_email: str = ""

    # Rate limiting
    rate_limit_max_requests: int = 100
    rate_limit_window_ms: int = 60_000

    # Email OTP
    otp_expiry_seconds: int = 300
    otp_length: int = 6
    otp_max_attempts: int = 3

    @property
    def auth_api_url(self) -> str:
        """Absolute base URL of the auth backend endpoints."""
        return self.better_auth_url.rstrip("/") + "/" + self.better_auth_base_path.strip("/")

    @property
    def otp_expiry_minutes(self) -> int:
        return self.otp_expiry_seconds // 60

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
