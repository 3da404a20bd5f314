"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables (and an
optional `.env` file). Settings are assembled once at process start and passed
explicitly to the container; nothing reads the environment afterwards.

Usage:
    from authlink.core.config import get_settings
    from authlink.core.container import build_container

    settings = get_settings()
    container = build_container(settings)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authlink.core.constants import BCRYPT_ROUNDS_DEFAULT
from authlink.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Explicit constructor arguments (tests)
        2. Environment variables
        3. `.env` file
        4. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (CI/production) instead of console output",
    )

    # Application metadata
    app_name: str = Field(
        default="authlink",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Database configuration
    database_url: str | None = Field(
        default=None,
        description="Database URL (postgresql+asyncpg://...). Unset selects the in-memory store.",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL queries",
    )

    # Security configuration
    bcrypt_rounds: int = Field(
        default=BCRYPT_ROUNDS_DEFAULT,
        description="Bcrypt cost factor (10 = tens of milliseconds per hash)",
    )
    verification_token_ttl_minutes: int = Field(
        default=60,
        description="Email verification token lifetime in minutes",
    )
    session_token_expire_hours: int = Field(
        default=24,
        description="Login session token lifetime in hours",
    )

    # Verification links
    verification_url_base: str = Field(
        default="http://localhost:2402",
        description="Base URL for email verification links",
    )

    # Email delivery
    email_backend: str = Field(
        default="stub",
        description="Notification backend: stub, smtp or ses",
    )
    email_from: str = Field(
        default="no-reply@authlink.local",
        description="Sender address for outgoing email",
    )
    smtp_host: str = Field(
        default="smtp.gmail.com",
        description="SMTP server host",
    )
    smtp_port: int = Field(
        default=587,
        description="SMTP server port (STARTTLS)",
    )
    smtp_username: str | None = Field(
        default=None,
        description="SMTP login user",
    )
    smtp_password: str | None = Field(
        default=None,
        description="SMTP login password",
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for SES",
    )

    model_config = SettingsConfigDict(
        env_prefix="AUTHLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range the password service accepts.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("verification_token_ttl_minutes", "session_token_expire_hours")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject zero or negative lifetimes."""
        if v <= 0:
            raise ValueError("token lifetimes must be positive")
        return v

    @field_validator("email_backend")
    @classmethod
    def validate_email_backend(cls, v: str) -> str:
        """Normalize and check the notification backend name."""
        backend = v.strip().lower()
        if backend not in {"stub", "smtp", "ses"}:
            raise ValueError("email_backend must be one of: stub, smtp, ses")
        return backend

    @field_validator("verification_url_base")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process.

    Returns:
        Settings: Application configuration loaded from environment.
    """
    return Settings()
