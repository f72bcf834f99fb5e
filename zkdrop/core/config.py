"""
Configuration management using Pydantic Settings.

Type-safe, validated client configuration loaded from environment variables
prefixed with ``ZKDROP_``.

Usage:
    from zkdrop.core.config import get_settings

    settings = get_settings()
    api_url = settings.api_base_url
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zkdrop.core.constants import HTTP_TIMEOUT_DEFAULT
from zkdrop.core.enums import Environment
from zkdrop.domain.enums import TokenType


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables (ZKDROP_*)
        2. Default values (only for non-sensitive config)
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Client environment (development, testing, production)",
    )

    # API configuration
    api_base_url: str = Field(
        description="API base URL (e.g., https://transfer.example.com/api)",
    )
    http_timeout_seconds: float = Field(
        default=HTTP_TIMEOUT_DEFAULT,
        description="Timeout for a single HTTP request in seconds",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of the colored console format",
    )

    # Token storage
    refresh_token_type: TokenType = Field(
        default=TokenType.SESSION,
        description="How the refresh token is persisted (session or device)",
    )
    token_file_path: Path | None = Field(
        default=None,
        description="Token file used when refresh_token_type is 'device'",
    )

    model_config = SettingsConfigDict(
        env_prefix="ZKDROP_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate the request timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("http_timeout_seconds must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the configured log level."""
        return v.upper()

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
