"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Docker compose specifies which .env file to use per environment.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Secrets (client IDs, API tokens) are optional so the service can boot
  without every integration configured; adapters fail at call time instead

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    expected = settings.adobe_sign_client_id
    batch_size = settings.gallery_notification_batch_size
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    GALLERY_NOTIFICATION_BATCH_SIZE_DEFAULT,
    HTTP_TIMEOUT_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Cloud Native Days",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    public_base_url: str = Field(
        default="https://cloudnativedays.no",
        description="Public base URL used in outbound links when no domain is known",
    )

    # Adobe Sign webhook
    adobe_sign_client_id: str | None = Field(
        default=None,
        description="Expected X-AdobeSign-ClientId header value. Unset rejects all requests.",
    )

    # Document store (Sanity)
    sanity_project_id: str = Field(
        default="",
        description="Sanity project ID",
    )
    sanity_dataset: str = Field(
        default="production",
        description="Sanity dataset name",
    )
    sanity_api_version: str = Field(
        default="2024-01-01",
        description="Sanity API version (date string)",
    )
    sanity_api_token: str | None = Field(
        default=None,
        description="Sanity write token",
    )
    system_user_id: str = Field(
        default="system",
        description="Document ID referenced as creator of system-written activity entries",
    )

    # Email (Resend)
    resend_api_key: str | None = Field(
        default=None,
        description="Resend API key for transactional email and audiences",
    )
    resend_api_base_url: str = Field(
        default="https://api.resend.com",
        description="Resend API base URL",
    )
    email_from_address: str = Field(
        default="Cloud Native Days <noreply@cloudnativedays.no>",
        description="Sender address for outbound email",
    )

    # Chat (Slack)
    slack_webhook_url: str | None = Field(
        default=None,
        description="Slack incoming webhook URL",
    )
    slack_channel: str = Field(
        default="#cfp",
        description="Slack channel for proposal notifications",
    )

    # Outbound call tuning
    http_timeout_seconds: float = Field(
        default=HTTP_TIMEOUT_DEFAULT,
        description="Timeout for outbound HTTP calls in seconds",
    )
    gallery_notification_batch_size: int = Field(
        default=GALLERY_NOTIFICATION_BATCH_SIZE_DEFAULT,
        description="Max concurrent gallery tag notifications per batch",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("gallery_notification_batch_size")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        """
        Validate gallery batch size is positive.

        Args:
            v: Configured batch size.

        Returns:
            int: Validated batch size.

        Raises:
            ValueError: If batch size is less than 1.
        """
        if v < 1:
            raise ValueError("gallery_notification_batch_size must be at least 1")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def sanity_api_base_url(self) -> str:
        """Sanity HTTP API root for the configured project and version."""
        return f"https://{self.sanity_project_id}.api.sanity.io/v{self.sanity_api_version}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
