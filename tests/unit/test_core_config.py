"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (gallery batch size)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test Settings default values."""

    def test_integrations_unconfigured_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.adobe_sign_client_id is None
        assert settings.resend_api_key is None
        assert settings.slack_webhook_url is None
        assert settings.gallery_notification_batch_size == 5
        assert settings.is_development is True

    def test_sanity_api_base_url(self):
        settings = Settings(sanity_project_id="abc123", sanity_api_version="2024-01-01")

        assert settings.sanity_api_base_url == "https://abc123.api.sanity.io/v2024-01-01"


class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_reads_environment_variables(self):
        env_values = {
            "ENVIRONMENT": "production",
            "ADOBE_SIGN_CLIENT_ID": "client-123",
            "GALLERY_NOTIFICATION_BATCH_SIZE": "10",
            "SLACK_CHANNEL": "#cfp-alerts",
        }
        with patch.dict(os.environ, env_values, clear=True):
            get_settings.cache_clear()
            settings = get_settings()

        assert settings.is_production is True
        assert settings.adobe_sign_client_id == "client-123"
        assert settings.gallery_notification_batch_size == 10
        assert settings.slack_channel == "#cfp-alerts"
        get_settings.cache_clear()

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("value", [0, -1])
    def test_batch_size_must_be_positive(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Settings(gallery_notification_batch_size=value)

        assert any(
            "gallery_notification_batch_size must be at least 1" in str(error)
            for error in exc_info.value.errors()
        )
