"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from ZKDROP_* environment variables
- Validation (timeout, URL normalization, log level)
- Default values
- Cached singleton behavior
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from zkdrop.core.config import Settings, get_settings
from zkdrop.core.enums import Environment
from zkdrop.domain.enums import TokenType


@pytest.fixture
def base_test_env():
    """Minimal required settings."""
    return {"ZKDROP_API_BASE_URL": "https://transfer.test/api"}


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.http_timeout_seconds == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.refresh_token_type == TokenType.SESSION
        assert settings.token_file_path is None

    def test_api_base_url_is_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_strips_trailing_slash(self):
        env_values = {"ZKDROP_API_BASE_URL": "https://transfer.test/api/"}
        with patch.dict(os.environ, env_values, clear=True):
            assert Settings().api_base_url == "https://transfer.test/api"

    @pytest.mark.parametrize("timeout", ["0", "-1"])
    def test_rejects_non_positive_timeout(self, base_test_env, timeout):
        env_values = base_test_env | {"ZKDROP_HTTP_TIMEOUT_SECONDS": timeout}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert any(
            "http_timeout_seconds must be greater than 0" in str(error)
            for error in exc_info.value.errors()
        )

    def test_log_level_is_upper_cased(self, base_test_env):
        env_values = base_test_env | {"ZKDROP_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env_values, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_device_token_settings(self, base_test_env):
        env_values = base_test_env | {
            "ZKDROP_REFRESH_TOKEN_TYPE": "device",
            "ZKDROP_TOKEN_FILE_PATH": "/tmp/zkdrop/tokens.json",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.refresh_token_type == TokenType.DEVICE
        assert settings.token_file_path == Path("/tmp/zkdrop/tokens.json")

    def test_environment_properties(self, base_test_env):
        env_values = base_test_env | {"ZKDROP_ENVIRONMENT": "production"}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.is_production is True
        assert settings.is_testing is False


@pytest.mark.unit
class TestGetSettings:
    """Test cached singleton behavior."""

    def test_returns_same_instance(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            first = get_settings()
            get_settings.cache_clear()
            assert get_settings() is not first
