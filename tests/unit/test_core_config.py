"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, API prefix, module package parsing)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from nimble.core.config import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        """Test settings load with no environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.api_prefix == "/api"
        assert settings.module_packages == ["nimble.presentation.routers"]
        assert settings.strict_discovery is False


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_normalised(self):
        """Test log level names are upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/api", "/api"),
            ("api", "/api"),
            ("/api/v1/", "/api/v1"),
            ("  /api  ", "/api"),
            ("", ""),
            ("/", ""),
        ],
    )
    def test_api_prefix_normalised(self, raw, expected):
        """Test the prefix gains a leading slash and loses trailing ones."""
        with patch.dict(os.environ, {"API_PREFIX": raw}, clear=True):
            assert Settings().api_prefix == expected

    def test_module_packages_comma_separated(self):
        """Test package lists are parsed from a comma-separated string."""
        env_values = {"MODULE_PACKAGES": "app.users, app.teams,,app.billing "}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.module_packages == ["app.users", "app.teams", "app.billing"]

    def test_module_packages_from_list(self):
        """Test lists passed directly are cleaned the same way."""
        settings = Settings(module_packages=[" app.users ", ""])

        assert settings.module_packages == ["app.users"]

    def test_strict_discovery_from_env(self):
        """Test boolean parsing of STRICT_DISCOVERY."""
        with patch.dict(os.environ, {"STRICT_DISCOVERY": "true"}, clear=True):
            assert Settings().strict_discovery is True


@pytest.mark.unit
class TestEnvironmentDetection:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("value", "prop"),
        [
            ("development", "is_development"),
            ("testing", "is_testing"),
            ("ci", "is_ci"),
            ("production", "is_production"),
        ],
    )
    def test_environment_properties(self, value, prop):
        """Test exactly one environment property is true."""
        with patch.dict(os.environ, {"ENVIRONMENT": value}, clear=True):
            settings = Settings()

        flags = {
            name: getattr(settings, name)
            for name in ("is_development", "is_testing", "is_ci", "is_production")
        }
        assert flags == {name: name == prop for name in flags}


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings factory."""

    def test_get_settings_is_cached(self):
        """Test get_settings() returns the same instance."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()
