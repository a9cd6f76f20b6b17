"""Unit tests for retry_executor.configuration.

Tests cover:
- RetrySettings validation and defaults
- Settings class initialization
- get_settings singleton caching
"""

import pytest
from pydantic import ValidationError

from retry_executor.configuration import RetrySettings, Settings, get_settings


@pytest.mark.unit
class TestRetrySettings:
    """Test suite for RetrySettings configuration."""

    def test_retry_settings_defaults(self, monkeypatch):
        monkeypatch.delenv("RETRY_MAX_RETRIES", raising=False)
        monkeypatch.delenv("RETRY_INTERVAL_MILLIS", raising=False)

        retry = RetrySettings()

        assert retry.max_retries == 3
        assert retry.interval_millis == 500

    def test_retry_settings_custom_values(self, monkeypatch):
        monkeypatch.setenv("RETRY_MAX_RETRIES", "10")
        monkeypatch.setenv("RETRY_INTERVAL_MILLIS", "25")

        retry = RetrySettings()

        assert retry.max_retries == 10
        assert retry.interval_millis == 25

    def test_retry_settings_partial_override(self, monkeypatch):
        monkeypatch.delenv("RETRY_INTERVAL_MILLIS", raising=False)
        monkeypatch.setenv("RETRY_MAX_RETRIES", "0")

        retry = RetrySettings()

        assert retry.max_retries == 0
        assert retry.interval_millis == 500

    @pytest.mark.parametrize(
        "env_var", ["RETRY_MAX_RETRIES", "RETRY_INTERVAL_MILLIS"]
    )
    def test_retry_settings_reject_negative_values(self, monkeypatch, env_var):
        monkeypatch.setenv(env_var, "-1")

        with pytest.raises(ValidationError):
            RetrySettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_builds_retry_subsettings(self):
        settings = Settings()

        assert isinstance(settings.retry, RetrySettings)

    def test_settings_accepts_retry_override(self, monkeypatch):
        monkeypatch.setenv("RETRY_MAX_RETRIES", "8")
        retry = RetrySettings()

        settings = Settings(retry=retry)

        assert settings.retry.max_retries == 8

    def test_is_production_when_prefix_empty(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")

        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings().LOG_LEVEL == "DEBUG"


@pytest.mark.unit
class TestGetSettings:
    """Test suite for the get_settings provider."""

    def test_get_settings_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("RETRY_MAX_RETRIES", "6")

        get_settings.cache_clear()
        second = get_settings()

        assert second is not first
        assert second.retry.max_retries == 6
