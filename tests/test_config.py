"""Tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from solar_events import __version__
from solar_events.config import (
    Settings,
    configure_logging,
    get_settings,
    get_settings_uncached,
)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        settings = Settings(_env_file=None)

        assert settings.app_version == __version__
        assert settings.default_event == "sunrise"
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.is_production is False

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DEFAULT_EVENT", "Nautical")
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = get_settings_uncached()
        assert settings.default_event == "nautical"
        assert settings.port == 9001
        assert settings.is_production is True

    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert get_settings_uncached().log_level == "WARNING"

    def test_invalid_default_event(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DEFAULT_EVENT", "golden")
        with pytest.raises(ValidationError, match="default_event"):
            get_settings_uncached()

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            get_settings_uncached()

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_configure_logging(self, monkeypatch: pytest.MonkeyPatch):
        """Test the root level follows the setting."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        configure_logging(Settings(_env_file=None, log_level="ERROR"))
        assert calls["level"] == logging.ERROR
