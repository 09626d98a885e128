"""Tests for settings and logging."""

from __future__ import annotations

import logging

import pytest

from bot_utils import Settings, get_logger, get_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_production_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test APP_MODE selects production."""
        monkeypatch.setenv("APP_MODE", "production")

        assert Settings().is_production

    def test_silent_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test silent logging maps to CRITICAL."""
        monkeypatch.setenv("LOG_LEVEL", "silent")

        settings = Settings()

        assert settings.is_silent
        assert settings.min_level == logging.CRITICAL

    def test_named_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test named levels map to stdlib levels."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        assert Settings().min_level == logging.WARNING

    def test_invalid_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unknown modes are rejected."""
        monkeypatch.setenv("APP_MODE", "staging")

        with pytest.raises(ValueError):
            Settings()

    def test_get_settings_cached(self) -> None:
        """Test settings are built once."""
        assert get_settings() is get_settings()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_usable_logger(self) -> None:
        """Test the logger accepts structured events."""
        log = get_logger("tests.settings")

        log.info("test_event", answer=42)
        log.error("test_failure", reason="none")
