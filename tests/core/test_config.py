"""Tests for config module."""

import logging

import pytest

from tribucket.config import DownsampleSettings, get_log_level, get_settings


class TestGetSettings:
    """Tests for get_settings function."""

    def test_defaults(self):
        """Test default values when no environment variables are set."""
        settings = get_settings()

        assert settings.threshold == 1_000
        assert settings.max_series_length == 10_000_000

    def test_env_overrides(self, monkeypatch):
        """Test that TRIBUCKET_* variables override the defaults."""
        monkeypatch.setenv("TRIBUCKET_THRESHOLD", "250")
        monkeypatch.setenv("TRIBUCKET_MAX_SERIES_LENGTH", "5000")

        settings = get_settings()

        assert settings.threshold == 250
        assert settings.max_series_length == 5000

    def test_returns_cached_instance(self, monkeypatch):
        """Test that settings are read from the environment only once."""
        first = get_settings()
        monkeypatch.setenv("TRIBUCKET_THRESHOLD", "42")

        assert get_settings() is first
        assert get_settings().threshold == 1_000

    def test_invalid_integer_raises(self, monkeypatch):
        """Test that a non-numeric value is rejected."""
        monkeypatch.setenv("TRIBUCKET_THRESHOLD", "many")

        with pytest.raises(ValueError):
            DownsampleSettings.from_env()

    def test_negative_threshold_rejected(self, monkeypatch):
        """Test that field constraints apply to environment values."""
        monkeypatch.setenv("TRIBUCKET_THRESHOLD", "-1")

        with pytest.raises(ValueError):
            DownsampleSettings.from_env()

    def test_zero_max_series_length_rejected(self):
        with pytest.raises(ValueError):
            DownsampleSettings(max_series_length=0)


class TestGetLogLevel:
    """Tests for get_log_level function."""

    def test_defaults_to_info(self):
        assert get_log_level() == logging.INFO

    def test_reads_level_name(self, monkeypatch):
        monkeypatch.setenv("TRIBUCKET_LOG_LEVEL", "debug")

        assert get_log_level() == logging.DEBUG

    def test_unknown_name_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("TRIBUCKET_LOG_LEVEL", "chatty")

        assert get_log_level() == logging.INFO
