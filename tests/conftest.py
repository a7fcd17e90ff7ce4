"""
Pytest configuration and shared fixtures.
"""

import pytest

from tribucket import config
from tribucket.models import DataPoint


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables for test isolation.

    Clears TRIBUCKET_* variables and the cached settings so every test
    starts from the defaults.

    This fixture is applied automatically to all tests (autouse=True).
    """
    monkeypatch.delenv("TRIBUCKET_THRESHOLD", raising=False)
    monkeypatch.delenv("TRIBUCKET_MAX_SERIES_LENGTH", raising=False)
    monkeypatch.delenv("TRIBUCKET_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def small_series():
    """The five-point series used throughout the LTTB literature examples."""
    return [
        DataPoint(0.0, 10.0),
        DataPoint(1.0, 12.0),
        DataPoint(2.0, 8.0),
        DataPoint(3.0, 10.0),
        DataPoint(4.0, 12.0),
    ]
