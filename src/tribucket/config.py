"""Configuration and environment handling for tribucket."""

import logging
import os

from pydantic import BaseModel, Field

__all__ = [
    "DownsampleSettings",
    "get_log_level",
    "get_settings",
]


class DownsampleSettings(BaseModel):
    """Downsampling settings.

    Holds the default point budget used when a caller does not pass one, and
    the longest series the frame adapter accepts. The algorithm itself runs
    to completion once started, so the length limit is the only bound on the
    time a single call takes.

    All settings can be customized via environment variables.
    """

    threshold: int = Field(
        default=1_000,
        ge=0,
        description="Default number of points to keep when downsampling a series",
    )

    max_series_length: int = Field(
        default=10_000_000,  # 10M rows
        ge=1,
        description="Maximum number of rows accepted by downsample_frame",
    )

    @classmethod
    def from_env(cls) -> "DownsampleSettings":
        """Create DownsampleSettings from environment variables.

        Environment variables:
        - TRIBUCKET_THRESHOLD: Default downsampling threshold (default: 1000)
        - TRIBUCKET_MAX_SERIES_LENGTH: Maximum series length (default: 10M)
        """
        return cls(
            threshold=int(os.environ.get("TRIBUCKET_THRESHOLD", cls.model_fields["threshold"].default)),
            max_series_length=int(os.environ.get("TRIBUCKET_MAX_SERIES_LENGTH", cls.model_fields["max_series_length"].default)),
        )


# Global settings instance
_settings: DownsampleSettings | None = None


def get_settings() -> DownsampleSettings:
    """Get downsampling settings.

    Returns cached instance if already initialized.
    """
    global _settings
    if _settings is None:
        _settings = DownsampleSettings.from_env()
    return _settings


def get_log_level() -> int:
    """Get the package log level from environment variable.

    Returns:
        Level named by TRIBUCKET_LOG_LEVEL (e.g. "DEBUG"). Defaults to INFO,
        also when the name is not a known level.
    """
    name = os.environ.get("TRIBUCKET_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
