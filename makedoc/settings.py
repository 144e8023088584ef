"""Settings module for runtime configuration."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_COLUMN_WIDTH = 30


def _is_truthy(value: str | None) -> bool:
    """Check if a string value is truthy.

    Args:
        value: String value to check

    Returns:
        True if value is "true", "1", or "yes" (case-insensitive), False otherwise
    """
    if value is None:
        return False
    return value.lower() in ("true", "1", "yes")


def _positive_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive")
        return default
    return value


def _log_level(name: str, default: str) -> str:
    """Read a logging level name from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = raw.upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning(f"Ignoring {name}={raw!r}: unknown logging level")
        return default
    return level


class Settings:
    """Simple settings class for runtime configuration."""

    def __init__(self) -> None:
        """Initialize settings from environment variables."""
        self._log_level = _log_level("MAKEDOC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        self._column_width = _positive_int("MAKEDOC_COLUMN_WIDTH", DEFAULT_COLUMN_WIDTH)
        self._pretty = _is_truthy(os.environ.get("MAKEDOC_PRETTY", "false"))

    @property
    def log_level(self) -> str:
        """Name of the logging level used by the command-line interface."""
        return self._log_level

    @log_level.setter
    def log_level(self, value: str) -> None:
        """Set the logging level name."""
        self._log_level = value.upper()

    @property
    def column_width(self) -> int:
        """Width of the target column in help output."""
        return self._column_width

    @column_width.setter
    def column_width(self, value: int) -> None:
        """Set the target column width."""
        self._column_width = value

    @property
    def pretty(self) -> bool:
        """Check if colorized output is enabled by default."""
        return self._pretty

    @pretty.setter
    def pretty(self, value: bool) -> None:
        """Set whether colorized output is enabled by default."""
        self._pretty = value


# Global settings instance
settings = Settings()
