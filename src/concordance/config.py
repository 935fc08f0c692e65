"""Configuration utilities for CONCORDANCE.

Configuration is read from the environment on demand; nothing is read at
import time. Only the logging layer is configurable:

- ``CONCORDANCE_LOG_LEVEL``: console level name (default ``WARNING``).
- ``CONCORDANCE_LOGGER_LEVELS``: ``NAME=LEVEL`` pairs separated by commas or
  whitespace, merged over `DEFAULT_LIB_LEVELS`. Later pairs win.
"""

import logging
import os
import re

LOG_LEVEL_ENV_VAR = "CONCORDANCE_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV_VAR = "CONCORDANCE_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LIB_LEVELS = {"hypothesis": logging.WARNING}


class InvalidLogLevelError(ValueError):
    """Raised when a log level or NAME=LEVEL pair cannot be parsed."""


def parse_level(name: str) -> int:
    """Convert a textual level name (case-insensitive) to its numeric value.

    Raises:
        InvalidLogLevelError: If ``name`` is not a standard logging level.
    """
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise InvalidLogLevelError(f"Invalid log level: {name}")
    return level


def parse_logger_levels(value: str) -> dict[str, int]:
    """Parse ``NAME=LEVEL`` pairs into a name->level dict.

    Combines `DEFAULT_LIB_LEVELS` with the pairs found in ``value``.

    Args:
        value: Pairs separated by commas and/or whitespace,
            e.g. ``"concordance=DEBUG, hypothesis=INFO"``.

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLogLevelError: If an item is not NAME=LEVEL or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in (s for s in re.split(r"[,\s]+", value) if s):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise InvalidLogLevelError(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = parse_level(level_str)
    return levels


def get_log_level() -> int:
    """Return the console log level from ``CONCORDANCE_LOG_LEVEL``."""
    if not (name := os.environ.get(LOG_LEVEL_ENV_VAR)):
        return DEFAULT_LOG_LEVEL
    return parse_level(name)


def get_logger_levels() -> dict[str, int]:
    """Return per-logger levels from ``CONCORDANCE_LOGGER_LEVELS``."""
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV_VAR, ""))
