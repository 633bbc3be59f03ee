"""Configuration for the cactus shop.

Settings come from environment variables so the same code runs in tests,
in the demo CLI, and embedded in another application without a config
file.
"""

import logging
import os

LOG_LEVEL_ENV = "CACTUS_SHOP_LOG_LEVEL"
EVENT_LOGGER_ENV = "CACTUS_SHOP_EVENT_LOGGER"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_EVENT_LOGGER = "cactus_shop.events"


class ConfigError(Exception):
    """Raised when an environment setting has an unusable value."""


def parse_log_level(name: str) -> int:
    """Convert a level name such as ``"info"`` into its numeric value.

    Raises:
        ConfigError: If *name* is not a standard logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level


def get_log_level() -> int:
    """Return the level from ``CACTUS_SHOP_LOG_LEVEL`` (default WARNING)."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))


def get_event_logger_name() -> str:
    """Return the logger name domain events are written to."""
    name = os.environ.get(EVENT_LOGGER_ENV, DEFAULT_EVENT_LOGGER).strip()
    if not name:
        raise ConfigError(f"{EVENT_LOGGER_ENV} cannot be blank")
    return name
