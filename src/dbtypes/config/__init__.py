"""Application configuration helpers."""

from __future__ import annotations

from dbtypes.errors import ConfigurationError

from .env import read_env_var
from .logging import configure_logging
from .timezone import TIMEZONE_ENV_VAR, TimezoneConfig, get_timezone_config, local_timezone

__all__ = [
    "TIMEZONE_ENV_VAR",
    "ConfigurationError",
    "TimezoneConfig",
    "configure_logging",
    "get_timezone_config",
    "local_timezone",
    "read_env_var",
]
