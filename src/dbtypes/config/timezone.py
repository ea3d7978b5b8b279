"""Process-local timezone configuration.

Plain dates built from year/month/day (and ``today``) live in the process-local
timezone. It defaults to the system zone and can be pinned with the
``DBTYPES_TIMEZONE`` environment variable: ``UTC``, a fixed offset such as
``-05:00``, or an IANA name such as ``Europe/Berlin``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from functools import cache
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dbtypes.errors import ConfigurationError

from .env import read_env_var

TIMEZONE_ENV_VAR: Final[str] = "DBTYPES_TIMEZONE"

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-])([0-9]{2}):([0-9]{2})")

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimezoneConfig:
    name: str | None = None

    def resolve(self) -> tzinfo:
        if self.name is None:
            return _system_timezone()
        if self.name.upper() == "UTC":
            return UTC

        match = _OFFSET_PATTERN.fullmatch(self.name)
        if match:
            sign, hours, minutes = match.groups()
            offset = timedelta(hours=int(hours), minutes=int(minutes))
            try:
                return timezone(-offset if sign == "-" else offset)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid UTC offset: {self.name}") from exc

        try:
            return ZoneInfo(self.name)
        except (ZoneInfoNotFoundError, OSError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone: {self.name}") from exc


def _system_timezone() -> tzinfo:
    zone = datetime.now().astimezone().tzinfo
    if zone is None:
        raise ConfigurationError("Cannot determine the system timezone")
    return zone


def get_timezone_config() -> TimezoneConfig:
    return TimezoneConfig(name=read_env_var(TIMEZONE_ENV_VAR))


@cache
def local_timezone() -> tzinfo:
    """Return the resolved local timezone; call ``cache_clear`` after env changes."""

    zone = get_timezone_config().resolve()
    log.debug("Using local timezone %s", zone)
    return zone
