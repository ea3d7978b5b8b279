from __future__ import annotations

import zoneinfo
from datetime import UTC, datetime, timedelta

import pytest

from dbtypes.config import (
    TIMEZONE_ENV_VAR,
    ConfigurationError,
    TimezoneConfig,
    get_timezone_config,
    local_timezone,
)
from dbtypes.config import timezone as timezone_module


def test_utc_name_resolves_to_utc() -> None:
    assert TimezoneConfig("UTC").resolve() is UTC
    assert TimezoneConfig("utc").resolve() is UTC


@pytest.mark.parametrize(
    ("name", "offset"),
    [("-05:00", timedelta(hours=-5)), ("+05:30", timedelta(hours=5, minutes=30))],
)
def test_fixed_offsets_resolve(name: str, offset: timedelta) -> None:
    assert TimezoneConfig(name).resolve().utcoffset(None) == offset


@pytest.mark.parametrize("name", ["Not/AZone", "+25:00", "../etc/passwd"])
def test_invalid_names_raise(name: str) -> None:
    with pytest.raises(ConfigurationError):
        TimezoneConfig(name).resolve()


def test_iana_names_resolve() -> None:
    if "Europe/Berlin" not in zoneinfo.available_timezones():
        pytest.skip("tz database not available")

    assert TimezoneConfig("Europe/Berlin").resolve() == zoneinfo.ZoneInfo("Europe/Berlin")


def test_missing_name_uses_system_zone() -> None:
    assert TimezoneConfig().resolve().utcoffset(None) is not None


def test_undeterminable_system_zone_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    class _NaiveNow:
        def astimezone(self) -> datetime:
            return datetime(2024, 1, 1)

    class _NaiveClock:
        @staticmethod
        def now() -> _NaiveNow:
            return _NaiveNow()

    monkeypatch.setattr(timezone_module, "datetime", _NaiveClock)

    with pytest.raises(ConfigurationError, match="system timezone"):
        TimezoneConfig().resolve()


def test_get_timezone_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEZONE_ENV_VAR, " -05:00 ")
    assert get_timezone_config() == TimezoneConfig("-05:00")

    monkeypatch.setenv(TIMEZONE_ENV_VAR, "   ")
    assert get_timezone_config() == TimezoneConfig(None)

    monkeypatch.delenv(TIMEZONE_ENV_VAR)
    assert get_timezone_config() == TimezoneConfig(None)


def test_local_timezone_is_cached_until_cleared(monkeypatch: pytest.MonkeyPatch) -> None:
    assert local_timezone() is UTC

    monkeypatch.setenv(TIMEZONE_ENV_VAR, "-05:00")
    assert local_timezone() is UTC

    local_timezone.cache_clear()
    assert local_timezone().utcoffset(None) == timedelta(hours=-5)
