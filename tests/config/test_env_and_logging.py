from __future__ import annotations

import logging

import pytest

from dbtypes.config import configure_logging, read_env_var


def test_read_env_var_strips_and_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value  ")
    assert read_env_var("EXAMPLE_VAR") == "value"

    monkeypatch.setenv("EXAMPLE_VAR", "")
    assert read_env_var("EXAMPLE_VAR") is None


def test_configure_logging_forwards_options(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging(level=logging.DEBUG, force=True)

    assert captured["level"] == logging.DEBUG
    assert captured["force"] is True
    assert "%(name)s" in str(captured["format"])


def test_configure_logging_reads_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    monkeypatch.setenv("DBTYPES_LOG_LEVEL", "debug")
    configure_logging()
    assert captured["level"] == "DEBUG"

    monkeypatch.delenv("DBTYPES_LOG_LEVEL")
    configure_logging()
    assert captured["level"] == logging.WARNING
