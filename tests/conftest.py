from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from dbtypes.adapters.sqlalchemy import DateType, JSONDocumentType
from dbtypes.config import TIMEZONE_ENV_VAR, local_timezone

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def utc_local_timezone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "UTC")
    local_timezone.cache_clear()
    try:
        yield
    finally:
        local_timezone.cache_clear()


@pytest.fixture
def use_local_timezone(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    def _use(name: str) -> None:
        monkeypatch.setenv(TIMEZONE_ENV_VAR, name)
        local_timezone.cache_clear()

    return _use


@pytest.fixture
def metadata() -> MetaData:
    return MetaData()


@pytest.fixture
def record_table(metadata: MetaData) -> Table:
    return Table(
        "record",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("born_on", DateType, nullable=True),
        Column("attributes", JSONDocumentType, nullable=True),
    )


@pytest.fixture
def sqlite_engine(metadata: MetaData, record_table: Table) -> Iterator[Engine]:
    _ = record_table
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()
