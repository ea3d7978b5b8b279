"""SQLAlchemy column types for ``Date`` and ``JSONDocument``."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, TypeDecorator
from sqlalchemy import Date as SqlDate
from sqlalchemy.dialects.postgresql import JSONB

from dbtypes.date import Date
from dbtypes.json_document import JSONDocument

if TYPE_CHECKING:
    from datetime import date

    from sqlalchemy import Dialect
    from sqlalchemy.types import TypeEngine

log = logging.getLogger(__name__)


class DateType(TypeDecorator[Date]):
    """Stores ``Date`` in a date-only column; SQL ``NULL`` loads as ``None``."""

    impl = SqlDate
    cache_ok = True

    @property
    def python_type(self) -> type[Date]:
        return Date

    def process_bind_param(self, value: Date | None, dialect: Dialect) -> date | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, Date):
            value = Date.scan(value)
        if value.is_zero():
            log.debug("Binding zero date as %s", value)
        return value.to_storage_value().date()

    def process_result_value(self, value: Any, dialect: Dialect) -> Date | None:
        _ = dialect
        if value is None:
            return None
        return Date.scan(value)


class JSONDocumentType(TypeDecorator[JSONDocument]):
    """Stores ``JSONDocument`` as ``JSONB`` on PostgreSQL and ``JSON`` elsewhere."""

    impl = JSON(none_as_null=True)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB(none_as_null=True))
        return dialect.type_descriptor(JSON(none_as_null=True))

    @property
    def python_type(self) -> type[JSONDocument]:
        return JSONDocument

    def process_bind_param(self, value: Any, dialect: Dialect) -> dict[str, Any] | None:
        _ = dialect
        if value is None:
            return None
        document = value if isinstance(value, JSONDocument) else JSONDocument.scan(value)
        # Round-trip through text so embedded dates reach the driver as plain strings.
        return json.loads(document.to_storage_value())

    def process_result_value(self, value: Any, dialect: Dialect) -> JSONDocument | None:
        _ = dialect
        if value is None:
            return None
        return JSONDocument.scan(value)


__all__ = ["DateType", "JSONDocumentType"]
