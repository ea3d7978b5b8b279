"""Pydantic core-schema hooks so ``Date`` can be used as a model field."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from pydantic_core import PydanticCustomError, core_schema

from .errors import DbTypesError

if TYPE_CHECKING:
    from pydantic.json_schema import JsonSchemaValue

    from .date import Date


def build_date_schema(cls: type[Date]) -> core_schema.CoreSchema:
    """Validate dates, datetimes and ``YYYY-MM-DD`` strings; serialize to JSON text."""

    def validate(value: object) -> Date:
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.from_text(value)
            if isinstance(value, datetime | date):
                return cls.scan(value)
        except DbTypesError as exc:
            raise PydanticCustomError("date_format", "{reason}", {"reason": str(exc)}) from exc
        raise PydanticCustomError(
            "date_type",
            "date should be a string, got {type_name}",
            {"type_name": type(value).__name__},
        )

    def serialize(value: Date) -> str | None:
        if value.is_zero():
            return None
        return value.to_display_string()

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize, when_used="json"
        ),
    )


def build_date_json_schema() -> JsonSchemaValue:
    return {"type": "string", "format": "date"}


__all__ = ["build_date_json_schema", "build_date_schema"]
