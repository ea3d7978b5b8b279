"""Associative JSON document value type.

A thin wrapper over ``json``: any JSON object goes in and comes back out losslessly,
although key order is not preserved by every storage backend.
"""

from __future__ import annotations

import json
from typing import Any

from .date import Date
from .errors import BinaryFormatError, ConversionError, SerializationError


def json_default(obj: object) -> object:
    """``json.dumps`` hook that encodes embedded ``Date`` values."""

    if isinstance(obj, Date):
        return None if obj.is_zero() else obj.to_display_string()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JSONDocument(dict[str, Any]):
    """A JSON object stored in a ``jsonb`` column."""

    @staticmethod
    def orm_data_type() -> str:
        return "jsonb"

    @classmethod
    def scan(cls, value: object) -> JSONDocument:
        if isinstance(value, dict):
            return cls(value)
        if isinstance(value, bytes | bytearray | memoryview):
            value = bytes(value)
        elif not isinstance(value, str):
            raise ConversionError(
                f"unsupported scan, storing driver value of type {type(value).__name__} "
                "into JSONDocument"
            )

        try:
            loaded: Any = json.loads(value)
        except ValueError as exc:
            raise ConversionError("invalid JSON document") from exc
        if not isinstance(loaded, dict):
            raise ConversionError(f"JSON document must be an object, got {type(loaded).__name__}")
        return cls(loaded)

    def to_storage_value(self) -> str:
        try:
            return json.dumps(self, default=json_default, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"error encoding JSON: {exc}") from exc

    def marshal_json(self) -> bytes:
        return self.to_storage_value().encode()

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> JSONDocument:
        return cls.scan(data)

    def encode_binary(self) -> bytes:
        return self.marshal_json()

    @classmethod
    def decode_binary(cls, data: bytes) -> JSONDocument:
        try:
            return cls.scan(bytes(data))
        except ConversionError as exc:
            raise BinaryFormatError(f"error decoding JSON: {exc}") from exc


__all__ = ["JSONDocument", "json_default"]
