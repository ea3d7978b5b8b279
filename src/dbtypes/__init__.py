"""Calendar date and JSON document value types for database and JSON boundaries."""

from __future__ import annotations

from importlib import metadata

from .date import DATE_LAYOUT, Date, new_date, parse_date, today
from .errors import (
    BinaryFormatError,
    ConfigurationError,
    ConversionError,
    DateRangeError,
    DateTypeError,
    DbTypesError,
    EmptyInputError,
    FormatError,
    SerializationError,
)
from .json_document import JSONDocument, json_default

try:
    __version__ = metadata.version("dbtypes")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "DATE_LAYOUT",
    "BinaryFormatError",
    "ConfigurationError",
    "ConversionError",
    "Date",
    "DateRangeError",
    "DateTypeError",
    "DbTypesError",
    "EmptyInputError",
    "FormatError",
    "JSONDocument",
    "SerializationError",
    "json_default",
    "new_date",
    "parse_date",
    "today",
]
