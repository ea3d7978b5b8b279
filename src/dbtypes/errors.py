"""Error definitions for dbtypes conversions and configuration."""

from __future__ import annotations


class DbTypesError(Exception):
    """Base class for conversion failures raised by dbtypes values."""


class DateTypeError(DbTypesError, TypeError):
    """Raised when a string was required but something else was supplied."""


class FormatError(DbTypesError, ValueError):
    """Raised when a date string does not match ``YYYY-MM-DD``."""


class EmptyInputError(DbTypesError, ValueError):
    """Raised when an explicit parse is given empty text."""


class ConversionError(DbTypesError, ValueError):
    """Raised when a database driver value cannot be converted."""


class SerializationError(DbTypesError, ValueError):
    """Raised when a value cannot be serialized."""


class BinaryFormatError(DbTypesError, ValueError):
    """Raised when binary data is not a valid encoded instant."""


class DateRangeError(DbTypesError, ValueError):
    """Raised when construction or arithmetic leaves the years 1 to 9999."""


class ConfigurationError(RuntimeError):
    """Raised when a dbtypes setting holds an unusable value."""
