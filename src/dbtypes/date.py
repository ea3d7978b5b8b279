"""Calendar date value type.

``Date`` wraps a timezone-aware ``datetime`` pinned to midnight. It converts to and
from database driver values, JSON text (``"YYYY-MM-DD"`` or ``null``), a binary
instant envelope and bare form strings, and offers calendar arithmetic.

Dates built from year/month/day (and ``today``) use the process-local timezone;
dates produced by parsing use UTC. Comparisons look only at the calendar day, so
the zone a value was built in never affects equality or ordering.
"""

from __future__ import annotations

import calendar
import json
import logging
import re
from datetime import UTC, date, datetime, timedelta
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Final, Protocol

from .binary import decode_instant, encode_instant
from .config.timezone import local_timezone
from .errors import (
    ConversionError,
    DateRangeError,
    DateTypeError,
    EmptyInputError,
    FormatError,
    SerializationError,
)
from .schema import build_date_json_schema, build_date_schema

if TYPE_CHECKING:
    from datetime import tzinfo

    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

DATE_LAYOUT: Final[str] = "%Y-%m-%d"
ZERO_DATE_TEXT: Final[str] = "0001-01-01"

_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_FORMAT_MESSAGE: Final[str] = "date should be of the format: yyyy-mm-dd"
_ZERO_INSTANT: Final[datetime] = datetime(1, 1, 1, tzinfo=UTC)

log = logging.getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _now() -> datetime:
    return datetime.now(UTC)


def _midnight(year: int, month: int, day: int, zone: tzinfo | None) -> datetime:
    """Return midnight of the given day, rolling overflowing months and days over."""

    carry, month_index = divmod(month - 1, 12)
    try:
        first = datetime(year + carry, month_index + 1, 1, tzinfo=zone)
        return first + timedelta(days=day - 1)
    except (OverflowError, ValueError) as exc:
        message = f"date out of range: {year:04d}-{month:02d}-{day:02d}"
        raise DateRangeError(message) from exc


@total_ordering
class Date:
    """A calendar date; ``Date()`` is the zero value meaning "no date"."""

    __slots__ = ("_instant",)

    _instant: datetime

    def __init__(self, instant: datetime | None = None) -> None:
        if instant is None:
            instant = _ZERO_INSTANT
        elif not isinstance(instant, datetime):
            raise DateTypeError(f"date should wrap a datetime, got {type(instant).__name__}")
        elif instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._instant = instant

    # Construction ---------------------------------------------------------------

    @classmethod
    def new(cls, year: int, month: int, day: int) -> Date:
        """Midnight of ``year-month-day`` in the local timezone, with calendar rollover."""

        return cls(_midnight(year, month, day, local_timezone()))

    @classmethod
    def today(cls, *, clock: Clock = _now) -> Date:
        now = clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        local = now.astimezone(local_timezone())
        return cls.new(local.year, local.month, local.day)

    @classmethod
    def from_text(cls, text: str) -> Date:
        """Parse ``YYYY-MM-DD`` strictly; blank text yields the zero value."""

        if not text.strip():
            text = ZERO_DATE_TEXT

        if not _DATE_PATTERN.fullmatch(text):
            raise FormatError(_FORMAT_MESSAGE)
        try:
            date.fromisoformat(text)
        except ValueError as exc:
            raise FormatError(_FORMAT_MESSAGE) from exc

        return cls(datetime.fromisoformat(f"{text}T00:00:00Z"))

    def is_zero(self) -> bool:
        return self._instant == _ZERO_INSTANT

    # Database boundary ----------------------------------------------------------

    @staticmethod
    def orm_data_type() -> str:
        return "date"

    @classmethod
    def scan(cls, value: object) -> Date:
        """Build a date from a database driver value; ``None`` gives the zero value."""

        if value is None:
            return cls()
        if isinstance(value, Date):
            return cls(value._instant)
        if isinstance(value, datetime):
            return cls(value)
        if isinstance(value, date):
            return cls(datetime(value.year, value.month, value.day, tzinfo=UTC))
        if isinstance(value, bytes | bytearray | memoryview):
            try:
                value = bytes(value).decode("ascii")
            except UnicodeDecodeError as exc:
                raise ConversionError("driver value is not an ISO-8601 timestamp") from exc
        if isinstance(value, str):
            try:
                return cls(datetime.fromisoformat(value.strip()))
            except ValueError as exc:
                log.debug("Rejected driver value %r", value)
                message = f"driver value is not an ISO-8601 timestamp: {value!r}"
                raise ConversionError(message) from exc

        raise ConversionError(
            f"unsupported scan, storing driver value of type {type(value).__name__} into Date"
        )

    def to_storage_value(self) -> datetime:
        instant = self._instant
        return datetime(instant.year, instant.month, instant.day, tzinfo=instant.tzinfo)

    # JSON text ------------------------------------------------------------------

    def marshal_json(self) -> bytes:
        """Encode as a JSON string ``"YYYY-MM-DD"``, or ``null`` for the zero value."""

        if self.is_zero():
            return b"null"

        try:
            text = self._instant.isoformat()
        except (OverflowError, ValueError) as exc:
            raise SerializationError(f"cannot serialize {self._instant!r}") from exc

        return json.dumps(f"{text[0:4]}-{text[5:7]}-{text[8:10]}").encode()

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> Date | None:
        """Decode JSON text.

        Returns ``None`` for ``null`` so callers can keep whatever value they had;
        an empty or blank string decodes to the zero value instead.
        """

        try:
            decoded: Any = json.loads(data)
        except ValueError as exc:
            raise DateTypeError(f"date should be a string, got {data!r}") from exc

        if decoded is None:
            return None
        if not isinstance(decoded, str):
            raise DateTypeError(f"date should be a string, got {data!r}")

        return cls.from_text(decoded)

    # Binary ---------------------------------------------------------------------

    def encode_binary(self) -> bytes:
        return encode_instant(self._instant)

    @classmethod
    def decode_binary(cls, data: bytes) -> Date:
        return cls(decode_instant(data))

    def __reduce__(self) -> tuple[Any, tuple[bytes]]:
        return (_restore_date, (self.encode_binary(),))

    # Forms ----------------------------------------------------------------------

    @classmethod
    def scan_form(cls, value: object) -> Date | None:
        """Parse a bare form value; ``""`` returns ``None`` to leave the field as-is.

        Required-field checks are up to the caller.
        """

        if not isinstance(value, str):
            raise DateTypeError("invalid date. Expected value as a string")
        if value == "":
            return None
        return parse_date(value)

    # Accessors ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._instant.year

    @property
    def month(self) -> int:
        return self._instant.month

    @property
    def day(self) -> int:
        return self._instant.day

    def format(self, pattern: str) -> str:
        """Apply a ``strftime`` pattern; the zero value formats as ``""``."""

        if self.is_zero():
            return ""
        return self._instant.strftime(pattern)

    def to_display_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_datetime(self) -> datetime:
        return self._instant

    def to_date(self) -> date:
        return self._instant.date()

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_display_string()})"

    # Comparison -----------------------------------------------------------------

    def _utc_day(self) -> datetime:
        return datetime(self.year, self.month, self.day, tzinfo=UTC)

    def equals(self, other: Date) -> bool:
        return self._utc_day() == other._utc_day()

    def is_before(self, other: Date) -> bool:
        return self._utc_day() < other._utc_day()

    def is_after(self, other: Date) -> bool:
        return self._utc_day() > other._utc_day()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_before(other)

    def __hash__(self) -> int:
        return hash(self._utc_day())

    # Arithmetic -----------------------------------------------------------------

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        instant = self._instant
        shifted = _midnight(
            instant.year + years, instant.month + months, instant.day + days, instant.tzinfo
        )
        return type(self)(shifted)

    def add_days(self, days: int) -> Date:
        return self.add_date(days=days)

    def add_months(self, months: int) -> Date:
        return self.add_date(months=months)

    def add_years(self, years: int) -> Date:
        return self.add_date(years=years)

    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def days_in_year(self) -> int:
        year = self.year
        if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0:
            return 366
        return 365

    def days_between(self, other: Date) -> int:
        return abs((other._utc_day() - self._utc_day()).days)

    # pydantic -------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        _ = source, handler
        return build_date_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema, handler
        return build_date_json_schema()


def _restore_date(payload: bytes) -> Date:
    return Date.decode_binary(payload)


def new_date(year: int, month: int, day: int) -> Date:
    """Create a date at local midnight; out-of-range months and days roll over."""

    return Date.new(year, month, day)


def today(*, clock: Clock = _now) -> Date:
    """Return today's date in the local timezone."""

    return Date.today(clock=clock)


def parse_date(text: str) -> Date:
    """Parse ``YYYY-MM-DD`` text into a date at midnight UTC.

    Unlike JSON decoding, an empty string is an error here.
    """

    if not isinstance(text, str):
        raise DateTypeError(f"date should be a string, got {type(text).__name__}")
    if text == "":
        raise EmptyInputError("date string is empty")
    return Date.from_text(text)


__all__ = [
    "DATE_LAYOUT",
    "ZERO_DATE_TEXT",
    "Clock",
    "Date",
    "new_date",
    "parse_date",
    "today",
]
