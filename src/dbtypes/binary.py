"""Binary codec for instants in time.

The layout matches the version 1 wire format used for timestamps embedded in binary
envelopes (15 bytes, big-endian)::

    version         u8   always 1
    seconds         i64  seconds since 0001-01-01T00:00:00Z
    nanoseconds     i32  sub-second part
    offset_minutes  i16  zone offset east of UTC, -1 for UTC itself

Python datetimes hold microseconds, so nanoseconds below that resolution are
dropped on decode. Named zones decode as fixed offsets.
"""

from __future__ import annotations

import struct
from datetime import UTC, datetime, timedelta, timezone
from typing import Final

from .errors import BinaryFormatError, SerializationError

BINARY_VERSION: Final[int] = 1
UTC_OFFSET_MARKER: Final[int] = -1

_LAYOUT: Final[struct.Struct] = struct.Struct(">Bqih")
_EPOCH: Final[datetime] = datetime(1, 1, 1, tzinfo=UTC)
_NAIVE_EPOCH: Final[datetime] = datetime(1, 1, 1)


def encode_instant(value: datetime) -> bytes:
    """Encode ``value`` into the version 1 binary layout."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    if value.tzinfo is UTC:
        offset_minutes = UTC_OFFSET_MARKER
    else:
        offset = value.utcoffset() or timedelta(0)
        offset_seconds = int(offset.total_seconds())
        offset_minutes, remainder = divmod(offset_seconds, 60)
        if remainder:
            raise SerializationError(f"zone offset has fractional minute: {offset}")
        if offset_minutes == UTC_OFFSET_MARKER or not -32768 <= offset_minutes <= 32767:
            raise SerializationError(f"unexpected zone offset: {offset}")

    delta = value - _EPOCH
    seconds = delta.days * 86400 + delta.seconds
    return _LAYOUT.pack(BINARY_VERSION, seconds, delta.microseconds * 1000, offset_minutes)


def decode_instant(data: bytes) -> datetime:
    """Decode bytes produced by :func:`encode_instant`."""

    if not data:
        raise BinaryFormatError("no data")
    if data[0] != BINARY_VERSION:
        raise BinaryFormatError(f"unsupported version: {data[0]}")
    if len(data) != _LAYOUT.size:
        raise BinaryFormatError(f"invalid length: {len(data)}")

    _, seconds, nanoseconds, offset_minutes = _LAYOUT.unpack(data)
    try:
        since_epoch = timedelta(seconds=seconds, microseconds=nanoseconds // 1000)
        if offset_minutes == UTC_OFFSET_MARKER:
            return _EPOCH + since_epoch
        offset = timedelta(minutes=offset_minutes)
        zone = timezone(offset)
        # Wall time first: the UTC instant may precede year 1 in zones east of UTC.
        wall = _NAIVE_EPOCH + (since_epoch + offset)
    except (OverflowError, ValueError) as exc:
        raise BinaryFormatError(f"instant out of range: {seconds}s") from exc
    return wall.replace(tzinfo=zone)


__all__ = ["BINARY_VERSION", "decode_instant", "encode_instant"]
