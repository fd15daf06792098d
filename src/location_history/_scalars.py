"""Scalar codecs for the custom wire encodings used by ``Records.json``."""

from __future__ import annotations

import re
import struct
from datetime import datetime
from typing import Any

from location_history.exceptions import FormatError, InvalidTypeError

E7_SCALE = 10_000_000

INT8 = (-(2**7), 2**7 - 1)
UINT8 = (0, 2**8 - 1)
UINT16 = (0, 2**16 - 1)
INT32 = (-(2**31), 2**31 - 1)
UINT32 = (0, 2**32 - 1)
_UINT64_MAX = 2**64 - 1

_F32 = struct.Struct("<f")

# RFC 3339 section 5.6 ``date-time``.
_RFC3339_RE = re.compile(
    r"""
    (?P<date>\d{4}-\d{2}-\d{2})
    [Tt\ ]
    (?P<time>\d{2}:\d{2}:\d{2})
    (?:\.(?P<frac>\d+))?
    (?P<offset>[Zz]|[+-]\d{2}:\d{2})
    """,
    re.VERBOSE,
)


def to_f32(value: float) -> float:
    """Round *value* to the nearest IEEE single-precision float."""
    return _F32.unpack(_F32.pack(value))[0]


def check_int(value: Any, bounds: tuple[int, int], what: str = "integer") -> int:
    """Return *value* if it is a JSON integer inside *bounds*.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTypeError(f"invalid type: {type(value).__name__}, expected {what}")
    low, high = bounds
    if not low <= value <= high:
        raise FormatError(f"invalid value: integer `{value}`, expected {what}")
    return value


def decode_e7(value: Any) -> float:
    """Decode a fixed-point coordinate (degrees scaled by 10**7).

    The integer is first narrowed to single precision and then divided,
    so the result matches a float32 computation exactly.
    """
    raw = check_int(value, INT32, "i32")
    return to_f32(to_f32(float(raw)) / E7_SCALE)


def decode_mac(value: Any) -> bytes:
    """Decode a hardware address written as a decimal uint64 string.

    >>> decode_mac("281474976710655").hex()
    'ffffffffffff'
    """
    if not isinstance(value, str):
        raise InvalidTypeError(f"invalid type: {type(value).__name__}, expected a string")
    # a single leading "+" is allowed; int() would also accept "-", whitespace and underscores
    digits = value[1:] if value.startswith("+") else value
    if not digits.isascii() or not digits.isdigit():
        raise FormatError(f"invalid digit found in string {value!r}")
    number = int(digits)
    if number > _UINT64_MAX:
        raise FormatError(f"number too large to fit in u64: {value!r}")
    buf = number.to_bytes(8, "big")
    if buf[0] or buf[1]:
        raise FormatError("value exceeds 48 bits")
    return buf[2:]


def parse_rfc3339(value: Any) -> datetime:
    """Parse an RFC 3339 ``date-time`` into an aware :class:`datetime`.

    Fractional seconds beyond microsecond precision are truncated.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise FormatError("datetime is missing a UTC offset")
        return value
    if not isinstance(value, str):
        raise InvalidTypeError(f"invalid type: {type(value).__name__}, expected an RFC 3339 date-time string")
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise FormatError(f"invalid RFC 3339 date-time: {value!r}")

    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    frac = match["frac"]
    text = f"{match['date']}T{match['time']}"
    if frac:
        text += "." + frac[:6].ljust(6, "0")
    try:
        return datetime.fromisoformat(text + offset)
    except ValueError as exc:
        raise FormatError(f"invalid RFC 3339 date-time: {value!r}") from exc
