"""Wire value conversions.

Every token placed in a command's argument list is one of ``str``,
``bytes``, ``int`` or ``float``.  The helpers below turn caller-supplied
values into such tokens and raise :class:`ArgumentConversionError` when the
value cannot be carried by the protocol (integers outside the signed 64-bit
range, NaN, negative counts, ...).
"""

from __future__ import annotations

import math
from typing import Any, TypeAlias

from mp_ftsearch.kernel.errors import ArgumentConversionError

WireValue: TypeAlias = str | bytes | int | float

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def to_integer(value: Any, argument: str) -> int:
    """Return *value* as a signed 64-bit integer token."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentConversionError(argument, value, "expected an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArgumentConversionError(argument, value, "outside the signed 64-bit range")
    return value


def to_unsigned(value: Any, argument: str) -> int:
    """Return *value* as a non-negative integer token (offsets, counts, max)."""
    value = to_integer(value, argument)
    if value < 0:
        raise ArgumentConversionError(argument, value, "must not be negative")
    return value


def to_double(value: Any, argument: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentConversionError(argument, value, "expected a number")
    try:
        converted = float(value)
    except OverflowError as exc:
        raise ArgumentConversionError(argument, value, "no float representation", cause=exc) from exc
    if math.isnan(converted):
        raise ArgumentConversionError(argument, value, "NaN is not a valid number")
    return converted


def to_text(value: Any, argument: str) -> str:
    if not isinstance(value, str):
        raise ArgumentConversionError(argument, value, "expected a string")
    return value


def to_bytes(value: Any, argument: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise ArgumentConversionError(argument, value, "expected a byte buffer")


def to_value(value: Any, argument: str) -> WireValue:
    """Convert any supported scalar into a wire token."""
    match value:
        case bool():
            raise ArgumentConversionError(argument, value, "booleans have no wire form")
        case str():
            return value
        case bytes() | bytearray() | memoryview():
            return to_bytes(value, argument)
        case int():
            return to_integer(value, argument)
        case float():
            return to_double(value, argument)
        case _:
            raise ArgumentConversionError(argument, value, f"unsupported type {type(value).__name__}")


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "WireValue",
    "to_bytes",
    "to_double",
    "to_integer",
    "to_text",
    "to_unsigned",
    "to_value",
]
