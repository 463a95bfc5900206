"""Core built-in functions: length, type names and conversions."""

from __future__ import annotations

import math
import re
import types
from typing import Any

from crux.arrays import MAX_ARRAY_SIZE
from crux.values import CruxError, ErrorType, Result, format_value, is_int, to_int32

_STRTOD = re.compile(
    r"\s*([+-]?(?:0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN]))"
)

_METHOD_TYPES = (types.MethodType, types.MethodWrapperType)


def _parse_leading_number(text: str) -> float | None:
    """Parse the longest numeric prefix of ``text`` the way strtod does."""
    match = _STRTOD.match(text)
    if match is None:
        return None
    literal = match.group(1)
    if "x" in literal or "X" in literal:
        return float.fromhex(literal)
    return float(literal)


def _stringify(value: Any, in_collection: bool = False) -> str:
    if isinstance(value, str):
        return f'"{value}"' if in_collection else value
    if isinstance(value, list):
        return "[" + ", ".join(_stringify(item, True) for item in value) + "]"
    if isinstance(value, dict):
        inner = ", ".join(
            f"{_stringify(key, True)}:{_stringify(item, True)}" for key, item in value.items()
        )
        return "{" + inner + "}"
    if isinstance(value, CruxError):
        return value.message
    return format_value(value)


def length_or_nil(value: Any) -> int | None:
    """Length of a string, array or table; nil for anything else."""
    if isinstance(value, (str, list, dict)):
        return len(value)
    return None


def length(value: Any) -> Result:
    """Length of a string, array or table."""
    size = length_or_nil(value)
    if size is None:
        return Result.err(
            CruxError(
                "Expected either a collection type ('string', 'array', 'table').",
                ErrorType.TYPE,
                False,
            )
        )
    return Result.ok(size)


def type_of(value: Any) -> str:
    """Name of the type of ``value``."""
    if isinstance(value, bool):
        return "boolean"
    if is_int(value):
        return "int"
    if isinstance(value, float):
        return "float"
    if value is None:
        return "nil"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    if isinstance(value, CruxError):
        return "error"
    if isinstance(value, Result):
        return "result"
    if isinstance(value, type):
        return "class"
    if isinstance(value, _METHOD_TYPES):
        return "method"
    if callable(value):
        return "function"
    return "unknown"


def try_int(value: Any) -> int | None:
    """Convert to an int, or return nil when impossible."""
    if isinstance(value, bool):
        return 1 if value else 0
    if is_int(value):
        return value
    if isinstance(value, str):
        number = _parse_leading_number(value)
        if number is not None and math.isfinite(number):
            return to_int32(int(number))
        return None
    if value is None:
        return 0
    return None


def try_float(value: Any) -> int | float | None:
    """Convert to a number, or return nil when impossible; ints stay ints."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_int(value):
        return value
    if isinstance(value, str):
        return _parse_leading_number(value)
    if value is None:
        return 0.0
    return None


def _conversion_error() -> Result:
    return Result.err(CruxError("Cannot convert value to number.", ErrorType.TYPE, False))


def to_int(value: Any) -> Result:
    """Convert to an int."""
    converted = try_int(value)
    return _conversion_error() if converted is None else Result.ok(converted)


def to_float(value: Any) -> Result:
    """Convert to a number; ints are returned unchanged."""
    converted = try_float(value)
    return _conversion_error() if converted is None else Result.ok(converted)


def to_string(value: Any) -> Result:
    """Text of ``value``."""
    return Result.ok(_stringify(value))


def try_array(value: Any) -> list | None:
    """Convert to an array, or return nil when the result would be too large."""
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        items: list[Any] = list(value)
    elif isinstance(value, dict):
        items = [part for pair in value.items() for part in pair]
    else:
        return [value]
    if len(items) > MAX_ARRAY_SIZE:
        return None
    return items


def to_array(value: Any) -> Result:
    """Convert to an array.

    Strings become arrays of one-character strings, tables become a flat
    sequence of keys and values, other values a one-element array.
    """
    converted = try_array(value)
    if converted is None:
        return Result.err(CruxError("Failed to convert value to array.", ErrorType.RUNTIME, False))
    return Result.ok(converted)


def to_table(value: Any) -> Result:
    """Convert to a table keyed by position; tables are returned unchanged."""
    if isinstance(value, dict):
        return Result.ok(value)
    if isinstance(value, (list, str)):
        return Result.ok(dict(enumerate(value)))
    return Result.ok({0: value})