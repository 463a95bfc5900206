"""Methods on string values."""

from __future__ import annotations

import string as _ascii
from typing import Any

from crux.values import CruxError, ErrorType, Result, is_int, to_int32

_LOWER = frozenset(_ascii.ascii_lowercase)
_UPPER = frozenset(_ascii.ascii_uppercase)
_ALPHA = _LOWER | _UPPER
_DIGITS = frozenset(_ascii.digits)
_ALNUM = _ALPHA | _DIGITS
_SPACE = frozenset(" \t\n\v\f\r")
_SPACE_CHARS = "".join(sorted(_SPACE))

_TO_UPPER = str.maketrans(_ascii.ascii_lowercase, _ascii.ascii_uppercase)
_TO_LOWER = str.maketrans(_ascii.ascii_uppercase, _ascii.ascii_lowercase)


def _failure(message: str, kind: ErrorType) -> Result:
    return Result.err(CruxError(message, kind, False))


def first(string: str) -> Result:
    """The first character of ``string``."""
    if not string:
        return _failure(
            "'string' must have at least one character to get the first character.", ErrorType.VALUE
        )
    return Result.ok(string[0])


def last(string: str) -> Result:
    """The last character of ``string``."""
    if not string:
        return _failure(
            "'string' must have at least one character to get the last character.", ErrorType.VALUE
        )
    return Result.ok(string[-1])


def get(string: str, index: Any) -> Result:
    """The character at ``index``."""
    if not is_int(index):
        return _failure("<index> must be of type 'number'.", ErrorType.TYPE)
    position = to_int32(index)
    if position < 0 or position >= len(string):
        return _failure(
            "<index> must be a non negative number that is less than the length of the string.",
            ErrorType.INDEX_OUT_OF_BOUNDS,
        )
    return Result.ok(string[position])


def upper(string: str) -> Result:
    """``string`` with ASCII lower-case letters made upper-case."""
    return Result.ok(string.translate(_TO_UPPER))


def lower(string: str) -> Result:
    """``string`` with ASCII upper-case letters made lower-case."""
    return Result.ok(string.translate(_TO_LOWER))


def strip(string: str) -> Result:
    """``string`` without leading and trailing whitespace."""
    return Result.ok(string.strip(_SPACE_CHARS))


def substring(string: str, start: Any, end: Any) -> Result:
    """The characters from ``start`` up to, not including, ``end``."""
    if not is_int(start):
        return _failure("<start> index must be of type 'int'.", ErrorType.VALUE)
    if not is_int(end):
        return _failure("<end> index must be of type 'int'.", ErrorType.VALUE)
    begin = to_int32(start)
    stop = to_int32(end)
    if begin < 0:
        return _failure("<start> index cannot be negative.", ErrorType.INDEX_OUT_OF_BOUNDS)
    if stop < 0:
        return _failure("<end> index cannot be negative.", ErrorType.INDEX_OUT_OF_BOUNDS)
    if begin > len(string) or stop > len(string) or begin > stop:
        return _failure("Index out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    return Result.ok(string[begin:stop])


def split(string: str, delimiter: Any) -> Result:
    """Split ``string`` at each occurrence of ``delimiter``.

    A delimiter at the very end does not produce a trailing empty part.
    """
    if not isinstance(delimiter, str):
        return _failure("<delimiter> must be of type 'string'.", ErrorType.TYPE)
    if not delimiter:
        return _failure("<delimiter> cannot be empty.", ErrorType.TYPE)
    if not string:
        return Result.ok([""])
    if len(delimiter) > len(string):
        return Result.ok([string])
    parts = string.split(delimiter)
    if string.endswith(delimiter):
        parts.pop()
    return Result.ok(parts)


def contains(string: str, goal: Any) -> Result:
    """Whether ``goal`` occurs in ``string``."""
    if not isinstance(goal, str):
        return _failure("Argument 'goal' must be of type 'string'.", ErrorType.TYPE)
    return Result.ok(goal in string)


def replace(string: Any, goal: Any, replacement: Any) -> Result:
    """``string`` with every non-overlapping occurrence of ``goal`` replaced."""
    if not all(isinstance(item, str) for item in (string, goal, replacement)):
        return _failure("All arguments must be strings.", ErrorType.TYPE)
    if not string:
        return _failure("Source string must have at least one character.", ErrorType.VALUE)
    if not goal:
        return _failure("<target> substring must have at least one character.", ErrorType.VALUE)
    return Result.ok(string.replace(goal, replacement))


def starts_with(string: str, prefix: Any) -> Result:
    """Whether ``string`` begins with ``prefix``."""
    if not isinstance(prefix, str):
        return _failure("First argument <char> must be of type 'string'.", ErrorType.TYPE)
    return Result.ok(string.startswith(prefix))


def ends_with(string: str, suffix: Any) -> Result:
    """Whether ``string`` ends with ``suffix``."""
    if not isinstance(suffix, str):
        return _failure("First argument must be of type 'string'.", ErrorType.TYPE)
    return Result.ok(string.endswith(suffix))


def _all_in(string: str, allowed: frozenset[str]) -> bool:
    return all(char in allowed for char in string)


def is_alnum(string: str) -> bool:
    """Whether every character is an ASCII letter or digit."""
    return _all_in(string, _ALNUM)


def is_alpha(string: str) -> bool:
    """Whether every character is an ASCII letter."""
    return _all_in(string, _ALPHA)


def is_digit(string: str) -> bool:
    """Whether every character is an ASCII digit."""
    return _all_in(string, _DIGITS)


def is_lower(string: str) -> bool:
    """Whether every character is an ASCII lower-case letter."""
    return _all_in(string, _LOWER)


def is_upper(string: str) -> bool:
    """Whether every character is an ASCII upper-case letter."""
    return _all_in(string, _UPPER)


def is_space(string: str) -> bool:
    """Whether every character is whitespace."""
    return _all_in(string, _SPACE)


def is_empty(string: str) -> bool:
    """Whether ``string`` has no characters."""
    return len(string) == 0