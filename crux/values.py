"""Runtime values of the Crux language and helpers for them.

Values are plain Python objects: ``None`` is nil, ``bool``, ``int``
(signed 32-bit), ``float``, ``str``, ``list`` for arrays and ``dict``
for tables, plus :class:`CruxError` and :class:`Result`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class ErrorType(Enum):
    """Categories of runtime error."""

    SYNTAX = auto()
    DIVISION_BY_ZERO = auto()
    INDEX_OUT_OF_BOUNDS = auto()
    RUNTIME = auto()
    TYPE = auto()
    LOOP_EXTENT = auto()
    LIMIT = auto()
    BRANCH_EXTENT = auto()
    CLOSURE_EXTENT = auto()
    LOCAL_EXTENT = auto()
    ARGUMENT_EXTENT = auto()
    NAME = auto()
    COLLECTION_EXTENT = auto()
    VARIABLE_EXTENT = auto()
    VARIABLE_DECLARATION_MISMATCH = auto()
    RETURN_EXTENT = auto()
    ARGUMENT_MISMATCH = auto()
    STACK_OVERFLOW = auto()
    COLLECTION_GET = auto()
    COLLECTION_SET = auto()
    UNPACK_MISMATCH = auto()
    MEMORY = auto()
    VALUE = auto()
    ASSERT = auto()
    IMPORT_EXTENT = auto()
    IO = auto()


class CruxError(Exception):
    """An error value; it can also be raised."""

    def __init__(self, message: str, type: ErrorType = ErrorType.RUNTIME, is_panic: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.type = type
        self.is_panic = is_panic

    def __repr__(self) -> str:
        return f"CruxError({self.message!r}, {self.type.name}, is_panic={self.is_panic})"


@dataclass(frozen=True)
class Result:
    """Either a successful value or an error."""

    is_ok: bool
    value: Any = None
    error: CruxError | None = None

    @classmethod
    def ok(cls, value: Any) -> "Result":
        return cls(True, value, None)

    @classmethod
    def err(cls, error: CruxError) -> "Result":
        return cls(False, None, error)

    def unwrap(self) -> Any:
        """Return the value, raising the error if this is not ok."""
        if not self.is_ok:
            assert self.error is not None
            raise self.error
        return self.value


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return ((value + 2**31) % 2**32) - 2**31


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return is_int(value) or isinstance(value, float)


def values_equal(a: Any, b: Any) -> bool:
    """Equality as the runtime defines it."""
    if is_int(a) and is_int(b):
        return to_int32(a) == to_int32(b)
    if isinstance(a, float) and (isinstance(b, float) or is_int(b)):
        return a == b
    if is_int(a) and isinstance(b, float):
        # An int on the left never compares equal to a float.
        return False
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bool) and isinstance(b, bool):
        return a is b
    return a is b


def format_value(value: Any) -> str:
    """Human-readable text for a value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, float):
        return "%g" % value
    if is_int(value):
        return "%d" % to_int32(value)
    return str(value)