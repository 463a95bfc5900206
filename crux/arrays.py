"""Methods on array values (Python lists)."""

from __future__ import annotations

from typing import Any

from crux.values import CruxError, ErrorType, Result, is_int, to_int32, values_equal

MAX_ARRAY_SIZE = 65534


def _failure(message: str, kind: ErrorType) -> Result:
    return Result.err(CruxError(message, kind, False))


def push(array: list, value: Any) -> Result:
    """Append ``value`` to the end of ``array``."""
    if len(array) >= MAX_ARRAY_SIZE:
        return _failure("Failed to add to array.", ErrorType.RUNTIME)
    array.append(value)
    return Result.ok(None)


def pop(array: list) -> Result:
    """Remove and return the last element."""
    if not array:
        return _failure("Cannot remove a value from an empty array.", ErrorType.INDEX_OUT_OF_BOUNDS)
    return Result.ok(array.pop())


def insert(array: list, value: Any, index: Any) -> Result:
    """Insert ``value`` so that it ends up at position ``index``."""
    if not is_int(index):
        return _failure("<index> must be of type 'number'.", ErrorType.TYPE)
    position = to_int32(index)
    if position < 0 or position > len(array):
        return _failure("<index> is out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    if len(array) >= MAX_ARRAY_SIZE:
        return _failure("Failed to allocate enough memory for new array.", ErrorType.MEMORY)
    array.insert(position, value)
    return Result.ok(None)


def remove_at(array: list, index: Any) -> Result:
    """Remove and return the element at ``index``."""
    if not is_int(index):
        return _failure("<index> must be of type 'number'.", ErrorType.TYPE)
    position = to_int32(index)
    if position < 0 or position >= len(array):
        return _failure("<index> is out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    return Result.ok(array.pop(position))


def concat(array: list, other: Any) -> Result:
    """A new array holding the elements of ``array`` followed by those of ``other``."""
    if not isinstance(other, list):
        return _failure("<target> must be of type 'array'.", ErrorType.TYPE)
    if len(array) + len(other) > MAX_ARRAY_SIZE:
        return _failure("Size of resultant array out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    return Result.ok(array + other)


def slice_(array: list, start: Any, end: Any) -> Result:
    """A new array of the elements from ``start`` up to, not including, ``end``."""
    if not is_int(start):
        return _failure("<start_index> must be of type 'number'.", ErrorType.TYPE)
    if not is_int(end):
        return _failure("<end_index> must be of type 'number'.", ErrorType.TYPE)
    first = to_int32(start)
    stop = to_int32(end)
    if first < 0 or first > len(array):
        return _failure("<start_index> out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    if stop < 0 or stop > len(array):
        return _failure("<end_index> out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    if stop < first:
        return _failure("indexes out of bounds.", ErrorType.INDEX_OUT_OF_BOUNDS)
    return Result.ok(array[first:stop])


def reverse(array: list) -> Result:
    """Reverse ``array`` in place."""
    array.reverse()
    return Result.ok(None)


def index_of(array: list, target: Any) -> Result:
    """Position of the first element equal to ``target``."""
    for position, item in enumerate(array):
        if values_equal(target, item):
            return Result.ok(position)
    return _failure("Value could not be found in the array.", ErrorType.VALUE)


def contains(array: list, target: Any) -> bool:
    """Whether any element equals ``target``."""
    return any(values_equal(target, item) for item in array)


def clear(array: list) -> None:
    """Remove every element."""
    array.clear()


def equals(array: list, other: Any) -> bool:
    """Element-wise equality with another array."""
    if not isinstance(other, list) or len(array) != len(other):
        return False
    return all(values_equal(mine, theirs) for mine, theirs in zip(array, other))