"""Built-in functions and methods dealing with error values."""

from __future__ import annotations

from typing import Any

from crux.values import CruxError, ErrorType, Result, format_value

_TYPE_NAMES = {
    ErrorType.SYNTAX: "<syntax error>",
    ErrorType.DIVISION_BY_ZERO: "<zero division error>",
    ErrorType.INDEX_OUT_OF_BOUNDS: "<index error>",
    ErrorType.RUNTIME: "<runtime error>",
    ErrorType.TYPE: "<type error>",
    ErrorType.LOOP_EXTENT: "<loop extent error>",
    ErrorType.LIMIT: "<limit error>",
    ErrorType.BRANCH_EXTENT: "<branch extent error>",
    ErrorType.CLOSURE_EXTENT: "<closure extent error>",
    ErrorType.LOCAL_EXTENT: "<local extent error>",
    ErrorType.ARGUMENT_EXTENT: "<argument extent error>",
    ErrorType.NAME: "<name error>",
    ErrorType.COLLECTION_EXTENT: "<collection extent error>",
    ErrorType.VARIABLE_EXTENT: "<variable extent error>",
    ErrorType.VARIABLE_DECLARATION_MISMATCH: "<variable mismatch error>",
    ErrorType.RETURN_EXTENT: "<return extent error>",
    ErrorType.ARGUMENT_MISMATCH: "<argument mismatch error>",
    ErrorType.STACK_OVERFLOW: "<stack overflow error>",
    ErrorType.COLLECTION_GET: "<collection get error>",
    ErrorType.COLLECTION_SET: "<collection set error>",
    ErrorType.UNPACK_MISMATCH: "<unpack mismatch error>",
    ErrorType.MEMORY: "<memory error>",
    ErrorType.VALUE: "<value error>",
    ErrorType.ASSERT: "<assert error>",
    ErrorType.IMPORT_EXTENT: "<import extent error>",
    ErrorType.IO: "<io error>",
}


def error_function(message: Any) -> Result:
    """Build a runtime error value whose message is the text of ``message``."""
    return Result.ok(CruxError(format_value(message), ErrorType.RUNTIME, False))


def panic(value: Any) -> Result:
    """Fail with a panicking error built from ``value``."""
    if isinstance(value, CruxError):
        value.is_panic = True
        return Result.err(value)
    return Result.err(CruxError(format_value(value), ErrorType.RUNTIME, True))


def assert_(condition: Any, message: Any) -> Result:
    """Fail with an assert error carrying ``message`` when ``condition`` is false."""
    if not isinstance(condition, bool):
        return Result.err(
            CruxError("Failed to assert: <condition> must be of type 'bool'.", ErrorType.TYPE, True)
        )
    if not isinstance(message, str):
        return Result.err(
            CruxError("Failed to assert: <message> must be of type 'string'.", ErrorType.TYPE, True)
        )
    if not condition:
        return Result.err(CruxError(message, ErrorType.ASSERT, True))
    return Result.ok(None)


def error_message(error: CruxError) -> Result:
    """The message of an error value."""
    return Result.ok(error.message)


def error_type(error: CruxError) -> Result:
    """A readable name for the category of an error value."""
    return Result.ok(_TYPE_NAMES.get(error.type, "<crux error>"))


def err(value: Any) -> Result:
    """Wrap ``value`` as a failed result, converting it to an error if needed."""
    if isinstance(value, CruxError):
        return Result.err(value)
    return Result.err(CruxError(format_value(value), ErrorType.RUNTIME, False))


def ok(value: Any) -> Result:
    """Wrap ``value`` as a successful result."""
    return Result.ok(value)