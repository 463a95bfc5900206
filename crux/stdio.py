"""Console and file input/output built-ins."""

from __future__ import annotations

import io
import os
import sys
from contextlib import suppress
from typing import Any, TextIO

from crux.core import type_of
from crux.values import CruxError, ErrorType, Result, format_value, is_int, to_int32

MAX_LINE_LENGTH = 4096
_SCAN_BUFFER = 1023

_READABLE = frozenset({"r", "rb", "r+", "rb+", "a+", "ab+", "w+", "wb+"})
_WRITABLE = frozenset({"w", "wb", "w+", "wb+", "a", "ab", "a+", "ab+", "r+", "rb+"})
_APPENDABLE = frozenset({"a", "ab", "a+", "ab+", "r+", "rb+", "w+", "wb+", "rb"})


def _failure(message: str, kind: ErrorType) -> Result:
    return Result.err(CruxError(message, kind, False))


def _channel(name: str) -> TextIO | None:
    """The standard stream called ``name``, looked up at call time."""
    if name == "stdin":
        return sys.stdin
    if name == "stdout":
        return sys.stdout
    if name == "stderr":
        return sys.stderr
    return None


class CruxFile:
    """An open file handle as seen by scripts."""

    def __init__(self, path: str, mode: str) -> None:
        self.path = path
        self.mode = mode
        binary_mode = mode if "b" in mode else mode + "b"
        self._handle = open(path, binary_mode)
        self.is_open = True
        self.position = 0

    def __repr__(self) -> str:
        return f"CruxFile({self.path!r}, {self.mode!r}, open={self.is_open})"

    def _can_read(self) -> bool:
        return self.mode in _READABLE or self.mode in _APPENDABLE

    def _can_write(self) -> bool:
        return self.mode in _WRITABLE or self.mode in _APPENDABLE

    def readln(self) -> Result:
        """Read the next line, without its newline."""
        if not self.is_open:
            return _failure("File is not open.", ErrorType.IO)
        if not self._can_read():
            return _failure("File is not readable.", ErrorType.IO)
        data = b""
        with suppress(OSError):
            data = self._handle.readline(MAX_LINE_LENGTH)
        if data.endswith(b"\n"):
            data = data[:-1]
        self.position += len(data)
        return Result.ok(data.decode("utf-8", "surrogateescape"))

    def read_all(self) -> Result:
        """Read the whole file from its beginning."""
        if not self.is_open:
            return _failure("File is not open.", ErrorType.IO)
        if not self._can_read():
            return _failure("File is not readable.", ErrorType.IO)
        data = b""
        with suppress(OSError):
            self._handle.seek(0, os.SEEK_END)
            size = self._handle.tell()
            self._handle.seek(0, os.SEEK_SET)
            data = self._handle.read(size)
        return Result.ok(data.decode("utf-8", "surrogateescape"))

    def _put(self, data: bytes) -> None:
        with suppress(OSError):
            self._handle.write(data)
        self.position += len(data)

    def write(self, content: Any) -> Result:
        """Write ``content`` at the current position."""
        if not isinstance(content, str):
            return _failure("<content> must be of type 'string'.", ErrorType.IO)
        if not self.is_open:
            return _failure("File is not open.", ErrorType.IO)
        if not self._can_write():
            return _failure("File is not writable.", ErrorType.IO)
        self._put(content.encode("utf-8", "surrogateescape"))
        return Result.ok(None)

    def writeln(self, content: Any) -> Result:
        """Write ``content`` followed by a newline."""
        if not self.is_open:
            return _failure("File is not open.", ErrorType.IO)
        if not self._can_write():
            return _failure("File is not writable.", ErrorType.IO)
        if not isinstance(content, str):
            return _failure("<content> must be of type 'string'.", ErrorType.IO)
        self._put(content.encode("utf-8", "surrogateescape") + b"\n")
        return Result.ok(None)

    def close(self) -> Result:
        """Close the file."""
        if not self.is_open:
            return _failure("File is not open.", ErrorType.IO)
        self._handle.close()
        self.is_open = False
        self.position = 0
        return Result.ok(None)


def format_for_print(value: Any, in_collection: bool = False) -> str:
    """The text ``print`` writes for ``value``; strings are quoted inside collections."""
    if isinstance(value, bool) or value is None or is_int(value):
        return format_value(value)
    if isinstance(value, float):
        return "%f" % value
    if isinstance(value, list):
        return "[" + ", ".join(format_for_print(item, True) for item in value) + "]"
    if isinstance(value, dict):
        inner = ", ".join(
            f"{format_for_print(key, True)}:{format_for_print(item, True)}"
            for key, item in value.items()
        )
        return "{" + inner + "}"
    if isinstance(value, Result):
        if value.is_ok:
            return f"Ok<{type_of(value.value)}>"
        assert value.error is not None
        return f"Err<{value.error.message}>"
    if isinstance(value, str):
        return f'"{value}"' if in_collection else value
    if isinstance(value, CruxError):
        return value.message
    return str(value)


def print_(value: Any) -> None:
    """Write ``value`` to standard output without a newline."""
    sys.stdout.write(format_for_print(value, False))


def println(value: Any) -> None:
    """Write ``value`` to standard output followed by a newline."""
    print_(value)
    sys.stdout.write("\n")


def print_to(channel: Any, content: Any) -> Result:
    """Write ``content`` to the named standard stream."""
    if not isinstance(channel, str) or not isinstance(content, str):
        return _failure("Channel and content must be strings.", ErrorType.TYPE)
    stream = _channel(channel)
    if stream is None:
        return _failure("Invalid channel specified.", ErrorType.VALUE)
    try:
        stream.write(content)
    except (OSError, ValueError):
        return _failure("Error writing to stream.", ErrorType.IO)
    return Result.ok(True)


def _scan_char(stream: TextIO, eof_message: str) -> Result:
    char = stream.read(1)
    if not char:
        return _failure(eof_message, ErrorType.IO)
    stream.readline()
    return Result.ok(char)


def _scan_line(stream: TextIO, eof_message: str, discard_rest: bool) -> Result:
    line = stream.readline(_SCAN_BUFFER)
    if not line:
        return _failure(eof_message, ErrorType.IO)
    if discard_rest and not line.endswith("\n"):
        stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return Result.ok(line)


def _scan_n(stream: TextIO, count: int, eof_message: str) -> Result:
    chars: list[str] = []
    while len(chars) < count:
        char = stream.read(1)
        if not char:
            return _failure(eof_message, ErrorType.IO)
        chars.append(char)
        if char == "\n":
            break
    if len(chars) == count and chars[-1] != "\n":
        stream.readline()
    return Result.ok("".join(chars))


def scan() -> Result:
    """Read one character from standard input and drop the rest of the line."""
    return _scan_char(sys.stdin, "Error reading from stdin.")


def scanln() -> Result:
    """Read a line from standard input, without its newline."""
    return _scan_line(sys.stdin, "Error reading from stdin.", False)


def scan_from(channel: Any) -> Result:
    """Read one character from the named stream and drop the rest of the line."""
    if not isinstance(channel, str):
        return _failure("Channel must be a string.", ErrorType.TYPE)
    stream = _channel(channel)
    if stream is None:
        return _failure("Invalid channel specified.", ErrorType.VALUE)
    try:
        return _scan_char(stream, "Error reading from stream.")
    except (OSError, ValueError):
        return _failure("Error reading from stream.", ErrorType.IO)


def scanln_from(channel: Any) -> Result:
    """Read a line from the named stream, without its newline."""
    if not isinstance(channel, str):
        return _failure("Channel must be a string.", ErrorType.TYPE)
    stream = _channel(channel)
    if stream is None:
        return _failure("Invalid channel specified.", ErrorType.VALUE)
    try:
        return _scan_line(stream, "Error reading from stream.", True)
    except (OSError, ValueError):
        return _failure("Error reading from stream.", ErrorType.IO)


def nscan(n: Any) -> Result:
    """Read up to ``n`` characters from standard input, stopping after a newline."""
    if not is_int(n):
        return _failure("Number of characters must be a number.", ErrorType.TYPE)
    count = to_int32(n)
    if count <= 0:
        return _failure("Number of characters must be positive.", ErrorType.VALUE)
    return _scan_n(sys.stdin, count, "Error reading from stdin.")


def nscan_from(channel: Any, n: Any) -> Result:
    """Read up to ``n`` characters from the named stream, stopping after a newline."""
    if not isinstance(channel, str):
        return _failure("Channel must be a string.", ErrorType.TYPE)
    if not is_int(n):
        return _failure("<char_count> must be of type 'int'.", ErrorType.TYPE)
    stream = _channel(channel)
    if stream is None:
        return _failure("Invalid channel specified.", ErrorType.VALUE)
    count = to_int32(n)
    if count <= 0:
        return _failure("Number of characters must be positive.", ErrorType.VALUE)
    try:
        return _scan_n(stream, count, "Error reading from stream.")
    except (OSError, ValueError):
        return _failure("Error reading from stream.", ErrorType.IO)


def open_file(path: Any, mode: Any, base_path: str | None = None) -> Result:
    """Open ``path`` with ``mode``; relative paths resolve against ``base_path``."""
    if not isinstance(path, str):
        return _failure("<file_path> must be of type 'string'.", ErrorType.IO)
    if not isinstance(mode, str):
        return _failure("<file_mode> must be of type 'string'.", ErrorType.IO)
    base = base_path if base_path is not None else os.getcwd()
    resolved = os.path.abspath(os.path.join(base, path))
    try:
        return Result.ok(CruxFile(resolved, mode))
    except (OSError, ValueError):
        return _failure("Failed to open file.", ErrorType.IO)


__all__ = [
    "CruxFile",
    "format_for_print",
    "print_",
    "println",
    "print_to",
    "scan",
    "scanln",
    "scan_from",
    "scanln_from",
    "nscan",
    "nscan_from",
    "open_file",
    "io",
]