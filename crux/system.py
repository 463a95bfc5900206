"""System functions: arguments, platform details, environment and process control."""

from __future__ import annotations

import os
import platform as _platform
import sys
import time
from typing import Any, Sequence

from crux.values import CruxError, ErrorType, Result, is_int, to_int32

_ARCHITECTURES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
    "ppc64": "ppc64",
    "ppc64le": "ppc64",
    "ppc": "ppc",
    "powerpc": "ppc",
    "riscv64": "riscv64",
    "riscv32": "riscv",
    "riscv": "riscv",
    "s390x": "s390x",
    "mips64": "mips64",
    "mips64el": "mips64",
    "mips": "mips",
    "mipsel": "mips",
}


def program_args(argv: Sequence[str] | None = None) -> Result:
    """A two-element array: the argument count and the array of arguments."""
    arguments = list(sys.argv if argv is None else argv)
    return Result.ok([len(arguments), arguments])


def platform_name() -> str:
    """Name of the operating system family."""
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "apple"
    return "unknown"


def arch() -> str:
    """Name of the processor architecture."""
    machine = _platform.machine().lower()
    if machine in _ARCHITECTURES:
        return _ARCHITECTURES[machine]
    if machine.startswith("arm"):
        return "arm"
    return "unknown"


def pid() -> int:
    """Identifier of the running process."""
    return os.getpid()


def get_env(name: Any) -> Result:
    """Value of the environment variable ``name``."""
    if not isinstance(name, str):
        return Result.err(
            CruxError("Argument <name> must be of type 'string'.", ErrorType.TYPE, False)
        )
    value = os.environ.get(name)
    if value is None:
        return Result.err(CruxError("Environment variable not found.", ErrorType.RUNTIME, False))
    return Result.ok(value)


def sleep(seconds: Any) -> Result:
    """Pause for a whole number of seconds."""
    if not is_int(seconds):
        return Result.err(
            CruxError("Argument <seconds> must be of type 'int'.", ErrorType.MEMORY, False)
        )
    time.sleep(max(to_int32(seconds), 0))
    return Result.ok(True)


def exit_(code: Any) -> None:
    """Terminate the program with ``code``, or 1 when it is not an int."""
    sys.exit(to_int32(code) if is_int(code) else 1)