"""Time functions: current time, sleeping and calendar fields."""

from __future__ import annotations

import time
from typing import Any

from crux.values import CruxError, ErrorType, Result, is_int


def time_seconds() -> float:
    """Whole seconds since the epoch, as a float."""
    return float(int(time.time()))


def time_milliseconds() -> float:
    """Milliseconds since the epoch, as a float."""
    return float(time.time_ns() // 1_000_000)


def _check_duration(duration: Any) -> Result | None:
    if not is_int(duration):
        return Result.err(
            CruxError("Parameter <duration> must be of type 'int' | 'float'.", ErrorType.TYPE, False)
        )
    if duration < 0:
        return Result.err(CruxError("Sleep duration cannot be negative.", ErrorType.VALUE, False))
    return None


def sleep_seconds(duration: Any) -> Result:
    """Pause for ``duration`` seconds."""
    problem = _check_duration(duration)
    if problem is not None:
        return problem
    time.sleep(duration)
    return Result.ok(None)


def sleep_milliseconds(duration: Any) -> Result:
    """Pause for ``duration`` milliseconds."""
    problem = _check_duration(duration)
    if problem is not None:
        return problem
    time.sleep(duration / 1000)
    return Result.ok(None)


def _now() -> time.struct_time:
    return time.localtime(time.time())


def year() -> int:
    return _now().tm_year


def month() -> int:
    """Month of the year, 1 to 12."""
    return _now().tm_mon


def day() -> int:
    """Day of the month."""
    return _now().tm_mday


def hour() -> int:
    return _now().tm_hour


def minute() -> int:
    return _now().tm_min


def second() -> int:
    return _now().tm_sec


def weekday() -> int:
    """Day of the week, 1 (Monday) to 7 (Sunday)."""
    return _now().tm_wday + 1


def day_of_year() -> int:
    """Day of the year, starting at 1."""
    return _now().tm_yday