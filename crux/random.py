"""Seedable pseudo-random generator exposed to scripts as ``Random``."""

from __future__ import annotations

import time
from typing import Any

from crux.values import CruxError, ErrorType, Result, is_int, is_number, to_int32

_MULTIPLIER = 25214903917
_INCREMENT = 11
_MASK_48 = (1 << 48) - 1
_SCALE = float(1 << 53)


def _failure(message: str, kind: ErrorType) -> Result:
    return Result.err(CruxError(message, kind, False))


class Random:
    """A 48-bit linear congruential generator."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed % 2**64

    def __repr__(self) -> str:
        return f"Random(seed={self.seed})"

    def _bits(self, bits: int) -> int:
        self.seed = (self.seed * _MULTIPLIER + _INCREMENT) & _MASK_48
        return self.seed >> (48 - bits)

    def set_seed(self, seed: Any) -> Result:
        """Restart the sequence from ``seed``."""
        if not is_int(seed):
            return _failure("Seed must be a number.", ErrorType.RUNTIME)
        self.seed = to_int32(seed) % 2**64
        return Result.ok(None)

    def next(self) -> float:
        """A float in the range [0, 1)."""
        high = self._bits(26)
        low = self._bits(27)
        return ((high << 27) + low) / _SCALE

    def next_int(self, low: Any, high: Any) -> Result:
        """An int in the range [low, high], both ends included."""
        if not is_int(low) or not is_int(high):
            return _failure("Arguments must be of type 'int'.", ErrorType.TYPE)
        minimum = to_int32(low)
        maximum = to_int32(high)
        if minimum > maximum:
            return _failure("Min must be less than or equal to max", ErrorType.RUNTIME)
        span = maximum - minimum + 1
        offset = to_int32(int(self.next() * span))
        return Result.ok(to_int32(minimum + offset))

    def next_double(self, low: Any, high: Any) -> Result:
        """A float in the range [low, high]."""
        if not is_number(low):
            return _failure("Parameter <min> must be a number.", ErrorType.RUNTIME)
        if not is_number(high):
            return _failure("Parameter <max> must be a number.", ErrorType.RUNTIME)
        minimum = float(low)
        maximum = float(high)
        if minimum > maximum:
            return _failure(
                "Parameter <min> must be less than or equal to parameter <max>.",
                ErrorType.RUNTIME,
            )
        return Result.ok(minimum + self.next() * (maximum - minimum))

    def next_bool(self, probability: Any) -> Result:
        """True with the given probability."""
        if not is_number(probability):
            return _failure("Argument must be of type 'int' | 'float'.", ErrorType.RUNTIME)
        chance = float(probability)
        if chance < 0 or chance > 1:
            return _failure("Probability must be between 0 and 1", ErrorType.RUNTIME)
        return Result.ok(self.next() < chance)

    def choice(self, items: Any) -> Result:
        """A randomly chosen element of an array."""
        if not isinstance(items, list):
            return _failure("Argument must be an array", ErrorType.RUNTIME)
        if not items:
            return _failure("Array cannot be empty", ErrorType.RUNTIME)
        return Result.ok(items[int(self.next() * len(items))])