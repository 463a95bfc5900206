"""Mathematical built-in functions."""

from __future__ import annotations

import math
from typing import Any, Callable

from crux.values import CruxError, ErrorType, Result, is_int, is_number, to_int32

_ARGUMENT_MESSAGE = "Argument must be of type 'int' | 'float'."


def _failure(message: str, kind: ErrorType) -> Result:
    return Result.err(CruxError(message, kind, False))


def _type_error() -> Result:
    return _failure(_ARGUMENT_MESSAGE, ErrorType.TYPE)


def _apply(function: Callable[[float], float], number: float) -> float:
    """Apply a math function with C semantics: NaN on domain errors, inf on overflow."""
    try:
        return function(number)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _unary(number: Any, function: Callable[[float], float]) -> Result:
    if not is_number(number):
        return _type_error()
    return Result.ok(_apply(function, float(number)))


def _c_pow(base: float, exponent: float) -> float:
    odd_integer = exponent.is_integer() and int(exponent) % 2 == 1
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and odd_integer else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if odd_integer else math.inf
        return math.nan


def _c_round(number: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(number):
        return number
    magnitude = abs(number)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), number)


def _rounding(function: Callable[[float], int]) -> Callable[[float], float]:
    def apply(number: float) -> float:
        if not math.isfinite(number):
            return number
        return float(function(number))

    return apply


def _logarithm(function: Callable[[float], float]) -> Callable[[float], float]:
    def apply(number: float) -> float:
        if number == 0:
            return -math.inf
        return function(number)

    return apply


def pow_(base: Any, exponent: Any) -> Result:
    """``base`` raised to ``exponent``, as a float."""
    if not (is_number(base) and is_number(exponent)):
        return _failure("Both arguments must be of type 'int' | 'float'.", ErrorType.TYPE)
    return Result.ok(_c_pow(float(base), float(exponent)))


def sqrt(number: Any) -> Result:
    """Square root of a non-negative number."""
    if not is_number(number):
        return _type_error()
    if number < 0:
        return _failure("Cannot calculate square root of a negative number.", ErrorType.VALUE)
    return Result.ok(math.sqrt(float(number)))


def abs_(number: Any) -> Result:
    """Absolute value; ints stay ints."""
    if not is_number(number):
        return _type_error()
    if is_int(number):
        return Result.ok(to_int32(abs(to_int32(number))))
    return Result.ok(math.fabs(number))


def sin(number: Any) -> Result:
    return _unary(number, math.sin)


def cos(number: Any) -> Result:
    return _unary(number, math.cos)


def tan(number: Any) -> Result:
    return _unary(number, math.tan)


def _inverse_trig(number: Any, function: Callable[[float], float]) -> Result:
    if not is_number(number):
        return _type_error()
    value = float(number)
    if value < -1 or value > 1:
        return _failure("Argument must be between -1 and 1.", ErrorType.VALUE)
    return Result.ok(_apply(function, value))


def asin(number: Any) -> Result:
    """Arc sine of a number in [-1, 1]."""
    return _inverse_trig(number, math.asin)


def acos(number: Any) -> Result:
    """Arc cosine of a number in [-1, 1]."""
    return _inverse_trig(number, math.acos)


def atan(number: Any) -> Result:
    return _unary(number, math.atan)


def exp(number: Any) -> Result:
    return _unary(number, math.exp)


def ln(number: Any) -> Result:
    """Natural logarithm; negative numbers are an error."""
    if not is_number(number):
        return _type_error()
    if number < 0:
        return _failure(
            "Cannot calculate natural logarithm of non positive number.", ErrorType.VALUE
        )
    return Result.ok(_apply(_logarithm(math.log), float(number)))


def log10(number: Any) -> Result:
    """Base 10 logarithm; negative numbers are an error."""
    if not is_number(number):
        return _type_error()
    if number < 0:
        return _failure(
            "Cannot calculate base 10 logarithm of non positive number.", ErrorType.VALUE
        )
    return Result.ok(_apply(_logarithm(math.log10), float(number)))


def ceil(number: Any) -> Result:
    """Smallest whole number not below ``number``, as a float."""
    return _unary(number, _rounding(math.ceil))


def floor(number: Any) -> Result:
    """Largest whole number not above ``number``, as a float."""
    return _unary(number, _rounding(math.floor))


def round_(number: Any) -> Result:
    """Nearest whole number, halves away from zero, as a float."""
    return _unary(number, _c_round)


def pi() -> float:
    return math.pi


def e() -> float:
    return math.e