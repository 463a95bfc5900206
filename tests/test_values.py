import math

import pytest

from crux.values import (
    CruxError,
    ErrorType,
    Result,
    format_value,
    is_int,
    is_number,
    to_int32,
    values_equal,
)


def test_to_int32_wraps():
    assert to_int32(5) == 5
    assert to_int32(-1) == -1
    assert to_int32(2**31) == -(2**31)
    assert to_int32(2**32 + 7) == 7


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_to_int32_identity_in_range(value):
    assert to_int32(value) == value


def test_is_int_and_number():
    assert is_int(3)
    assert not is_int(True)
    assert not is_int(3.0)
    assert is_number(1.5)
    assert is_number(2)
    assert not is_number("x")
    assert not is_number(None)


def test_values_equal_numbers():
    assert values_equal(1, 1)
    assert values_equal(1.0, 1)
    assert values_equal(2.5, 2.5)
    assert not values_equal(1, 1.0)
    assert not values_equal(float("nan"), float("nan"))


def test_values_equal_other_kinds():
    assert values_equal("a", "a")
    assert not values_equal("a", "b")
    assert values_equal(None, None)
    assert not values_equal(True, 1)
    assert values_equal(False, False)
    first = [1]
    assert values_equal(first, first)
    assert not values_equal([1], [1])


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "nil"
    assert format_value(0.5) == "0.5"
    assert format_value(7) == "7"
    assert format_value(2**31) == "-2147483648"
    assert format_value("text") == "text"


def test_format_float_uses_shortest_general_form():
    assert format_value(1e20) == "1e+20"
    assert format_value(math.inf) == "inf"


def test_result_ok_and_err():
    ok = Result.ok(3)
    assert ok.is_ok and ok.value == 3 and ok.error is None
    assert ok.unwrap() == 3

    error = CruxError("boom", ErrorType.VALUE)
    bad = Result.err(error)
    assert not bad.is_ok
    assert bad.error is error
    with pytest.raises(CruxError) as info:
        bad.unwrap()
    assert info.value is error


def test_crux_error_fields():
    error = CruxError("bad thing", ErrorType.IO, True)
    assert str(error) == "bad thing"
    assert error.message == "bad thing"
    assert error.type is ErrorType.IO
    assert error.is_panic is True
    default = CruxError("x")
    assert default.type is ErrorType.RUNTIME
    assert default.is_panic is False