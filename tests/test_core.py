import pytest

from crux import core
from crux.values import CruxError, ErrorType, Result


@pytest.mark.parametrize("value", ["abc", [1, 2, 3], {"a": 1, "b": 2, "c": 3}])
def test_length_of_collections(value):
    assert core.length(value).value == len(value)
    assert core.length_or_nil(value) == len(value)


def test_length_of_non_collection():
    result = core.length(5)
    assert result.error.type is ErrorType.TYPE
    assert core.length_or_nil(5) is None


def test_to_int_conversions():
    assert core.to_int(7).value == 7
    assert core.to_int("42abc").value == 42
    assert core.to_int(True).value == 1
    assert core.to_int(False).value == 0
    assert core.to_int(None).value == 0


def test_to_int_failure():
    result = core.to_int("abc")
    assert result.error.type is ErrorType.TYPE
    assert result.error.message == "Cannot convert value to number."
    assert core.try_int([1]) is None


def test_to_float_conversions():
    assert core.to_float("2.5").value == 2.5
    kept = core.to_float(3).value
    assert kept == 3 and isinstance(kept, int)
    assert core.to_float(True).value == 1.0
    assert core.to_float(None).value == 0.0


def test_to_float_failure():
    assert core.to_float("x").error.type is ErrorType.TYPE
    assert core.try_float({}) is None


def test_to_string_scalars_round_trip():
    assert core.to_string("hello").value == "hello"
    assert core.to_string(True).value == "true"
    assert core.to_string(None).value == "nil"
    assert core.to_int(core.to_string(12).value).value == 12


def test_to_array():
    assert core.to_array("ab").value == ["a", "b"]
    assert core.to_array({"k": 1}).value == ["k", 1]
    assert core.to_array(5).value == [5]
    items = [1, 2]
    assert core.to_array(items).value is items


def test_to_array_too_large():
    big = "a" * 70000
    assert core.to_array(big).error.type is ErrorType.RUNTIME
    assert core.try_array(big) is None


def test_to_table():
    assert core.to_table(["x", "y"]).value == {0: "x", 1: "y"}
    assert core.to_table("ab").value == {0: "a", 1: "b"}
    assert core.to_table(9).value == {0: 9}
    table = {"a": 1}
    assert core.to_table(table).value is table