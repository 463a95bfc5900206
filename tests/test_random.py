import pytest

from crux.random import Random
from crux.values import ErrorType


def test_same_seed_gives_same_sequence():
    first = Random(42)
    second = Random(42)
    assert [first.next() for _ in range(10)] == [second.next() for _ in range(10)]


def test_set_seed_restarts_sequence():
    rng = Random(7)
    expected = [rng.next() for _ in range(5)]
    assert rng.set_seed(7).is_ok
    assert [rng.next() for _ in range(5)] == expected


def test_different_seeds_differ():
    assert [Random(1).next() for _ in range(3)] != [Random(2).next() for _ in range(3)]


def test_next_is_in_unit_interval():
    rng = Random(123)
    for _ in range(500):
        value = rng.next()
        assert 0.0 <= value < 1.0


def test_seed_zero_first_value_has_zero_high_bits():
    # With seed 0 the first 26 bits drawn are all zero.
    assert Random(0).next() < 2.0**-26


def test_set_seed_rejects_non_int():
    result = Random(0).set_seed(1.5)
    assert not result.is_ok
    assert result.error.message == "Seed must be a number."
    assert result.error.type is ErrorType.RUNTIME


def test_negative_seed_is_accepted_and_deterministic():
    first = Random(0)
    second = Random(0)
    first.set_seed(-5)
    second.set_seed(-5)
    assert first.next() == second.next()


@pytest.mark.parametrize("low,high", [(0, 10), (-5, 5), (100, 101), (-(2**31), 2**31 - 1)])
def test_next_int_within_bounds(low, high):
    rng = Random(99)
    for _ in range(200):
        value = rng.next_int(low, high).value
        assert low <= value <= high


def test_next_int_single_value():
    assert Random(3).next_int(4, 4).value == 4


def test_next_int_errors():
    rng = Random(0)
    wrong_type = rng.next_int(1.0, 2)
    assert wrong_type.error.type is ErrorType.TYPE
    assert wrong_type.error.message == "Arguments must be of type 'int'."
    reversed_range = rng.next_int(5, 1)
    assert reversed_range.error.message == "Min must be less than or equal to max"


def test_next_double_within_bounds():
    rng = Random(5)
    for _ in range(200):
        value = rng.next_double(2, 3.5).value
        assert 2.0 <= value <= 3.5


def test_next_double_errors():
    rng = Random(0)
    assert rng.next_double("a", 1).error.message == "Parameter <min> must be a number."
    assert rng.next_double(0, "b").error.message == "Parameter <max> must be a number."
    assert not rng.next_double(3, 1).is_ok


def test_next_bool_extremes():
    rng = Random(11)
    assert not any(rng.next_bool(0).value for _ in range(100))
    assert all(rng.next_bool(1).value for _ in range(100))


def test_next_bool_errors():
    rng = Random(0)
    assert rng.next_bool("x").error.message == "Argument must be of type 'int' | 'float'."
    assert rng.next_bool(1.5).error.message == "Probability must be between 0 and 1"
    assert rng.next_bool(-0.1).error.type is ErrorType.RUNTIME


def test_choice_returns_member():
    rng = Random(8)
    items = ["a", "b", "c"]
    for _ in range(100):
        assert rng.choice(items).value in items


def test_choice_errors():
    rng = Random(0)
    assert rng.choice("abc").error.message == "Argument must be an array"
    assert rng.choice([]).error.message == "Array cannot be empty"