import sys
from itertools import permutations

import pytest

from drillbits.basics import (
    CallCounter,
    binary_to_decimal,
    byte_order,
    greeting,
    is_prime,
    largest_number,
    replace_zeros_with_ones,
    swap_values,
)


def test_greeting():
    assert greeting() == "Hello World!"


def test_binary_to_decimal_source_example():
    assert binary_to_decimal("1101") == 13


@pytest.mark.parametrize("num", [0, 1, 2, 255, 1024, 2**40 + 3])
def test_binary_round_trip(num):
    assert binary_to_decimal(format(num, "b")) == num


def test_binary_empty_is_zero():
    assert binary_to_decimal("") == 0


@pytest.mark.parametrize("bad", ["102", "1a", " 1"])
def test_binary_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        binary_to_decimal(bad)


def test_byte_order_matches_platform():
    expected = "Little Endian" if sys.byteorder == "little" else "Big Endian"
    assert byte_order() == expected


def test_largest_source_example():
    assert largest_number(10, 20, 15) == 20


@pytest.mark.parametrize("trio", [(1, 2, 3), (-4, -4, -9), (7, 7, 7)])
def test_largest_independent_of_order(trio):
    results = {largest_number(*p) for p in permutations(trio)}
    assert results == {max(trio)}


def test_is_prime_source_example():
    assert is_prime(9) is False


@pytest.mark.parametrize("num", [-7, 0, 1])
def test_small_numbers_not_prime(num):
    assert is_prime(num) is False


def test_two_is_prime():
    assert is_prime(2) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 5), (7, 11), (13, 97)])
def test_products_not_prime(a, b):
    assert is_prime(a) and is_prime(b)
    assert is_prime(a * b) is False


def test_replace_zeros_source_example():
    assert replace_zeros_with_ones(102301) == 112311


@pytest.mark.parametrize("num", [1, 10, 900, 123456, 100000])
def test_replace_zeros_invariant(num):
    result = str(replace_zeros_with_ones(num))
    original = str(num)
    assert "0" not in result
    assert len(result) == len(original)
    assert all(r == o for r, o in zip(result, original) if o != "0")


@pytest.mark.parametrize("num", [0, -5])
def test_replace_zeros_rejects_non_positive(num):
    with pytest.raises(ValueError):
        replace_zeros_with_ones(num)


def test_call_counter_source_sequence():
    counter = CallCounter()
    assert [counter.increment() for _ in range(3)] == [0, 1, 2]


def test_call_counters_are_independent():
    first = CallCounter()
    second = CallCounter()
    first.increment()
    first.increment()
    assert second.increment() == 0
    assert first.value == 2


def test_swap_values_source_example():
    assert swap_values(10, 20) == (20, 10)