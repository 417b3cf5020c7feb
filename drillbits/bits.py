"""Bit manipulation helpers on integers with C ``int``/``unsigned int`` semantics.

Functions documented as working on unsigned values treat their input as a
32-bit unsigned integer. Negative inputs are first reduced to their 32-bit
two's complement pattern.
"""

from __future__ import annotations

from functools import reduce
from collections.abc import Iterable
from operator import xor

WORD_BITS = 32
_MASK32 = (1 << WORD_BITS) - 1
_SIGNED_MAX_UNSIGNED = _MASK32 >> 1


def _check_position(n: int) -> None:
    if n < 0:
        raise ValueError(f"bit position must be non-negative, got {n}")


def _range_mask(m: int, n: int) -> int:
    """Mask with bits ``m`` through ``n`` (inclusive) set, within a 32-bit word."""
    if not 0 <= m <= n < WORD_BITS:
        raise ValueError(
            f"bit range must satisfy 0 <= m <= n < {WORD_BITS}, got m={m}, n={n}"
        )
    return ((1 << (n - m + 1)) - 1) << m


def _popcount32(num: int) -> int:
    return bin(num & _MASK32).count("1")


def reverse_significant_bits(num: int) -> int:
    """Reverse the bits of ``num`` up to and including its highest set bit."""
    if num < 0:
        raise ValueError("cannot reverse the bits of a negative number")
    if num == 0:
        return 0
    return int(format(num, "b")[::-1], 2)


def is_binary_palindrome(num: int) -> bool:
    """Return True if the binary form of ``num`` reads the same both ways."""
    return num == reverse_significant_bits(num)


def reverse_bits(num: int, width: int) -> int:
    """Reverse the lowest ``width`` bits of ``num``; higher bits are dropped."""
    if num < 0:
        raise ValueError("cannot reverse the bits of a negative number")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    reversed_value = 0
    for _ in range(width):
        reversed_value = (reversed_value << 1) | (num & 1)
        num >>= 1
    return reversed_value


def is_odd(num: int) -> bool:
    """Return True if the lowest bit of ``num`` is set."""
    return bool(num & 1)


def clear_bits_in_range(num: int, m: int, n: int) -> int:
    """Clear bits ``m`` through ``n`` (inclusive) of an unsigned 32-bit value."""
    return (num & _MASK32) & ~_range_mask(m, n) & _MASK32


def clear_nth_bit(num: int, n: int) -> int:
    """Clear bit ``n`` of ``num``."""
    _check_position(n)
    return num & ~(1 << n)


def clear_rightmost_set_bit(num: int) -> int:
    """Clear the lowest set bit of ``num``."""
    return num & (num - 1)


def count_bits_to_convert(a: int, b: int) -> int:
    """Number of bits that differ between ``a`` and ``b`` as 32-bit words."""
    return _popcount32(a ^ b)


def count_set_bits(num: int) -> int:
    """Number of set bits in the 32-bit pattern of ``num``."""
    num &= _MASK32
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def count_shifts_until_overflow(num: int) -> int:
    """Left shifts needed before the top bit of a 32-bit unsigned value is set."""
    num &= _MASK32
    if num == 0:
        raise ValueError("zero never overflows when shifted")
    count = 0
    while num <= _SIGNED_MAX_UNSIGNED:
        num = (num << 1) & _MASK32
        count += 1
    return count


def extract_bits(num: int, m: int, n: int) -> int:
    """Return bits ``m`` through ``n`` (inclusive) of an unsigned 32-bit value."""
    return ((num & _MASK32) & _range_mask(m, n)) >> m


def extract_sign_bit(num: int) -> int:
    """Return the sign bit (bit 31) of ``num`` as a 32-bit integer."""
    return ((num & _MASK32) >> (WORD_BITS - 1)) & 1


def find_two_unique_numbers(values: Iterable[int]) -> tuple[int, int]:
    """Find the two values that occur once where every other value occurs twice.

    The first element of the result is the one holding the lowest bit in
    which the two unique values differ.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    split_bit = combined & -combined
    with_bit = reduce(xor, (v for v in items if v & split_bit), 0)
    without_bit = reduce(xor, (v for v in items if not v & split_bit), 0)
    return with_bit, without_bit


def largest_power_of_two_dividing(num: int) -> int:
    """Largest power of two that divides ``num`` (its lowest set bit)."""
    return num & -num


def has_odd_number_of_set_bits(num: int) -> bool:
    """Return True if the 32-bit pattern of ``num`` has an odd number of ones."""
    return _popcount32(num) % 2 == 1


def have_opposite_signs(a: int, b: int) -> bool:
    """Return True if exactly one of ``a`` and ``b`` is negative."""
    return (a ^ b) < 0


def is_power_of_two(num: int) -> bool:
    """Return True if ``num`` is a positive power of two."""
    return num > 0 and num & (num - 1) == 0


def is_power_of_four(num: int) -> bool:
    """Return True if ``num`` is a positive power of four."""
    return is_power_of_two(num) and (num - 1) % 3 == 0


def rightmost_set_bit_position(num: int) -> int:
    """One-based position of the lowest set bit of ``num``."""
    if num == 0:
        raise ValueError("zero has no set bits")
    return (num & -num).bit_length()


def set_bits_in_range(num: int, m: int, n: int) -> int:
    """Set bits ``m`` through ``n`` (inclusive) of an unsigned 32-bit value."""
    return (num & _MASK32) | _range_mask(m, n)


def set_nth_bit(num: int, n: int) -> int:
    """Set bit ``n`` of ``num``."""
    _check_position(n)
    return num | (1 << n)


def set_rightmost_unset_bit(num: int) -> int:
    """Set the lowest clear bit of ``num``."""
    return num | (num + 1)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Return ``(b, a)``, exchanged with three XORs."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def swap_odd_even_bits(num: int) -> int:
    """Swap every odd bit with its neighbouring even bit in a 32-bit value."""
    num &= _MASK32
    odd_bits = num & 0xAAAAAAAA
    even_bits = num & 0x55555555
    return ((odd_bits >> 1) | (even_bits << 1)) & _MASK32


def toggle_bits_in_range(num: int, m: int, n: int) -> int:
    """Invert bits ``m`` through ``n`` (inclusive) of an unsigned 32-bit value."""
    return (num & _MASK32) ^ _range_mask(m, n)


def toggle_nth_bit(num: int, n: int) -> int:
    """Invert bit ``n`` of ``num``."""
    _check_position(n)
    return num ^ (1 << n)


def find_unique(values: Iterable[int]) -> int:
    """Find the value that occurs once where every other value occurs twice."""
    return reduce(xor, values, 0)