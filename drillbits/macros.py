"""Small single-expression bit operations on integers."""

from __future__ import annotations

from .bits import xor_swap

__all__ = [
    "is_bit_set",
    "clear_bit",
    "count_set_bits",
    "is_odd",
    "is_even",
    "is_power_of_two",
    "set_bit",
    "swap",
    "toggle_bit",
]


def _check_position(pos: int) -> None:
    if pos < 0:
        raise ValueError(f"bit position must be non-negative, got {pos}")


def is_bit_set(num: int, pos: int) -> bool:
    """Return True if bit ``pos`` of ``num`` is set."""
    _check_position(pos)
    return (num & (1 << pos)) != 0


def clear_bit(num: int, pos: int) -> int:
    """Return ``num`` with bit ``pos`` cleared."""
    _check_position(pos)
    return num & ~(1 << pos)


def count_set_bits(num: int) -> int:
    """Count the ones in a non-negative integer, one bit at a time."""
    if num < 0:
        raise ValueError("cannot count set bits of a negative number")
    count = 0
    while num:
        count += num & 1
        num >>= 1
    return count


def is_odd(num: int) -> bool:
    """Return True if the lowest bit of ``num`` is set."""
    return bool(num & 1)


def is_even(num: int) -> bool:
    """Return True if the lowest bit of ``num`` is clear."""
    return not num & 1


def is_power_of_two(num: int) -> bool:
    """Return True if ``num`` is a positive power of two."""
    return num > 0 and not num & (num - 1)


def set_bit(num: int, pos: int) -> int:
    """Return ``num`` with bit ``pos`` set."""
    _check_position(pos)
    return num | (1 << pos)


def swap(a: int, b: int) -> tuple[int, int]:
    """Return ``(b, a)``, exchanged with XOR."""
    return xor_swap(a, b)


def toggle_bit(num: int, pos: int) -> int:
    """Return ``num`` with bit ``pos`` inverted."""
    _check_position(pos)
    return num ^ (1 << pos)