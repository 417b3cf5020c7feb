"""Introductory exercises: greeting, conversions, comparisons and counters."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from math import isqrt

from .bits import xor_swap


def greeting() -> str:
    """The classic first program's message."""
    return "Hello World!"


def binary_to_decimal(binary: str) -> int:
    """Convert a string of binary digits to its integer value.

    An empty string converts to 0.
    """
    value = 0
    for digit in binary:
        if digit not in "01":
            raise ValueError(f"not a binary digit: {digit!r}")
        value = value * 2 + int(digit)
    return value


def byte_order() -> str:
    """Name of this machine's byte order: "Little Endian" or "Big Endian"."""
    return "Little Endian" if sys.byteorder == "little" else "Big Endian"


def largest_number(a: int, b: int, c: int) -> int:
    """Largest of three numbers."""
    return max(a, b, c)


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num <= 1:
        return False
    return all(num % divisor for divisor in range(2, isqrt(num) + 1))


def replace_zeros_with_ones(num: int) -> int:
    """Replace every decimal digit 0 in a positive number with 1."""
    if num <= 0:
        raise ValueError(f"number must be positive, got {num}")
    return int(str(num).replace("0", "1"))


@dataclass
class CallCounter:
    """Counter that remembers how often it has been incremented."""

    value: int = 0

    def increment(self) -> int:
        """Return the current count, then advance it by one."""
        current = self.value
        self.value += 1
        return current


def swap_values(a: int, b: int) -> tuple[int, int]:
    """Return ``(b, a)``, exchanged with XOR and no temporary."""
    return xor_swap(a, b)