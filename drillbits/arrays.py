"""Array puzzles solved with hashing."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def count_unique_integers(values: Iterable[int]) -> int:
    """Number of distinct integers in ``values``."""
    return len(set(values))


def find_missing_positive(values: Iterable[int]) -> int:
    """Smallest positive integer that does not occur in ``values``."""
    present = {v for v in values if v > 0}
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def find_two_xor(values: Iterable[int], target_xor: int) -> tuple[int, int] | None:
    """Find two values whose XOR equals ``target_xor``.

    Returns ``(current, earlier)`` for the first value whose partner was
    already seen, or None when no such pair exists.
    """
    seen: set[int] = set()
    for value in values:
        required = value ^ target_xor
        if required in seen:
            return value, required
        seen.add(value)
    return None


def max_product_of_two(values: Iterable[int]) -> int:
    """Product of the two largest values, or 0 when there are fewer than two."""
    largest = heapq.nlargest(2, values)
    if len(largest) < 2:
        return 0
    return largest[0] * largest[1]