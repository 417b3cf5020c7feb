"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(
    values: Sequence[Any], key: Any, low: int = 0, high: int | None = None
) -> int | None:
    """Index of ``key`` in sorted ``values[low:high + 1]``, or None if absent."""
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of the first occurrence of ``key`` in ``values``, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)