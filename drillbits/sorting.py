"""Elementary in-place sorting algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent pairs."""
    size = len(values)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last item.

    Returns the pivot's final index; smaller items end up before it.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high + 1):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(
    values: MutableSequence[Any], low: int = 0, high: int | None = None
) -> None:
    """Sort ``values[low:high + 1]`` in place with quicksort."""
    if high is None:
        high = len(values) - 1
    if low < high:
        pivot = partition(values, low, high)
        quick_sort(values, low, pivot - 1)
        quick_sort(values, pivot + 1, high)


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by selecting the smallest remaining item."""
    size = len(values)
    for i in range(size - 1):
        smallest = min(range(i, size), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]