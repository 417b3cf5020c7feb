"""Bit manipulation, array, linked-list, searching, sorting and concurrency routines."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basics",
    "bits",
    "concurrency",
    "linked_list",
    "macros",
    "searching",
    "sorting",
    "strings",
]