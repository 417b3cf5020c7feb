"""String helpers that treat a NUL character as the end of the text."""

from __future__ import annotations


def string_length(text: str) -> int:
    """Number of characters before the first NUL, or of the whole text."""
    head, _, _ = text.partition("\0")
    return len(head)


def reverse_string(text: str) -> str:
    """Reverse the characters before the first NUL; the rest is kept as is."""
    head, nul, tail = text.partition("\0")
    return head[::-1] + nul + tail