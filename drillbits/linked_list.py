"""Singly linked lists and the classic pointer puzzles on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list; nodes compare by identity."""

    val: int
    next: ListNode | None = field(default=None)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link ``values`` into a new list and return its head, or None if empty."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def format_list(head: ListNode | None) -> str:
    """Render a list as ``"1 -> 2 -> NULL"``."""
    parts = [str(value) for value in head] if head is not None else []
    return " -> ".join([*parts, "NULL"])


class LinkedList:
    """A singly linked list of integers built by appending at the tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head = reverse_list(self.head)

    def __iter__(self) -> Iterator[int]:
        if self.head is None:
            return iter(())
        return iter(self.head)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes equal to their predecessor, leaving one of each run."""
    node = head
    while node is not None:
        runner = node.next
        while runner is not None and runner.val == node.val:
            runner = runner.next
        node.next = runner
        node = runner
    return head


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next  # type: ignore[union-attr]
                fast = fast.next  # type: ignore[union-attr]
            return slow
    return None


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def find_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Return the ``n``-th node counted from the end (1 is the last).

    Returns None when the list has fewer than ``n`` nodes or ``n`` is not
    positive.
    """
    lead = head
    for _ in range(n):
        if lead is None:
            return None
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[union-attr]
    return trail if n > 0 else None