import pytest

from drillbits.linked_list import (
    LinkedList,
    ListNode,
    build_list,
    delete_duplicates,
    detect_cycle,
    find_nth_from_end,
    format_list,
    get_intersection_node,
    merge_two_lists,
    reverse_list,
)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def test_linked_list_append_and_str():
    linked = LinkedList()
    for value in [3, 4, 8, 2, 7]:
        linked.append(value)
    assert str(linked) == "3 4 8 2 7"
    assert list(linked) == [3, 4, 8, 2, 7]


def test_linked_list_reverse():
    linked = LinkedList([3, 4, 8, 2, 7])
    linked.reverse()
    assert str(linked) == "7 2 8 4 3"


def test_empty_linked_list():
    linked = LinkedList()
    assert list(linked) == []
    linked.reverse()
    assert linked.head is None


def test_build_list_round_trip():
    values = [5, 1, 9, 1]
    assert list(build_list(values)) == values
    assert build_list([]) is None


def test_node_iteration_from_middle():
    head = build_list([1, 2, 3, 4])
    assert list(head.next.next) == [3, 4]


def test_format_list():
    assert format_list(build_list([1, 2, 3, 4, 5])) == "1 -> 2 -> 3 -> 4 -> 5 -> NULL"
    assert format_list(None) == "NULL"


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 4, 8, 2, 7]])
def test_reverse_list(values):
    head = reverse_list(build_list(values))
    assert (list(head) if head else []) == list(reversed(values))


def test_reverse_twice_restores():
    values = [6, 0, 2]
    assert list(reverse_list(reverse_list(build_list(values)))) == values


@pytest.mark.parametrize(
    "values", [[1, 1, 2], [1, 1, 2, 3, 3], [4], [2, 2, 2, 2], [1, 2, 3]]
)
def test_delete_duplicates(values):
    head = delete_duplicates(build_list(values))
    assert list(head) == list(dict.fromkeys(values))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


def test_detect_cycle_finds_entry():
    head = build_list([3, 2, 0, -4])
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert detect_cycle(head) is nodes[1]


def test_detect_cycle_self_loop():
    head = ListNode(1)
    head.next = head
    assert detect_cycle(head) is head


def test_detect_cycle_none():
    assert detect_cycle(build_list([1, 2, 3])) is None
    assert detect_cycle(None) is None


def test_intersection_found():
    shared = build_list([8, 4, 5])
    head_a = build_list([4, 1])
    head_b = build_list([5, 6, 1])
    _nodes(head_a)[-1].next = shared
    _nodes(head_b)[-1].next = shared
    assert get_intersection_node(head_a, head_b) is shared


def test_intersection_absent():
    assert get_intersection_node(build_list([1, 2]), build_list([1, 2])) is None
    assert get_intersection_node(None, build_list([1])) is None


@pytest.mark.parametrize(
    "left,right",
    [([1, 2, 4], [1, 3, 4]), ([], [0]), ([5], []), ([1, 5, 9], [2, 3, 10, 11])],
)
def test_merge_two_lists(left, right):
    merged = merge_two_lists(build_list(left), build_list(right))
    assert (list(merged) if merged else []) == sorted(left + right)


def test_merge_prefers_first_list_on_ties():
    first = build_list([1])
    second = build_list([1])
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


def test_find_nth_from_end():
    head = build_list([1, 2, 3, 4, 5])
    node = find_nth_from_end(head, 2)
    assert node.val == 4


def test_find_nth_from_end_edges():
    head = build_list([1, 2, 3, 4, 5])
    assert find_nth_from_end(head, 5) is head
    assert find_nth_from_end(head, 1) is _nodes(head)[-1]
    assert find_nth_from_end(head, 6) is None
    assert find_nth_from_end(head, 0) is None