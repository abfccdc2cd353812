import pytest

from algokit.linked_list import (
    ListNode,
    build_list,
    has_cycle,
    next_larger_nodes,
    reverse_list,
    to_values,
)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, 5, 1], list(range(20))])
def test_build_and_read_round_trip(values):
    assert to_values(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert not to_values(None)


def test_build_links_nodes_in_order():
    head = build_list([7, 8])
    assert head.val == 7
    assert head.next.val == 8
    assert head.next.next is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 2, 0, -4]])
def test_straight_list_has_no_cycle(values):
    assert not has_cycle(build_list(values))


@pytest.mark.parametrize("values,pos", [([3, 2, 0, -4], 1), ([1, 2], 0), ([1], 0), ([1, 2, 3, 4, 5], 4)])
def test_looped_list_has_cycle(values, pos):
    head = build_list(values)
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    nodes[-1].next = nodes[pos]
    assert has_cycle(head)


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2], [9], list(range(10))])
def test_reverse_list(values):
    assert to_values(reverse_list(build_list(values))) == values[::-1]


def test_reverse_twice_restores_order():
    values = [4, 1, 3]
    head = build_list(values)
    assert to_values(reverse_list(reverse_list(head))) == values


def test_reverse_empty_list():
    assert reverse_list(None) is None


def test_reverse_keeps_node_identity():
    head = build_list([1, 2, 3])
    tail = head.next.next
    assert reverse_list(head) is tail
    assert head.next is None


def test_next_larger_nodes_worked_example():
    assert next_larger_nodes(build_list([2, 1, 5])) == [5, 5, 0]


@pytest.mark.parametrize("values", [[2, 7, 4, 3, 5], [1, 7, 5, 1, 9, 2, 5, 1], [5, 4, 3], [1, 2, 3]])
def test_next_larger_nodes_invariant(values):
    answer = next_larger_nodes(build_list(values))
    assert len(answer) == len(values)
    for i, found in enumerate(answer):
        later = values[i + 1:]
        larger = [v for v in later if v > values[i]]
        if larger:
            assert found == larger[0]
        else:
            assert not found


def test_next_larger_nodes_empty():
    assert not next_larger_nodes(None)


def test_node_repr_shows_value():
    assert repr(ListNode(3)) == "ListNode(3)"