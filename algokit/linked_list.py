"""Singly linked lists: building, cycle detection, reversal and next-greater values."""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; return its head."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list:
    """Return the values of an acyclic linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
            slow = slow.next
        if slow is fast:
            return True
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def next_larger_nodes(head: Optional[ListNode]) -> list:
    """For each node, return the next strictly larger value, or 0 if none follows."""
    values = to_values(head)
    answer = [0] * len(values)
    pending = []
    for i, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            answer[pending.pop()] = value
        pending.append(i)
    return answer