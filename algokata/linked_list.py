"""Singly linked lists: building, cycle detection, merging and node removal."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = field(default=None)

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    if has_cycle(head):
        raise ValueError("cannot list the values of a cyclic list")
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a slow and a fast walker meet, or None."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list starting at ``head`` loops back on itself."""
    return _meeting_point(head) is not None


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    The nodes themselves are relinked. On equal values the node from
    ``list2`` comes first.
    """
    sentinel = ListNode()
    tail = sentinel
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return sentinel.next


def merge_k_lists(
    lists: Optional[Iterable[Optional[ListNode]]],
) -> Optional[ListNode]:
    """Merge any number of sorted lists into a new sorted list.

    Fresh nodes are created; the input lists are left untouched. On equal
    values the list given earlier wins.
    """
    if lists is None:
        return None
    heap = [(node.val, index, node) for index, node in enumerate(lists) if node is not None]
    heapq.heapify(heap)

    sentinel = ListNode()
    tail = sentinel
    while heap:
        value, index, node = heapq.heappop(heap)
        tail.next = ListNode(value)
        tail = tail.next
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, index, node.next))
    return sentinel.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the head.

    When ``n`` reaches or exceeds the length of the list, the head is removed.
    """
    if head is None:
        return None
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    lead = head
    for _ in range(n):
        if lead.next is None:
            return head.next
        lead = lead.next

    before = head
    while lead.next is not None:
        before = before.next
        lead = lead.next
    before.next = before.next.next
    return head