"""Cycle detection and intersection of singly linked lists."""

from __future__ import annotations

from dsakit.singly import ListNode


def create_cycle(head: ListNode | None, pos: int) -> None:
    """Point the tail of the list back at the node at zero-based position pos.

    A negative pos, or one that does not name a node before the tail, leaves
    the list without a cycle.
    """
    if head is None or pos < 0:
        return
    entry = None
    node = head
    index = 0
    while node.next is not None:
        if index == pos:
            entry = node
        node = node.next
        index += 1
    node.next = entry


def _meeting_point(head: ListNode | None) -> ListNode | None:
    """Return the node where the slow and fast walkers meet, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def cycle_length(head: ListNode | None) -> int:
    """Return the number of nodes in the list's cycle, or 0 if it has none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return 0
    count = 1
    node = meeting.next
    while node is not meeting:
        count += 1
        node = node.next
    return count


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the list's cycle begins, or None if it has none."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two lists, or None if they do not meet."""
    if head_a is None or head_b is None:
        return None
    first, second = head_a, head_b
    while first is not second:
        first = head_b if first is None else first.next
        second = head_a if second is None else second.next
    return first