"""Singly linked list nodes with building, searching, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list; iterating yields the values from here on."""

    val: int
    next: ListNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self))


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _tail(head: ListNode) -> ListNode:
    node = head
    while node.next is not None:
        node = node.next
    return node


def build(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head, or None if there are none."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of the list in order."""
    return [] if head is None else list(head)


def length(head: ListNode | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def search(head: ListNode | None, target: int) -> int:
    """Return the zero-based position of the first node holding target, or -1."""
    return next((i for i, node in enumerate(_nodes(head)) if node.val == target), -1)


def delete_head(head: ListNode | None) -> ListNode | None:
    """Remove the first node and return the new head."""
    if head is None or head.next is None:
        return None
    return head.next


def delete_tail(head: ListNode | None) -> ListNode | None:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def delete_at(head: ListNode | None, k: int) -> ListNode | None:
    """Remove the k-th node (1-based); a k outside the list leaves it unchanged."""
    if head is None:
        return None
    if k == 1:
        return head.next
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            if node.next is not None:
                node.next = node.next.next
            break
    return head


def delete_value(head: ListNode | None, value: int) -> ListNode | None:
    """Remove the first node holding value, if any, and return the head."""
    if head is None:
        return None
    if head.val == value:
        return head.next
    for node in _nodes(head):
        if node.next is not None and node.next.val == value:
            node.next = node.next.next
            break
    return head


def insert_head(head: ListNode | None, value: int) -> ListNode:
    """Put a new node holding value in front and return it as the head."""
    return ListNode(value, head)


def insert_tail(head: ListNode | None, value: int) -> ListNode:
    """Append a node holding value and return the head."""
    node = ListNode(value)
    if head is None:
        return node
    _tail(head).next = node
    return head


def insert_at(head: ListNode | None, value: int, k: int) -> ListNode:
    """Insert value so that it becomes the k-th node (1-based) and return the head.

    An empty list simply becomes the new node. Raises IndexError unless 1 <= k <= length + 1.
    """
    if head is None:
        return ListNode(value)
    if k == 1:
        return insert_head(head, value)
    previous = next(
        (node for position, node in enumerate(_nodes(head), start=1) if position == k - 1),
        None,
    )
    if previous is None:
        raise IndexError(f"position {k} is outside the list")
    previous.next = ListNode(value, previous.next)
    return head


def insert_before(head: ListNode | None, value: int, target: int) -> ListNode:
    """Insert value before the first node holding target and return the head.

    An empty list simply becomes the new node. Raises ValueError if target is absent.
    """
    if head is None:
        return ListNode(value)
    if head.val == target:
        return insert_head(head, value)
    previous = next(
        (node for node in _nodes(head) if node.next is not None and node.next.val == target),
        None,
    )
    if previous is None:
        raise ValueError(f"{target} is not in the list")
    previous.next = ListNode(value, previous.next)
    return head