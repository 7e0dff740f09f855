"""Doubly linked list nodes with building, editing, reversal and pair search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class DNode:
    """One node of a doubly linked list; iterating yields the values from here on."""

    val: int
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self))


def _nodes(head: DNode | None) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: DNode, k: int) -> DNode:
    """Return the k-th node (1-based); raise IndexError if there is none."""
    if k >= 1:
        for position, node in enumerate(_nodes(head), start=1):
            if position == k:
                return node
    raise IndexError(f"position {k} is outside the list")


def _unlink(head: DNode, node: DNode) -> DNode | None:
    before, after = node.prev, node.next
    if before is None and after is None:
        return None
    if before is None:
        return delete_head(head)
    if after is None:
        return delete_tail(head)
    before.next = after
    after.prev = before
    return head


def build(values: Iterable[int]) -> DNode | None:
    """Link the values into a doubly linked list and return its head, or None."""
    head = tail = None
    for value in values:
        node = DNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: DNode | None) -> list[int]:
    """Return the values of the list in order."""
    return [] if head is None else list(head)


def find_tail(head: DNode | None) -> DNode | None:
    """Return the last node of the list, or None if it is empty."""
    tail = None
    for tail in _nodes(head):
        pass
    return tail


def length(head: DNode | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def search(head: DNode | None, target: int) -> int:
    """Return the zero-based position of the first node holding target, or -1."""
    return next((i for i, node in enumerate(_nodes(head)) if node.val == target), -1)


def delete_head(head: DNode | None) -> DNode | None:
    """Remove the first node and return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.prev = None
    head.next = None
    return new_head


def delete_tail(head: DNode | None) -> DNode | None:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    tail = find_tail(head)
    tail.prev.next = None
    tail.prev = None
    return head


def delete_at(head: DNode | None, k: int) -> DNode | None:
    """Remove the k-th node (1-based) and return the head.

    Raises IndexError unless 1 <= k <= length.
    """
    if head is None:
        return None
    return _unlink(head, _node_at(head, k))


def delete_value(head: DNode | None, value: int) -> DNode | None:
    """Remove the first node holding value and return the head.

    Raises ValueError if value is absent.
    """
    if head is None:
        return None
    node = next((node for node in _nodes(head) if node.val == value), None)
    if node is None:
        raise ValueError(f"{value} is not in the list")
    return _unlink(head, node)


def insert_head(head: DNode | None, value: int) -> DNode:
    """Put a new node holding value in front and return it as the head."""
    node = DNode(value, next=head)
    if head is not None:
        head.prev = node
    return node


def insert_tail(head: DNode | None, value: int) -> DNode:
    """Append a node holding value and return the head."""
    if head is None:
        return DNode(value)
    tail = find_tail(head)
    tail.next = DNode(value, prev=tail)
    return head


def insert_at(head: DNode | None, value: int, k: int) -> DNode:
    """Insert value before the k-th node (1-based) and return the head.

    When k names the last node of a longer list the value is appended after it.
    An empty list simply becomes the new node. Raises IndexError unless
    1 <= k <= length.
    """
    if head is None:
        return DNode(value)
    node = _node_at(head, k)
    if node.prev is None:
        return insert_head(head, value)
    if node.next is None:
        node.next = DNode(value, prev=node)
        return head
    new = DNode(value, next=node, prev=node.prev)
    node.prev.next = new
    node.prev = new
    return head


def insert_before(head: DNode | None, value: int, target: int) -> DNode:
    """Insert value before the first node holding target and return the head.

    An empty list simply becomes the new node. Raises ValueError if target is absent.
    """
    if head is None:
        return DNode(value)
    node = next((node for node in _nodes(head) if node.val == target), None)
    if node is None:
        raise ValueError(f"{target} is not in the list")
    if node.prev is None:
        return insert_head(head, value)
    new = DNode(value, next=node, prev=node.prev)
    node.prev.next = new
    node.prev = new
    return head


def reverse(head: DNode | None) -> DNode | None:
    """Reverse the list in place by swapping each node's links; return the new head."""
    if head is None or head.next is None:
        return head
    node = head
    last = head
    while node is not None:
        node.prev, node.next = node.next, node.prev
        last = node
        node = node.prev
    return last


def find_pairs(head: DNode | None, k: int) -> list[tuple[int, int]]:
    """Return the pairs of values summing to k in a sorted list of distinct values."""
    pairs: list[tuple[int, int]] = []
    if head is None:
        return pairs
    left, right = head, find_tail(head)
    while left is not None and right is not None and left.val < right.val:
        total = left.val + right.val
        if total == k:
            pairs.append((left.val, right.val))
            left, right = left.next, right.prev
        elif total < k:
            left = left.next
        else:
            right = right.prev
    return pairs


def remove_duplicates(head: DNode | None) -> DNode | None:
    """Drop adjacent repeated values from a sorted list and return the head."""
    if head is None:
        return head
    current = head
    while current.next is not None:
        duplicate = current.next
        if duplicate.val == current.val:
            current.next = duplicate.next
            if duplicate.next is not None:
                duplicate.next.prev = current
            duplicate.next = duplicate.prev = None
        else:
            current = duplicate
    return head