"""Rearranging and arithmetic operations on singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.singly import ListNode, build


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def add_one(head: ListNode | None) -> ListNode | None:
    """Add one to the number whose decimal digits the list holds, most significant first.

    The list is changed in place; an empty list stays empty.
    """
    head = reverse(head)
    carry = 1
    node = head
    while node is not None:
        carry, node.val = divmod(node.val + carry, 10)
        if not carry:
            break
        if node.next is None:
            node.next = ListNode(carry)
            carry = 0
        node = node.next
    return reverse(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Return a new list holding the sum of two numbers stored least significant digit first."""
    digits: list[int] = []
    carry = 0
    a, b = l1, l2
    while a is not None or b is not None or carry:
        total = carry
        if a is not None:
            total += a.val
            a = a.next
        if b is not None:
            total += b.val
            b = b.next
        carry, digit = divmod(total, 10)
        digits.append(digit)
    return build(digits)


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Remove the middle node (the later one for even lengths) and return the head.

    A list of fewer than two nodes becomes empty.
    """
    if head is None or head.next is None:
        return None
    previous = head
    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        previous, slow = slow, slow.next
        fast = fast.next.next
    previous.next = slow.next
    return head


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Relink the nodes so those at odd positions come first, then those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left as it was."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse(slow)
    try:
        return all(
            front.val == back.val for front, back in zip(_walk(head), _walk(second))
        )
    finally:
        reverse(second)


def remove_elements(head: ListNode | None, value: int) -> ListNode | None:
    """Remove every node holding value and return the new head."""
    while head is not None and head.val == value:
        head = head.next
    current = head
    while current is not None and current.next is not None:
        if current.next.val == value:
            current.next = current.next.next
        else:
            current = current.next
    return head


def _kth_node(start: ListNode | None, k: int) -> ListNode | None:
    node = start
    for _ in range(k - 1):
        if node is None:
            return None
        node = node.next
    return node


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of k nodes; a shorter last group keeps its order."""
    if head is None or k <= 1:
        return head
    new_head = None
    previous_tail = None
    group_start = head
    while group_start is not None:
        group_end = _kth_node(group_start, k)
        if group_end is None:
            if previous_tail is not None:
                previous_tail.next = group_start
            break
        rest = group_end.next
        group_end.next = None
        reverse(group_start)
        if new_head is None:
            new_head = group_end
        if previous_tail is not None:
            previous_tail.next = group_end
        previous_tail = group_start
        group_start = rest
    return new_head if new_head is not None else head


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list k places to the right and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    tail = head
    n = 1
    while tail.next is not None:
        tail = tail.next
        n += 1
    k %= n
    if k == 0:
        return head
    tail.next = head
    new_tail = _kth_node(head, n - k)
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def sort_012(head: ListNode | None) -> ListNode | None:
    """Sort a list of 0s, 1s and 2s by relinking its nodes.

    Nodes holding any other value are dropped from lists of two or more nodes.
    """
    if head is None or head.next is None:
        return head
    dummies = {value: ListNode(-1) for value in (0, 1, 2)}
    tails = dict(dummies)
    for node in list(_walk(head)):
        if node.val in tails:
            tails[node.val].next = node
            tails[node.val] = node
    twos = dummies[2].next
    ones = dummies[1].next
    tails[0].next = ones if ones is not None else twos
    tails[1].next = twos
    tails[2].next = None
    return dummies[0].next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = head.next
    previous = None
    current = head
    while current is not None and current.next is not None:
        second = current.next
        following = second.next
        second.next = current
        current.next = following
        if previous is not None:
            previous.next = second
        previous = current
        current = following
    return new_head