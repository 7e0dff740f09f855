"""Binary search on the answer: find the best value that passes a monotone feasibility test."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import takewhile


def _require(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} is empty")


def _smallest(low: int, high: int, ok: Callable[[int], bool]) -> int | None:
    """Return the smallest x in [low, high] for which ok(x) holds, assuming ok is monotone."""
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if ok(mid):
            answer, high = mid, mid - 1
        else:
            low = mid + 1
    return answer


def _largest(low: int, high: int, ok: Callable[[int], bool]) -> int | None:
    """Return the largest x in [low, high] for which ok(x) holds, assuming ok is monotone."""
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if ok(mid):
            answer, low = mid, mid + 1
        else:
            high = mid - 1
    return answer


def aggressive_cows(poles: Sequence[int], cows: int) -> int:
    """Return the largest minimum distance at which cows can be placed on the poles, or -1.

    The input is not modified.
    """
    _require(poles, "poles")
    stalls = sorted(poles)

    def fits(distance: int) -> bool:
        placed, last = 1, stalls[0]
        for stall in stalls[1:]:
            if stall - last >= distance:
                placed += 1
                last = stall
        return placed >= cows

    best = _largest(1, stalls[-1] - stalls[0], fits)
    return -1 if best is None else best


def allocate_pages(books: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any student reads, or -1.

    Books are handed out in order, each student getting a contiguous run.
    """
    if students > len(books):
        return -1
    _require(books, "books")

    def fits(limit: int) -> bool:
        readers, pages_read = 1, 0
        for pages in books:
            if pages > limit:
                return False
            if pages_read + pages > limit:
                readers += 1
                pages_read = pages
                if readers > students:
                    return False
            else:
                pages_read += pages
        return True

    total = sum(books)
    best = _smallest(max(books), total, fits)
    return total if best is None else best


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all piles within h hours."""
    _require(piles, "piles")

    def fits(speed: int) -> bool:
        return sum(-(-bananas // speed) for bananas in piles) <= h

    largest = max(piles)
    best = _smallest(1, largest, fits)
    return largest if best is None else best


def _bouquets_ready(arr: Sequence[int], day: int, m: int, k: int) -> bool:
    run = bouquets = 0
    for bloom in arr:
        if bloom <= day:
            run += 1
            if run == k:
                bouquets += 1
                run = 0
        else:
            run = 0
    return bouquets >= m


def min_days_linear(arr: Sequence[int], m: int, k: int) -> int:
    """Return the first day m bouquets of k adjacent flowers can be made, trying every day, or -1."""
    if not arr or m * k > len(arr):
        return -1
    days = range(min(arr), max(arr) + 1)
    return next((day for day in days if _bouquets_ready(arr, day, m, k)), -1)


def min_days(arr: Sequence[int], m: int, k: int) -> int:
    """Return the first day m bouquets of k adjacent flowers can be made, by binary search, or -1."""
    if not arr or len(arr) < m * k:
        return -1
    latest = max(arr)
    best = _smallest(min(arr), latest, lambda day: _bouquets_ready(arr, day, m, k))
    return latest + 1 if best is None else best


def _power(base: int, exponent: int) -> int:
    return base**exponent if exponent > 0 else 1


def nth_root_linear(num: int, n: int) -> int:
    """Return the integer n-th root of num (rounded down) by trying each candidate, or -1."""
    if num == 0:
        return 0
    answer = -1
    for candidate in range(1, num + 1):
        if _power(candidate, n) > num:
            break
        answer = candidate
    return answer


def nth_root(num: int, n: int) -> int:
    """Return the integer n-th root of num (rounded down) by binary search, or -1."""
    if num == 0:
        return 0
    low, high, answer = 1, num, -1
    while low <= high:
        mid = (low + high) // 2
        value = _power(mid, n)
        if value == num:
            return mid
        if value < num:
            answer, low = mid, mid + 1
        else:
            high = mid - 1
    return answer


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries all weights, in order, within the given days."""
    _require(weights, "weights")

    def fits(capacity: int) -> bool:
        days_used, load = 1, 0
        for weight in weights:
            if load + weight > capacity:
                days_used += 1
                load = weight
            else:
                load += weight
        return days_used <= days

    best = _smallest(max(weights), sum(weights), fits)
    return -1 if best is None else best


def smallest_divisor(arr: Sequence[int], threshold: int) -> int:
    """Return the least divisor whose rounded-up quotients sum to at most threshold, or -1."""
    _require(arr, "arr")

    def fits(divisor: int) -> bool:
        return sum(-(-value // divisor) for value in arr) <= threshold

    best = _smallest(1, max(arr), fits)
    return -1 if best is None else best


def sqrt_linear(num: int) -> int:
    """Return the largest i below num with i*i < num, or -1 if there is none."""
    return max(takewhile(lambda i: i * i < num, range(num)), default=-1)


def int_sqrt(num: int) -> int:
    """Return the integer square root of num, rounded down, or -1 for negative num."""
    if num in (0, 1):
        return num
    best = _largest(1, num, lambda mid: mid <= num // mid)
    return -1 if best is None else best