"""Array problems: three-sum, majority element, runs of ones, missing and single numbers."""

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import combinations
from operator import xor


def three_sum_brute(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct zero-sum triplet, each sorted, by trying all triples."""
    found = {tuple(sorted(triple)) for triple in combinations(nums, 3) if sum(triple) == 0}
    return [list(triple) for triple in sorted(found)]


def three_sum_better(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct zero-sum triplet using a set for the third value."""
    found: set[tuple[int, ...]] = set()
    for i, first in enumerate(nums):
        seen: set[int] = set()
        for second in nums[i + 1:]:
            third = -(first + second)
            if third in seen:
                found.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triple) for triple in sorted(found)]


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct zero-sum triplet with the sort and two-pointer method.

    The input is not modified; triplets come out in lexicographic order.
    """
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def majority_brute(arr: Sequence[int]) -> int:
    """Return the element occurring more than len(arr)//2 times, or -1."""
    half = len(arr) // 2
    return next((value for value in arr if arr.count(value) > half), -1)


def majority_better(arr: Sequence[int]) -> int:
    """Return the element occurring more than len(arr)//2 times using a count table, or -1."""
    half = len(arr) // 2
    counts = Counter(arr)
    return next((value for value, count in counts.items() if count > half), -1)


def majority_element(arr: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate if it fills at least half of arr, else -1.

    A candidate occurring exactly half of the time is accepted.
    """
    if not arr:
        return -1
    candidate = arr[0]
    count = 0
    for value in arr:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if arr.count(candidate) < len(arr) / 2:
        return -1
    return candidate


def max_consecutive_ones(arr: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in arr:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def _known_numbers(arr: Sequence[int], n: int) -> Sequence[int]:
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(arr) < n - 1:
        raise ValueError(f"expected at least {n - 1} numbers, got {len(arr)}")
    return arr[: n - 1]


def missing_number_brute(arr: Sequence[int], n: int) -> int:
    """Return the first of 1..n absent from the first n-1 entries of arr, or -1."""
    known = _known_numbers(arr, n)
    return next((i for i in range(1, n + 1) if i not in known), -1)


def missing_number_sum(arr: Sequence[int], n: int) -> int:
    """Return the number of 1..n missing from arr, by the arithmetic-series sum."""
    known = _known_numbers(arr, n)
    return n * (n + 1) // 2 - sum(known)


def missing_number_xor(arr: Sequence[int], n: int) -> int:
    """Return the number of 1..n missing from arr, by XOR cancellation."""
    known = _known_numbers(arr, n)
    return reduce(xor, range(1, n + 1), 0) ^ reduce(xor, known, 0)


def single_number_brute(arr: Sequence[int]) -> int:
    """Return the first element occurring only once.

    Raises ValueError if every element occurs at least twice.
    """
    for value in arr:
        if arr.count(value) < 2:
            return value
    raise ValueError("no element occurs exactly once")


def single_number(arr: Sequence[int]) -> int:
    """Return the element left over when all others come in pairs, by XOR."""
    return reduce(xor, arr, 0)