"""Binary-search problems on sorted, rotated and two-dimensional data."""

from collections.abc import Callable, Sequence
from heapq import merge
from itertools import islice


def _first_true(n: int, predicate: Callable[[int], bool]) -> int:
    """Return the first index in range(n) where a monotone predicate holds, else n."""
    low, high, answer = 0, n - 1, n
    while low <= high:
        mid = (low + high) // 2
        if predicate(mid):
            answer, high = mid, mid - 1
        else:
            low = mid + 1
    return answer


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose value is >= target, or len(arr)."""
    return _first_true(len(arr), lambda i: arr[i] >= target)


def upper_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose value is > target, or len(arr)."""
    return _first_true(len(arr), lambda i: arr[i] > target)


def floor_value(arr: Sequence[int], target: int) -> int:
    """Return the largest value <= target in sorted arr, or -1."""
    index = upper_bound(arr, target)
    return arr[index - 1] if index > 0 else -1


def ceil_value(arr: Sequence[int], target: int) -> int:
    """Return the smallest value >= target in sorted arr, or -1."""
    index = lower_bound(arr, target)
    return arr[index] if index < len(arr) else -1


def search_insert_position(arr: Sequence[int], target: int) -> int:
    """Return the index at which target is found or would be inserted."""
    return lower_bound(arr, target)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of target in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def min_rotated(arr: Sequence[int]) -> int:
    """Return the minimum of a rotated sorted array."""
    if not arr:
        raise ValueError("array is empty")
    low, high = 0, len(arr) - 1
    smallest = arr[0]
    while low <= high:
        mid = (low + high) // 2
        smallest = min(smallest, arr[mid])
        if arr[low] <= arr[mid]:
            smallest = min(smallest, arr[low])
            low = mid + 1
        else:
            high = mid - 1
    return smallest


def rotation_count(arr: Sequence[int]) -> int:
    """Return how many times a sorted array was rotated: the index of its minimum, or -1 if empty."""
    low, high = 0, len(arr) - 1
    smallest: int | None = None
    index = -1

    def take(i: int) -> None:
        nonlocal smallest, index
        if smallest is None or smallest >= arr[i]:
            smallest, index = arr[i], i

    while low <= high:
        mid = (low + high) // 2
        if arr[low] <= arr[high]:
            take(low)
            break
        if arr[low] <= arr[mid]:
            take(low)
            low = mid + 1
        else:
            take(mid)
            high = mid - 1
    return index


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours, or -1 if none is found."""
    n = len(nums)
    if n == 0:
        raise ValueError("array is empty")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def single_element_linear(nums: Sequence[int]) -> int:
    """Return the element differing from both neighbours by a linear scan, or -1."""
    values = list(nums)
    previous = [None, *values[:-1]]
    following = [*values[1:], None]
    for before, value, after in zip(previous, values, following):
        if value != before and value != after:
            return value
    return -1


def single_element(nums: Sequence[int]) -> int:
    """Return the one unpaired element of a sorted array of pairs, by binary search, or -1."""
    n = len(nums)
    if n == 0:
        raise ValueError("array is empty")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        pair_starts_here = mid % 2 == 0 and nums[mid] == nums[mid + 1]
        pair_ends_here = mid % 2 == 1 and nums[mid] == nums[mid - 1]
        if pair_starts_here or pair_ends_here:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether target is in a matrix whose rows, read in order, form one sorted list."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    left, right = 0, len(matrix) * cols - 1
    while left <= right:
        mid = (left + right) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether target is in a matrix sorted along both rows and columns."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def kth_smallest(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Return the k-th smallest (1-based) value of two sorted sequences."""
    if not 1 <= k <= len(nums1) + len(nums2):
        raise ValueError(f"k must lie between 1 and {len(nums1) + len(nums2)}")
    return next(islice(merge(nums1, nums2), k - 1, None))


def matrix_median(matrix: Sequence[Sequence[int]]) -> int:
    """Return the median of a matrix whose rows are each sorted."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    required = len(matrix) * len(matrix[0]) // 2
    while low <= high:
        mid = (low + high) // 2
        if sum(upper_bound(row, mid) for row in matrix) <= required:
            low = mid + 1
        else:
            high = mid - 1
    return low