import math
from bisect import bisect_left, bisect_right

import pytest
from hypothesis import given, strategies as st

from dsakit.search import (
    ceil_value,
    find_peak_element,
    floor_value,
    kth_smallest,
    lower_bound,
    matrix_median,
    min_rotated,
    rotation_count,
    search_insert_position,
    search_matrix,
    search_rotated,
    search_sorted_matrix,
    single_element,
    single_element_linear,
    upper_bound,
)

sorted_lists = st.lists(st.integers(-30, 30), max_size=25).map(sorted)
distinct_sorted = st.lists(st.integers(-50, 50), unique=True, min_size=1, max_size=20).map(sorted)


@given(sorted_lists, st.integers(-35, 35))
def test_bounds_match_bisect(arr, target):
    assert lower_bound(arr, target) == bisect_left(arr, target)
    assert upper_bound(arr, target) == bisect_right(arr, target)
    assert search_insert_position(arr, target) == bisect_left(arr, target)


@given(sorted_lists, st.integers(-35, 35))
def test_insert_position_keeps_order(arr, target):
    position = search_insert_position(arr, target)
    updated = [*arr[:position], target, *arr[position:]]
    assert updated == sorted(updated)


@given(st.lists(st.integers(0, 50), max_size=20).map(sorted), st.integers(-5, 55))
def test_floor_value(arr, target):
    below = [x for x in arr if x <= target]
    result = floor_value(arr, target)
    if below:
        assert result == max(below)
    else:
        assert result == -1


@given(st.lists(st.integers(0, 50), max_size=20).map(sorted), st.integers(-5, 55))
def test_ceil_value(arr, target):
    above = [x for x in arr if x >= target]
    result = ceil_value(arr, target)
    if above:
        assert result == min(above)
    else:
        assert result == -1


@given(distinct_sorted, st.data())
def test_rotated_array_queries(values, data):
    shift = data.draw(st.integers(0, len(values) - 1))
    rotated = values[shift:] + values[:shift]
    for index, value in enumerate(rotated):
        assert search_rotated(rotated, value) == index
    assert search_rotated(rotated, 51) < 0
    assert min_rotated(rotated) == min(rotated)
    assert rotation_count(rotated) == rotated.index(min(rotated))


def test_rotation_count_worked_example():
    assert rotation_count([4, 5, 6, 0, 1, 2, 3]) == 3


def test_min_rotated_empty_raises():
    with pytest.raises(ValueError):
        min_rotated([])


@given(st.lists(st.integers(-100, 100), unique=True, min_size=1, max_size=30))
def test_peak_is_greater_than_neighbours(nums):
    index = find_peak_element(nums)
    padded = [-math.inf, *nums, -math.inf]
    assert padded[index] < padded[index + 1] > padded[index + 2]


def test_peak_empty_raises():
    with pytest.raises(ValueError):
        find_peak_element([])


@given(st.lists(st.integers(-30, 30), unique=True, min_size=1, max_size=12), st.data())
def test_single_element_variants(values, data):
    values = sorted(values)
    pick = data.draw(st.integers(0, len(values) - 1))
    single = values[pick]
    nums = sorted(values + [v for v in values if v != single])
    assert single_element(nums) == single
    assert single_element_linear(nums) == single


def test_single_element_empty_raises():
    with pytest.raises(ValueError):
        single_element([])


@given(st.integers(1, 5), st.integers(1, 5), st.data())
def test_search_matrix_membership(rows, cols, data):
    flat = sorted(
        data.draw(st.lists(st.integers(-100, 100), unique=True, min_size=rows * cols, max_size=rows * cols))
    )
    matrix = [flat[start:start + cols] for start in range(0, rows * cols, cols)]
    target = data.draw(st.integers(-101, 101))
    assert search_matrix(matrix, target) == (target in flat)
    assert all(search_matrix(matrix, value) for value in flat)


@given(
    st.lists(st.integers(-20, 20), min_size=1, max_size=5).map(sorted),
    st.lists(st.integers(-20, 20), min_size=1, max_size=5).map(sorted),
    st.integers(-45, 45),
)
def test_search_sorted_matrix_membership(row_base, col_base, target):
    matrix = [[r + c for c in col_base] for r in row_base]
    expected = any(target in row for row in matrix)
    assert search_sorted_matrix(matrix, target) == expected


def test_matrix_searches_on_empty_input():
    assert not search_matrix([], 1)
    assert not search_sorted_matrix([[]], 1)


@given(st.lists(st.integers(-30, 30), min_size=1, max_size=15).map(sorted), sorted_lists)
def test_kth_smallest_matches_merged_order(nums1, nums2):
    merged = sorted(nums1 + nums2)
    for k, expected in enumerate(merged, start=1):
        assert kth_smallest(nums1, nums2, k) == expected


@pytest.mark.parametrize("k", [0, 3])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([1], [2], k)


@given(st.integers(1, 5), st.integers(1, 5), st.data())
def test_matrix_median(rows, cols, data):
    matrix = [
        sorted(data.draw(st.lists(st.integers(-50, 50), min_size=cols, max_size=cols)))
        for _ in range(rows)
    ]
    flat = sorted(value for row in matrix for value in row)
    assert matrix_median(matrix) == flat[rows * cols // 2]


def test_matrix_median_empty_raises():
    with pytest.raises(ValueError):
        matrix_median([])