import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.answers import (
    aggressive_cows,
    allocate_pages,
    int_sqrt,
    min_days,
    min_days_linear,
    min_eating_speed,
    nth_root,
    nth_root_linear,
    ship_within_days,
    smallest_divisor,
    sqrt_linear,
)

positive_lists = st.lists(st.integers(min_value=1, max_value=100), min_size=1, max_size=8)


def test_aggressive_cows_example():
    poles = [1, 3, 4, 7, 10]
    assert aggressive_cows(poles, 4) == 3
    assert poles == [1, 3, 4, 7, 10]


@given(st.sets(st.integers(min_value=-200, max_value=200), min_size=2, max_size=10))
def test_aggressive_cows_every_pole_used_gives_min_gap(values):
    ordered = sorted(values)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    assert aggressive_cows(list(values), len(values)) == min(gaps)


@given(st.sets(st.integers(min_value=-200, max_value=200), min_size=2, max_size=10))
def test_aggressive_cows_two_cows_span_all(values):
    assert aggressive_cows(list(values), 2) == max(values) - min(values)


def test_aggressive_cows_too_many_cows():
    assert aggressive_cows([1, 2, 3], 4) == -1


def test_aggressive_cows_empty_raises():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)


def test_allocate_pages_more_students_than_books():
    assert allocate_pages([12, 34, 67, 90], 5) == -1


@given(positive_lists)
def test_allocate_pages_extremes(books):
    assert allocate_pages(books, 1) == sum(books)
    assert allocate_pages(books, len(books)) == max(books)


@given(positive_lists, st.integers(min_value=1, max_value=7))
def test_allocate_pages_monotone(books, students):
    if students + 1 <= len(books):
        assert allocate_pages(books, students + 1) <= allocate_pages(books, students)
    result = allocate_pages(books, students) if students <= len(books) else -1
    assert result == -1 or max(books) <= result <= sum(books)


def test_allocate_pages_empty_raises():
    with pytest.raises(ValueError):
        allocate_pages([], 0)


def test_min_eating_speed_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


@given(positive_lists, st.integers(min_value=0, max_value=20))
def test_min_eating_speed_is_slowest_feasible(piles, extra):
    h = len(piles) + extra
    speed = min_eating_speed(piles, h)

    def hours(s):
        return sum(math.ceil(p / s) for p in piles)

    assert hours(speed) <= h
    assert speed == 1 or hours(speed - 1) > h


@given(positive_lists)
def test_min_eating_speed_one_pile_per_hour(piles):
    assert min_eating_speed(piles, len(piles)) == max(piles)


@given(
    st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=10),
    st.integers(min_value=1, max_value=4),
    st.integers(min_value=1, max_value=4),
)
def test_min_days_linear_and_binary_agree(arr, m, k):
    assert min_days(arr, m, k) == min_days_linear(arr, m, k)


def test_min_days_impossible():
    arr = [1, 10, 3, 10, 2]
    assert min_days(arr, 3, 2) == -1
    assert min_days_linear(arr, 3, 2) == -1


@given(st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=10))
def test_min_days_all_flowers_needed(arr):
    assert min_days(arr, len(arr), 1) == max(arr)
    assert min_days(arr, 1, 1) == min(arr)


@given(st.integers(min_value=0, max_value=300), st.integers(min_value=1, max_value=5))
def test_nth_root_linear_and_binary_agree(num, n):
    assert nth_root(num, n) == nth_root_linear(num, n)


@given(st.integers(min_value=1, max_value=10**6), st.integers(min_value=1, max_value=6))
def test_nth_root_bounds(num, n):
    root = nth_root(num, n)
    assert root**n <= num < (root + 1) ** n


def test_nth_root_special_values():
    assert nth_root(0, 4) == 0
    assert nth_root(-5, 2) == -1
    assert nth_root_linear(-5, 2) == -1
    assert nth_root(81, 4) == nth_root_linear(81, 4)


def test_ship_within_days_example():
    assert ship_within_days([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 5) == 15


@given(positive_lists)
def test_ship_within_days_extremes(weights):
    assert ship_within_days(weights, 1) == sum(weights)
    assert ship_within_days(weights, len(weights)) == max(weights)


@given(positive_lists, st.integers(min_value=1, max_value=8))
def test_ship_within_days_monotone(weights, days):
    assert ship_within_days(weights, days + 1) <= ship_within_days(weights, days)


def test_ship_within_days_empty_raises():
    with pytest.raises(ValueError):
        ship_within_days([], 3)


@given(positive_lists)
def test_smallest_divisor_extremes(arr):
    assert smallest_divisor(arr, sum(arr)) == 1
    assert smallest_divisor(arr, len(arr)) == max(arr)


@given(positive_lists)
def test_smallest_divisor_impossible(arr):
    assert smallest_divisor(arr, len(arr) - 1) == -1


@given(st.integers(min_value=0, max_value=10**6))
def test_int_sqrt_matches_isqrt(num):
    assert int_sqrt(num) == math.isqrt(num)


def test_int_sqrt_source_input_and_negative():
    assert int_sqrt(66) == math.isqrt(66)
    assert int_sqrt(-4) == -1


@given(st.integers(min_value=1, max_value=5000))
def test_sqrt_linear_bounds(num):
    root = sqrt_linear(num)
    assert root * root < num <= (root + 1) * (root + 1)


def test_sqrt_linear_without_candidates():
    assert sqrt_linear(0) == -1
    assert sqrt_linear(-9) == -1