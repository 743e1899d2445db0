import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SAMPLE = [4, 2, 6, 2, 5, 1, 56, 23, -89, 0]


def test_sample_array():
    expected = sorted(SAMPLE)
    assert selection_sort(SAMPLE) == expected
    assert insertion_sort(SAMPLE) == expected
    assert bubble_sort(SAMPLE) == expected
    assert heap_sort(SAMPLE) == expected
    assert merge_sort(SAMPLE) == expected
    assert quick_sort(SAMPLE) == expected


def test_heap_sample():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_input_left_unchanged():
    data = list(SAMPLE)
    selection_sort(data)
    insertion_sort(data)
    bubble_sort(data)
    heap_sort(data)
    merge_sort(data)
    quick_sort(data)
    assert data == SAMPLE


@pytest.mark.parametrize("data", [[], [7]])
def test_empty_and_single(data):
    assert selection_sort(data) == data
    assert insertion_sort(data) == data
    assert bubble_sort(data) == data
    assert heap_sort(data) == data
    assert merge_sort(data) == data
    assert quick_sort(data) == data


def test_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_accepts_iterables():
    assert selection_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert bubble_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert heap_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]


def test_quick_sort_handles_long_sorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data
    assert quick_sort(reversed(data)) == data


@given(st.lists(st.integers(-1000, 1000), max_size=60))
def test_matches_builtin_sort(data):
    expected = sorted(data)
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


@given(st.lists(st.integers(-5, 5), max_size=40))
def test_is_idempotent(data):
    once = selection_sort(data)
    assert selection_sort(once) == once
    once = insertion_sort(data)
    assert insertion_sort(once) == once
    once = bubble_sort(data)
    assert bubble_sort(once) == once
    once = heap_sort(data)
    assert heap_sort(once) == once
    once = merge_sort(data)
    assert merge_sort(once) == once
    once = quick_sort(data)
    assert quick_sort(once) == once