from importlib import import_module
from random import Random

import pytest

from partition_sort.sorting_algorithms.impl.partition import partition
from partition_sort.sorting_algorithms.impl.partition_median import partition_median
from partition_sort.sorting_algorithms.impl.quick_sort import quick_sort
from partition_sort.sorting_algorithms.impl.quick_sort_median import quick_sort_median
from partition_sort.sorting_algorithms.impl.quick_sort_tail_call import quick_sort_tail_call

quick_sorts = pytest.mark.parametrize("func", [quick_sort, quick_sort_median, quick_sort_tail_call])


def sort_whole(func, arr: list) -> list:
    func(arr, 0, len(arr) - 1)
    return arr


@quick_sorts
def test_demo_input(func):
    assert sort_whole(func, [2, 4, 1, 0, 3, 5]) == [0, 1, 2, 3, 4, 5]


@quick_sorts
def test_reversed_input(func):
    assert sort_whole(func, [5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5]


@quick_sorts
def test_returns_none(func):
    assert func([3, 1, 2], 0, 2) is None


@quick_sorts
def test_sorted_input_unchanged(func):
    arr = list(range(50))
    assert sort_whole(func, arr) == list(range(50))


@quick_sorts
def test_empty_and_single_ranges_are_no_ops(func):
    assert sort_whole(func, []) == []
    assert sort_whole(func, [7]) == [7]
    arr = [3, 1, 2]
    func(arr, 1, 1)
    assert arr == [3, 1, 2]
    func(arr, 2, 1)
    assert arr == [3, 1, 2]


@quick_sorts
def test_random_inputs(func):
    r = Random(0)
    for n in range(30):
        arr = [r.randint(-10, 10) for _ in range(n)]
        assert sort_whole(func, list(arr)) == sorted(arr)


@quick_sorts
def test_subrange_only(func):
    arr = [9, 8, 7, 6, 5, 4, 3]
    func(arr, 2, 5)
    assert arr == [9, 8, 4, 5, 6, 7, 3]


@quick_sorts
def test_other_comparables(func):
    arr = ["pear", "apple", "fig", "banana"]
    assert sort_whole(func, arr) == ["apple", "banana", "fig", "pear"]


def test_tail_call_recurses_on_shorter_side(monkeypatch):
    tail_call = import_module("partition_sort.sorting_algorithms.impl.quick_sort_tail_call")
    events = []

    def recording_partition(arr, left, right):
        events.append(("partition", left, right))
        return partition(arr, left, right)

    def recording_quick_sort(arr, left, right):
        events.append(("quick_sort", left, right))
        quick_sort(arr, left, right)

    monkeypatch.setattr(tail_call, "partition", recording_partition)
    monkeypatch.setattr(tail_call, "quick_sort", recording_quick_sort)

    r = Random(1)
    shuffled = list(range(40))
    r.shuffle(shuffled)
    for arr in (list(range(40)), list(range(40, 0, -1)), shuffled, [1] * 10):
        events.clear()
        tail_call.quick_sort_tail_call(arr, 0, len(arr) - 1)
        assert arr == sorted(arr)
        for prev, cur in zip(events, events[1:]):
            if cur[0] == "quick_sort":
                assert prev[0] == "partition"
                _, left, right = prev
                assert cur[2] - cur[1] + 1 <= (right - left) // 2


def test_median_pivot_is_used_at_every_level(monkeypatch):
    median = import_module("partition_sort.sorting_algorithms.impl.quick_sort_median")
    ranges = []

    def recording_partition_median(arr, left, right):
        ranges.append((left, right))
        return partition_median(arr, left, right)

    monkeypatch.setattr(median, "partition_median", recording_partition_median)
    arr = [7, 3, 0, 6, 1, 5, 2, 4]
    median.quick_sort_median(arr, 0, len(arr) - 1)
    assert arr == list(range(8))
    assert ranges[0] == (0, 7)
    assert len(ranges) > 1
    assert all(left < right for left, right in ranges)


def test_median_pivot_balances_sorted_input():
    # on sorted input the middle element is picked, so every split is even
    depth = 0

    def tracking(arr, left, right, level=1):
        nonlocal depth
        if left >= right:
            return
        depth = max(depth, level)
        p = partition_median(arr, left, right)
        tracking(arr, left, p - 1, level + 1)
        tracking(arr, p + 1, right, level + 1)

    arr = list(range(127))
    tracking(arr, 0, len(arr) - 1)
    assert arr == list(range(127))
    assert depth <= 7
