"""
Sorting module
==============

The classic comparison sorts. Every function sorts a mutable sequence in
place, ascending, and returns ``None`` like ``list.sort``.
"""

from typing import Any, List, MutableSequence

import numpy as np

from pyskiena.Benchmark import BenchmarkCase


def selection_sort(items: MutableSequence[Any]) -> None:
    # everything left of `start` is sorted and no larger than anything right of it
    for start in range(len(items)):
        smallest = start
        for i in range(start + 1, len(items)):
            if items[i] < items[smallest]:
                smallest = i
        items[start], items[smallest] = items[smallest], items[start]


def insertion_sort(items: MutableSequence[Any]) -> None:
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


def merge_sort(items: MutableSequence[Any]) -> None:
    """Top-down merge sort sharing one scratch buffer across all merges.

    Stable: equal items keep their relative order.
    """
    scratch: List[Any] = []

    def sort_range(lo: int, hi: int) -> None:
        if hi - lo <= 1:
            return
        mid = (lo + hi) // 2
        sort_range(lo, mid)
        sort_range(mid, hi)

        scratch.clear()
        i, j = lo, mid
        while i < mid and j < hi:
            # <= keeps the left element first on ties
            if items[i] <= items[j]:
                scratch.append(items[i])
                i += 1
            else:
                scratch.append(items[j])
                j += 1
        scratch.extend(items[i:mid])
        scratch.extend(items[j:hi])
        items[lo:hi] = scratch

    sort_range(0, len(items))


def _partition(items: MutableSequence[Any], lo: int, hi: int) -> int:
    # Lomuto partition on items[lo:hi] with the last element as pivot
    pivot = hi - 1
    first_high = lo
    for i in range(lo, pivot):
        if items[i] < items[pivot]:
            items[i], items[first_high] = items[first_high], items[i]
            first_high += 1
    items[pivot], items[first_high] = items[first_high], items[pivot]
    return first_high


def quick_sort(items: MutableSequence[Any]) -> None:
    """Quicksort with an explicit stack of pending ``(lo, hi)`` ranges.

    Already-sorted input degrades to quadratic time with a last-element
    pivot, but never to quadratic stack depth.
    """
    pending = [(0, len(items))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        p = _partition(items, lo, hi)
        pending.append((lo, p))
        pending.append((p + 1, hi))


def _random_list(size: int, rng: np.random.Generator):
    return (rng.integers(0, size, size).tolist(),)


def _sorted_list(size: int, rng: np.random.Generator):
    return (list(range(size)),)


def _reversed_list(size: int, rng: np.random.Generator):
    return (list(range(size, 0, -1)),)


BENCHMARKS = [
    BenchmarkCase("builtin sort random", _random_list, list.sort, (1_000,)),
    BenchmarkCase("selection sort random", _random_list, selection_sort, (1_000,)),
    BenchmarkCase("insertion sort random", _random_list, insertion_sort, (1_000,)),
    BenchmarkCase("merge sort random", _random_list, merge_sort, (1_000, 10_000)),
    BenchmarkCase("quick sort random", _random_list, quick_sort, (1_000, 10_000)),
    BenchmarkCase("builtin sort sorted", _sorted_list, list.sort, (1_000,)),
    BenchmarkCase("selection sort sorted", _sorted_list, selection_sort, (1_000,)),
    BenchmarkCase("insertion sort sorted", _sorted_list, insertion_sort, (1_000,)),
    BenchmarkCase("merge sort sorted", _sorted_list, merge_sort, (1_000, 10_000)),
    # last-element pivot is quadratic on ordered input
    BenchmarkCase("quick sort sorted", _sorted_list, quick_sort, (100,)),
    BenchmarkCase("builtin sort reversed", _reversed_list, list.sort, (1_000,)),
    BenchmarkCase("selection sort reversed", _reversed_list, selection_sort, (1_000,)),
    BenchmarkCase("insertion sort reversed", _reversed_list, insertion_sort, (1_000,)),
    BenchmarkCase("merge sort reversed", _reversed_list, merge_sort, (1_000, 10_000)),
    BenchmarkCase("quick sort reversed", _reversed_list, quick_sort, (100,)),
]
