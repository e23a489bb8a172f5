from dataclasses import replace

import numpy as np
import pytest
from pyskiena.Benchmark import (
    BenchmarkCase,
    BenchmarkResult,
    format_report,
    run_benchmarks,
    run_case,
)
from pyskiena.BinaryTree import BENCHMARKS as BINARY_TREE_BENCHMARKS
from pyskiena.DisjointSet import BENCHMARKS as DISJOINT_SET_BENCHMARKS
from pyskiena.Graph import BENCHMARKS as GRAPH_BENCHMARKS
from pyskiena.ShortestPath import BENCHMARKS as SHORTEST_PATH_BENCHMARKS
from pyskiena.Sorts import BENCHMARKS as SORT_BENCHMARKS
from pyskiena.SpanningTree import BENCHMARKS as SPANNING_TREE_BENCHMARKS
from pyskiena.Substring import BENCHMARKS as SUBSTRING_BENCHMARKS
from pyskiena.Traversal import BENCHMARKS as TRAVERSAL_BENCHMARKS
from pyskiena.__main__ import ALL_BENCHMARKS

MODULE_BENCHMARKS = [
    GRAPH_BENCHMARKS,
    DISJOINT_SET_BENCHMARKS,
    TRAVERSAL_BENCHMARKS,
    SHORTEST_PATH_BENCHMARKS,
    SPANNING_TREE_BENCHMARKS,
    SORT_BENCHMARKS,
    BINARY_TREE_BENCHMARKS,
    SUBSTRING_BENCHMARKS,
]


def _make_list(size, rng):
    return (rng.integers(0, 100, size).tolist(),)


def _sort_in_place(items):
    items.sort()


CASE = BenchmarkCase("list sort", _make_list, _sort_in_place, (10, 20))


def test_run_case_collects_repeats():
    result = run_case(CASE, 50, repeats=4, seed=1)
    assert result.name == "list sort"
    assert result.size == 50
    assert result.timings.shape == (4,)
    assert np.all(result.timings >= 0)
    assert result.best <= result.median <= max(result.timings)
    assert result.std >= 0


def test_run_case_rejects_non_positive_repeats():
    with pytest.raises(ValueError):
        run_case(CASE, 10, repeats=0)


def test_each_trial_gets_fresh_input():
    seen = []

    def setup(size, rng):
        items = rng.integers(0, 100, size).tolist()
        seen.append(list(items))
        return (items,)

    run_case(BenchmarkCase("fresh", setup, _sort_in_place), 8, repeats=3, seed=5)
    # warm-up plus three trials, every one starting from the same unsorted input
    assert len(seen) == 4
    assert all(items == seen[0] for items in seen)


def test_run_benchmarks_order():
    other = BenchmarkCase("other", _make_list, sorted, (5,))
    results = run_benchmarks([CASE, other], repeats=2)
    assert [(r.name, r.size) for r in results] == [
        ("list sort", 10),
        ("list sort", 20),
        ("other", 5),
    ]


def test_run_benchmarks_in_worker_processes():
    # cases travel to the workers by reference, so use ones defined in the package
    cases = [replace(case, sizes=(10, 20)) for case in SORT_BENCHMARKS[1:3]]
    results = run_benchmarks(cases, repeats=2, workers=2)
    assert [(r.name, r.size) for r in results] == [
        (cases[0].name, 10),
        (cases[0].name, 20),
        (cases[1].name, 10),
        (cases[1].name, 20),
    ]


def test_format_report():
    results = [
        BenchmarkResult("a", 10, np.array([0.001, 0.003])),
        BenchmarkResult("longer name", 1000, np.array([0.002])),
    ]
    lines = format_report(results).splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("benchmark")
    assert "2.000" in lines[2]  # mean of 1 ms and 3 ms
    assert lines[3].startswith("longer name")
    assert len({len(line) for line in lines}) == 1


def test_all_benchmarks_composed_from_modules():
    assert list(ALL_BENCHMARKS) == [case for cases in MODULE_BENCHMARKS for case in cases]
    names = [case.name for case in ALL_BENCHMARKS]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("case", ALL_BENCHMARKS, ids=lambda case: case.name)
def test_registered_cases_run_at_small_size(case):
    result = run_case(case, 64, repeats=1)
    assert result.size == 64


@pytest.mark.parametrize("sort", ["builtin", "selection", "insertion", "merge", "quick"])
def test_sorts_timed_on_every_input_order(sort):
    names = {case.name for case in SORT_BENCHMARKS}
    for order in ("random", "sorted", "reversed"):
        assert f"{sort} sort {order}" in names


def test_sort_case_inputs_have_their_order():
    cases = {case.name: case for case in SORT_BENCHMARKS}
    rng = np.random.default_rng(0)
    (ascending,) = cases["insertion sort sorted"].setup(32, rng)
    (descending,) = cases["insertion sort reversed"].setup(32, rng)
    assert ascending == sorted(ascending)
    assert descending == sorted(descending, reverse=True)
    assert len(ascending) == len(descending) == 32


def test_run_case_repeats_message_is_ascii():
    with pytest.raises(ValueError, match="repeats must be >= 1"):
        run_case(CASE, 10, repeats=0)
