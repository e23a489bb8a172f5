import itertools
import time

import numpy as np
import pytest
from pyskiena.DisjointSet import DisjointSet
from pyskiena.errors import VertexOutOfRange


def test_initial_sets():
    ds = DisjointSet(5)
    assert len(ds) == 5
    for i in range(5):
        assert ds.find(i) == i
        assert ds.is_connected(i, i)


def test_union_merges_sets():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.is_connected(0, 1)
    assert len(ds) == 3
    assert ds.component(0) == frozenset({0, 1})


def test_union_of_joined_elements_reports_no_merge():
    ds = DisjointSet(4)
    ds.union(0, 1)
    ds.union(1, 2)
    before = [ds.find(i) for i in range(4)]
    assert ds.union(2, 0) is False
    assert ds.union(1, 1) is False
    assert [ds.find(i) for i in range(4)] == before
    assert len(ds) == 2


def test_scenario_five_elements():
    ds = DisjointSet(5)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 2)
    assert ds.find(0) == ds.find(3)
    assert ds.find(4) != ds.find(0)


def test_equal_rank_attaches_second_root_under_first():
    ds = DisjointSet(2)
    ds.union(0, 1)
    assert ds.find(1) == 0
    assert ds.rank[0] == 1


def test_lower_rank_goes_under_higher_rank():
    ds = DisjointSet(3)
    ds.union(1, 2)  # root 1, rank 1
    ds.union(0, 1)  # root 0 has rank 0, so it goes under 1
    assert ds.find(0) == 1
    assert ds.rank[1] == 1


def test_find_compresses_path():
    ds = DisjointSet(4)
    # build the chain 3 -> 2 -> 1 -> 0 by hand
    ds.parent = [0, 0, 1, 2]
    assert ds.find(3) == 0
    assert ds.parent == [0, 0, 0, 0]


def test_unions_are_monotone():
    rng = np.random.default_rng(7)
    ds = DisjointSet(30)
    joined = []
    for a, b in rng.integers(0, 30, (60, 2)).tolist():
        ds.union(a, b)
        joined.append((a, b))
        for x, y in joined:
            assert ds.find(x) == ds.find(y)


def test_matches_brute_force_partition():
    rng = np.random.default_rng(3)
    ds = DisjointSet(12)
    groups = [{i} for i in range(12)]
    for a, b in rng.integers(0, 12, (10, 2)).tolist():
        ga = next(g for g in groups if a in g)
        gb = next(g for g in groups if b in g)
        merged = ds.union(a, b)
        assert merged == (ga is not gb)
        if ga is not gb:
            ga |= gb
            groups.remove(gb)
    assert sorted(map(sorted, ds)) == sorted(map(sorted, groups))
    for x, y in itertools.combinations(range(12), 2):
        same = any(x in g and y in g for g in groups)
        assert ds.is_connected(x, y) == same


def test_union_all_and_same_set():
    ds = DisjointSet(6)
    assert ds.union_all([1, 2, 3]) == 2
    assert ds.same_set([1, 2, 3])
    assert not ds.same_set([0, 1])
    assert ds.same_set([])
    assert ds.union_all([]) == 0
    assert ds.union_all([3, 1]) == 0
    assert len(ds) == 4


def test_iteration_and_indexing():
    ds = DisjointSet(4)
    ds.union(0, 1)
    ds.union(2, 3)
    comps = list(ds)
    assert isinstance(comps[0], set)
    assert sorted(len(comp) for comp in comps) == [2, 2]
    assert ds[0] | ds[1] == {0, 1, 2, 3}


@pytest.mark.parametrize("bad", [5, -1, 2.0])
def test_out_of_range(bad):
    ds = DisjointSet(5)
    with pytest.raises(VertexOutOfRange):
        ds.find(bad)
    with pytest.raises(VertexOutOfRange):
        ds.union(0, bad)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-2)


def test_empty():
    ds = DisjointSet(0)
    assert len(ds) == 0
    assert ds.same_set([])


def test_long_chain_stays_fast():
    n = 200_000
    ds = DisjointSet(n)
    start = time.perf_counter()
    for i in range(n - 1):
        ds.union(i + 1, i)
    for i in range(n):
        ds.find(i)
    elapsed = time.perf_counter() - start
    assert len(ds) == 1
    assert max(ds.rank) <= 18  # log2(n)
    assert elapsed < 5.0


@pytest.mark.parametrize("n", [2.5, "3", None, True])
def test_non_integer_size_rejected(n):
    with pytest.raises(ValueError):
        DisjointSet(n)


def test_numpy_integer_size_accepted():
    ds = DisjointSet(np.int64(3))
    assert ds.size == 3
    assert len(ds) == 3
