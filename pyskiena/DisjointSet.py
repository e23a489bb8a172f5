from typing import Dict, FrozenSet, Iterable, Iterator, List, Set

import numpy as np

from pyskiena.Benchmark import BenchmarkCase
from pyskiena.errors import check_vertex, is_index


class DisjointSet:
    """
    Union-Find (Disjoint Set) structure over the elements ``0 .. n-1`` with
    explicit tracking of the members of each set.

    ``find`` compresses paths and ``union`` merges by rank, which together
    keep both operations amortized near-constant time.
    """

    def __init__(self, n: int):
        """
        Create ``n`` singleton sets.

        Parameters
        ----------
        n : int
            Number of elements.
        """

        if not is_index(n) or n < 0:
            raise ValueError("n must be a non-negative integer")
        n = int(n)
        self.parent = list(range(n))
        self.rank = [0] * n  # upper bound on tree height, only meaningful at roots
        self.size = n
        self.components: Dict[int, Set[int]] = {i: {i} for i in range(n)}

    def find(self, x: int) -> int:
        """
        Find the representative of the set containing ``x``.

        Every element visited on the way up is re-pointed directly at the
        root.

        Parameters
        ----------
        x : int
            The element whose representative is wanted.

        Returns
        -------
        int
            The root of ``x``'s tree.

        Raises
        ------
        VertexOutOfRange
            If ``x`` is not in ``[0, n)``.
        """

        x = check_vertex(x, self.size)
        parent = self.parent

        root = x
        while parent[root] != root:
            root = parent[root]

        while parent[x] != root:
            parent[x], x = root, parent[x]

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        The root of lower rank is attached under the root of higher rank. On
        equal rank ``y``'s root goes under ``x``'s root, whose rank grows by
        one.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.

        Returns
        -------
        bool
            True if two distinct sets were merged, False if ``x`` and ``y``
            were already in the same set.
        """

        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1

        self.parent[root_y] = root_x
        self.components[root_x].update(self.components.pop(root_y))
        return True

    def union_all(self, items: Iterable[int]) -> int:
        """
        Merge every element of ``items`` into a single set.

        Parameters
        ----------
        items : Iterable[int]
            Elements to join.

        Returns
        -------
        int
            How many merges actually happened.
        """

        items = list(items)
        if not items:
            return 0
        return sum(self.union(items[0], other) for other in items[1:])

    def same_set(self, items: Iterable[int]) -> bool:
        """
        Check whether all elements of ``items`` share one set.

        An empty group is trivially in one set.
        """

        roots = {self.find(x) for x in items}
        return len(roots) <= 1

    def is_connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def component(self, x: int) -> FrozenSet[int]:
        """Members of the set containing ``x``."""
        return frozenset(self.components[self.find(x)])

    def __iter__(self) -> Iterator[Set[int]]:
        """
        Iterate over the current sets.

        Returns
        -------
        Iterator[Set[int]]
            An iterator over sets of elements.
        """

        return iter(self.components.values())

    def __getitem__(self, index: int) -> Set[int]:
        return list(self.components.values())[index]

    def __len__(self) -> int:
        """
        Return the number of disjoint sets.
        """

        return len(self.components)

    def __repr__(self) -> str:
        return f"<DisjointSet(size={self.size}, sets={len(self.components)})>"


def _random_unions(size: int, rng: np.random.Generator):
    pairs = rng.integers(0, size, (2 * size, 2)).tolist()
    return DisjointSet(size), pairs


def _chain_unions(size: int, rng: np.random.Generator):
    # naive linking turns these into a single chain of length n
    pairs = [(i + 1, i) for i in range(size - 1)]
    return DisjointSet(size), pairs


def _apply_unions(ds: DisjointSet, pairs: List[List[int]]) -> DisjointSet:
    for x, y in pairs:
        ds.union(x, y)
    for x in range(ds.size):
        ds.find(x)
    return ds


BENCHMARKS = [
    BenchmarkCase("disjoint set random unions", _random_unions, _apply_unions, (1_000, 10_000)),
    BenchmarkCase("disjoint set chain unions", _chain_unions, _apply_unions, (1_000, 10_000)),
]
