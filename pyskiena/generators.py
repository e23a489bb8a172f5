import itertools
from typing import Optional

import numpy as np

from pyskiena.Graph import Graph


def random_graph(
    n: int,
    m: int,
    directed: bool = True,
    max_weight: float = 10.0,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """Graph with ``n`` vertices and ``m`` uniformly drawn edges, weights in
    ``[0, max_weight)``. Self-loops and parallel edges may occur."""
    if rng is None:
        rng = np.random.default_rng(seed)
    if n == 0:
        return Graph(0, directed=directed)
    src = rng.integers(0, n, m).tolist()
    dst = rng.integers(0, n, m).tolist()
    weights = rng.uniform(0.0, max_weight, m).tolist()
    return Graph(n, zip(src, dst, weights), directed=directed)


def chain_graph(n: int, directed: bool = True) -> Graph:
    """Path ``0 -> 1 -> ... -> n-1``, the worst case for recursive DFS."""
    return Graph(n, ((i, i + 1) for i in range(n - 1)), directed=directed)


def grid_graph(rows: int, cols: int) -> Graph:
    """Undirected 4-neighbour grid; vertex ``r * cols + c`` sits at ``(r, c)``."""
    edges = []
    for r in range(rows):
        for c in range(cols):
            v = r * cols + c
            if c + 1 < cols:
                edges.append((v, v + 1))
            if r + 1 < rows:
                edges.append((v, v + cols))
    return Graph(rows * cols, edges, directed=False)


def complete_graph(n: int, directed: bool = False) -> Graph:
    pairs = itertools.permutations(range(n), 2) if directed else itertools.combinations(range(n), 2)
    return Graph(n, pairs, directed=directed)
