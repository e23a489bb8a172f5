"""
Shortest path module
====================

Single-source shortest paths with Dijkstra's algorithm.

The frontier is a binary heap of ``(tentative distance, vertex)`` entries.
Improving a distance pushes a fresh entry instead of decreasing a key in
place; stale entries are skipped when popped. Once a vertex is popped with
its final distance it is settled and never relaxed again, which is only
correct when no edge weight is negative, so negative weights are rejected
before the search starts.
"""

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from pyskiena.Benchmark import BenchmarkCase
from pyskiena.Graph import Graph
from pyskiena.errors import NegativeWeight, check_vertex
from pyskiena.generators import grid_graph, random_graph


@dataclass(frozen=True, eq=False)
class ShortestPathResult:
    """Distances and shortest-path tree from a single source.

    Attributes
    ----------
    source : int
        The start vertex.
    distances : np.ndarray
        ``distances[v]`` is the minimum path weight from ``source`` to ``v``,
        or ``np.inf`` if ``v`` is unreachable.
    predecessors : Dict[int, int]
        For every reached vertex other than ``source``, the previous vertex on
        one of its shortest paths.

    """

    source: int
    distances: np.ndarray = field(repr=False)
    predecessors: Dict[int, int] = field(repr=False)

    def distance(self, v: int) -> float:
        return float(self.distances[check_vertex(v, len(self.distances))])

    def reachable(self, v: int) -> bool:
        return bool(np.isfinite(self.distance(v)))

    def path_to(self, v: int) -> List[int]:
        """Return a shortest path ``[source, ..., v]``, or ``[]`` if ``v`` is
        unreachable."""
        if not self.reachable(v):
            return []
        path = [v]
        while v != self.source:
            v = self.predecessors[v]
            path.append(v)
        path.reverse()
        return path

    def distance_map(self) -> Dict[int, float]:
        """Distances of the reached vertices, keyed by vertex."""
        reached = np.flatnonzero(np.isfinite(self.distances))
        return {int(v): float(self.distances[v]) for v in reached}


def shortest_paths(graph: Graph, source: int) -> ShortestPathResult:
    """Compute shortest paths from ``source`` to every vertex of ``graph``.

    Parameters
    ----------
    graph : Graph
        A graph whose edge weights are all non-negative.
    source : int
        Start vertex.

    Returns
    -------
    ShortestPathResult
        Final distances and predecessors.

    Raises
    ------
    VertexOutOfRange
        If ``source`` is not a vertex of ``graph``.
    NegativeWeight
        If any edge of ``graph`` has a negative weight.

    """
    n = graph.vertex_count()
    source = check_vertex(source, n)

    for edge in graph.edges():
        if edge[2] < 0:
            raise NegativeWeight(edge)

    distances = [math.inf] * n
    distances[source] = 0.0
    predecessors: Dict[int, int] = {}
    settled = [False] * n
    frontier = [(0.0, source)]

    while frontier:
        dist_u, u = heapq.heappop(frontier)
        if settled[u]:
            continue  # stale entry
        settled[u] = True

        for v, w in graph.neighbors(u):
            if settled[v]:
                continue
            candidate = dist_u + w
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(frontier, (candidate, v))

    logging.debug(
        "dijkstra from %d settled %d of %d vertices", source, sum(settled), n
    )
    return ShortestPathResult(source, np.asarray(distances, dtype=float), predecessors)


def _sparse_graph(size: int, rng: np.random.Generator):
    return random_graph(size, 4 * size, rng=rng), 0


def _grid(size: int, rng: np.random.Generator):
    side = max(1, int(np.sqrt(size)))
    return grid_graph(side, side), 0


BENCHMARKS = [
    BenchmarkCase("dijkstra random", _sparse_graph, shortest_paths, (1_000, 10_000)),
    BenchmarkCase("dijkstra grid", _grid, shortest_paths, (1_024, 10_000)),
]
