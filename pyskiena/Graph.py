"""
Graph module
============

An immutable graph over dense integer vertices ``0 .. N-1``, stored as
adjacency lists. Edges are given once, at construction, either as
``(u, v)`` pairs (weight 1) or as ``(u, v, w)`` triples. Directedness is a
construction-time property.

The adjacency lists preserve edge insertion order, which is what makes the
traversals built on top of this container deterministic.
"""

import logging
import math
import numbers
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np
from scipy.sparse import csr_matrix

from pyskiena.Benchmark import BenchmarkCase
from pyskiena.errors import InvalidEdge, check_vertex, is_index

Edge = Tuple[int, int, float]


class Graph:
    """Directed or undirected, optionally weighted graph on vertices ``0 .. N-1``."""

    def __init__(
        self,
        vertex_count: int,
        edges: Iterable[Sequence] = (),
        directed: bool = True,
    ):
        """Build a graph from a vertex count and an edge list.

        Parameters
        ----------
        vertex_count : int
            Number of vertices; vertices are the integers ``0 .. vertex_count-1``.
        edges : Iterable[Sequence]
            Edges as ``(u, v)`` or ``(u, v, weight)``. A missing weight is 1.
            Self-loops and parallel edges are allowed.
        directed : bool, optional
            If False every edge is traversable in both directions. Default True.

        Raises
        ------
        ValueError
            If ``vertex_count`` is negative.
        InvalidEdge
            If an edge is malformed, references a vertex outside the graph, or
            has a NaN weight.

        """
        if not is_index(vertex_count) or vertex_count < 0:
            raise ValueError("vertex_count must be a non-negative integer")

        self._n = int(vertex_count)
        self._directed = bool(directed)
        self._edges: List[Edge] = []
        self._adj: List[List[Tuple[int, float]]] = [[] for _ in range(self._n)]

        for edge in edges:
            u, v, w = self._normalize_edge(edge)
            self._edges.append((u, v, w))
            self._adj[u].append((v, w))
            if not self._directed and u != v:
                self._adj[v].append((u, w))

        logging.debug(
            "built %s graph with %d vertices and %d edges",
            "directed" if self._directed else "undirected",
            self._n,
            len(self._edges),
        )

    def _normalize_edge(self, edge: Sequence) -> Edge:
        try:
            size = len(edge)
        except TypeError:
            raise InvalidEdge(
                edge, "expected a (u, v) or (u, v, weight) sequence"
            ) from None
        if size == 2:
            u, v = edge
            w = 1.0
        elif size == 3:
            u, v, w = edge
        else:
            raise InvalidEdge(edge, "expected a (u, v) or (u, v, weight) sequence")

        for end in (u, v):
            if not is_index(end) or not 0 <= end < self._n:
                raise InvalidEdge(
                    edge, f"endpoint {end!r} not in [0, {self._n})"
                )
        if not isinstance(w, numbers.Real) or isinstance(w, bool) or math.isnan(w):
            raise InvalidEdge(edge, f"weight {w!r} is not a number")

        return int(u), int(v), float(w)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        """True if any edge carries a weight other than 1."""
        return any(w != 1.0 for _, _, w in self._edges)

    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        """Number of edges as given at construction (an undirected edge counts once)."""
        return len(self._edges)

    def vertices(self) -> range:
        return range(self._n)

    def edges(self) -> Iterator[Edge]:
        """Iterate over the edges as normalized ``(u, v, weight)`` triples."""
        return iter(self._edges)

    def neighbors(self, v: int) -> Iterator[Tuple[int, float]]:
        """Iterate over ``(destination, weight)`` pairs for edges leaving ``v``.

        Pairs come out in edge insertion order. For an undirected graph each
        edge is listed from both of its endpoints.

        Parameters
        ----------
        v : int
            The source vertex.

        Raises
        ------
        VertexOutOfRange
            If ``v`` is not a vertex of this graph.

        """
        return iter(self._adj[check_vertex(v, self._n)])

    def out_degree(self, v: int) -> int:
        return len(self._adj[check_vertex(v, self._n)])

    def has_negative_weight(self) -> bool:
        return any(w < 0 for _, _, w in self._edges)

    def to_sparse(self) -> csr_matrix:
        """Return the weighted adjacency matrix as a ``scipy.sparse.csr_matrix``.

        Parallel edges collapse to their minimum weight; undirected graphs give
        a symmetric matrix.

        Returns
        -------
        csr_matrix
            An ``(N, N)`` matrix with ``M[u, v]`` the weight of edge ``u -> v``.

        """
        best = {}
        for u, v, w in self._edges:
            pairs = [(u, v)] if self._directed else [(u, v), (v, u)]
            for key in pairs:
                if key not in best or w < best[key]:
                    best[key] = w

        if not best:
            return csr_matrix((self._n, self._n), dtype=float)

        rows, cols = zip(*best.keys())
        data = np.fromiter(best.values(), dtype=float, count=len(best))
        return csr_matrix((data, (rows, cols)), shape=(self._n, self._n))

    def __repr__(self) -> str:
        return (
            f"<Graph(vertices={self._n}, edges={len(self._edges)}, "
            f"directed={self._directed})>"
        )


def _random_edge_list(size: int, rng: np.random.Generator) -> Tuple[int, list]:
    m = 4 * size
    src = rng.integers(0, size, m)
    dst = rng.integers(0, size, m)
    weights = rng.uniform(0.0, 10.0, m)
    return size, list(zip(src.tolist(), dst.tolist(), weights.tolist()))


def _build(vertex_count: int, edges: list) -> Graph:
    return Graph(vertex_count, edges, directed=True)


BENCHMARKS = [
    BenchmarkCase("graph construction", _random_edge_list, _build, (1_000, 10_000)),
]
