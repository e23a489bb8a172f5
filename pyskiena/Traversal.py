"""
Traversal module
================

Breadth-first and depth-first search over a :class:`~pyskiena.Graph.Graph`,
plus cycle detection.

Both searches visit each reachable vertex exactly once and record the edge
they arrived by, so any visited vertex's path back to the source can be
rebuilt. Neighbours are explored in the order ``Graph.neighbors`` yields
them, which makes the visitation order reproducible.

Depth-first search keeps its own stack of ``(vertex, neighbour iterator)``
frames rather than recursing, so a long chain of vertices cannot exhaust the
interpreter's call stack.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import numpy as np

from pyskiena.Benchmark import BenchmarkCase
from pyskiena.DisjointSet import DisjointSet
from pyskiena.Graph import Graph
from pyskiena.errors import check_vertex
from pyskiena.generators import chain_graph, random_graph


@dataclass(frozen=True)
class TraversalResult:
    """Outcome of a single traversal.

    Attributes
    ----------
    source : int
        The start vertex.
    order : Tuple[int, ...]
        Vertices in the order they were visited, starting with ``source``.
    predecessors : Dict[int, int]
        For every visited vertex other than ``source``, the vertex it was
        discovered from.
    vertex_count : int
        Size of the graph the traversal ran on.

    """

    source: int
    order: Tuple[int, ...]
    predecessors: Dict[int, int] = field(repr=False)
    vertex_count: int = field(repr=False)

    def visited(self, v: int) -> bool:
        return v == self.source or v in self.predecessors

    def path_to(self, v: int) -> List[int]:
        """Return the discovery path ``[source, ..., v]``.

        Parameters
        ----------
        v : int
            Target vertex.

        Returns
        -------
        List[int]
            The path, or an empty list if ``v`` was not reached.

        Raises
        ------
        VertexOutOfRange
            If ``v`` is not a vertex of the traversed graph.

        """
        v = check_vertex(v, self.vertex_count)
        if not self.visited(v):
            return []
        path = [v]
        while v != self.source:
            v = self.predecessors[v]
            path.append(v)
        path.reverse()
        return path

    def __iter__(self) -> Iterator[int]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)


def breadth_first(graph: Graph, source: int) -> TraversalResult:
    """Visit every vertex reachable from ``source`` in breadth-first order.

    Vertices come out in non-decreasing hop distance from ``source``; edge
    weights are ignored.

    Parameters
    ----------
    graph : Graph
        Graph to traverse.
    source : int
        Start vertex.

    Returns
    -------
    TraversalResult
        Visitation order and discovery edges.

    Raises
    ------
    VertexOutOfRange
        If ``source`` is not a vertex of ``graph``.

    """
    source = check_vertex(source, graph.vertex_count())

    order = [source]
    predecessors: Dict[int, int] = {}
    seen = {source}
    frontier = deque([source])

    while frontier:
        u = frontier.popleft()
        for v, _ in graph.neighbors(u):
            if v in seen:
                continue
            seen.add(v)
            predecessors[v] = u
            order.append(v)
            frontier.append(v)

    return TraversalResult(source, tuple(order), predecessors, graph.vertex_count())


def depth_first(graph: Graph, source: int) -> TraversalResult:
    """Visit every vertex reachable from ``source`` in depth-first pre-order.

    Parameters
    ----------
    graph : Graph
        Graph to traverse.
    source : int
        Start vertex.

    Returns
    -------
    TraversalResult
        Visitation order and discovery edges.

    Raises
    ------
    VertexOutOfRange
        If ``source`` is not a vertex of ``graph``.

    """
    source = check_vertex(source, graph.vertex_count())

    order = [source]
    predecessors: Dict[int, int] = {}
    seen = {source}
    stack = [(source, graph.neighbors(source))]

    while stack:
        u, remaining = stack[-1]
        for v, _ in remaining:
            if v not in seen:
                seen.add(v)
                predecessors[v] = u
                order.append(v)
                stack.append((v, graph.neighbors(v)))
                break
        else:
            stack.pop()

    return TraversalResult(source, tuple(order), predecessors, graph.vertex_count())


_WHITE, _GREY, _BLACK = 0, 1, 2


def has_cycle(graph: Graph) -> bool:
    """Check whether ``graph`` contains a cycle.

    Undirected graphs are checked with a :class:`DisjointSet`: an edge whose
    endpoints are already joined closes a cycle, so self-loops and parallel
    edges count. Directed graphs are checked with an iterative three-colour
    depth-first search, where reaching a vertex still on the stack means a
    back edge.

    """
    n = graph.vertex_count()

    if not graph.directed:
        ds = DisjointSet(n)
        for u, v, _ in graph.edges():
            if not ds.union(u, v):
                logging.debug("edge (%d, %d) closes a cycle", u, v)
                return True
        return False

    colour = [_WHITE] * n
    for start in graph.vertices():
        if colour[start] != _WHITE:
            continue
        colour[start] = _GREY
        stack = [(start, graph.neighbors(start))]
        while stack:
            u, remaining = stack[-1]
            for v, _ in remaining:
                if colour[v] == _GREY:
                    logging.debug("back edge (%d, %d) closes a cycle", u, v)
                    return True
                if colour[v] == _WHITE:
                    colour[v] = _GREY
                    stack.append((v, graph.neighbors(v)))
                    break
            else:
                colour[u] = _BLACK
                stack.pop()
    return False


def _sparse_graph(size: int, rng: np.random.Generator):
    return random_graph(size, 4 * size, rng=rng), 0


def _chain(size: int, rng: np.random.Generator):
    return chain_graph(size), 0


BENCHMARKS = [
    BenchmarkCase("breadth first random", _sparse_graph, breadth_first, (1_000, 10_000)),
    BenchmarkCase("depth first random", _sparse_graph, depth_first, (1_000, 10_000)),
    BenchmarkCase("depth first chain", _chain, depth_first, (10_000, 100_000)),
]
