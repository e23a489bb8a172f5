"""
Spanning tree module
====================

Kruskal's minimum spanning tree and connected components, both driven by
:class:`~pyskiena.DisjointSet.DisjointSet`.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from pyskiena.Benchmark import BenchmarkCase
from pyskiena.DisjointSet import DisjointSet
from pyskiena.Graph import Edge, Graph
from pyskiena.generators import random_graph


@dataclass(frozen=True)
class SpanningTree:
    """A minimum spanning forest.

    Attributes
    ----------
    edges : Tuple[Edge, ...]
        Accepted ``(u, v, weight)`` edges in the order Kruskal accepted them.
    total_weight : float
        Sum of the accepted weights.
    components : int
        Number of trees in the forest; 1 when the graph is connected.

    """

    edges: Tuple[Edge, ...]
    total_weight: float
    components: int

    @property
    def is_spanning_tree(self) -> bool:
        return self.components <= 1


def minimum_spanning_tree(graph: Graph) -> SpanningTree:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    Edges are taken in ascending weight order (ties keep their input order)
    and accepted whenever ``DisjointSet.union`` reports that they join two
    different trees.

    Parameters
    ----------
    graph : Graph
        An undirected graph. Negative weights are fine.

    Returns
    -------
    SpanningTree
        The accepted edges, their total weight, and the number of trees.

    Raises
    ------
    ValueError
        If ``graph`` is directed.

    """
    if graph.directed:
        raise ValueError("minimum spanning tree requires an undirected graph")

    n = graph.vertex_count()
    ds = DisjointSet(n)
    accepted: List[Edge] = []

    for u, v, w in sorted(graph.edges(), key=lambda e: e[2]):
        if ds.union(u, v):
            accepted.append((u, v, w))
            if len(accepted) == n - 1:
                break

    logging.debug("kruskal accepted %d edges, %d trees", len(accepted), len(ds))
    return SpanningTree(tuple(accepted), float(sum(w for _, _, w in accepted)), len(ds))


def connected_components(graph: Graph) -> List[List[int]]:
    """Group vertices into connected components.

    Edge direction is ignored, so directed graphs give their weakly
    connected components. Each component is sorted and components are
    ordered by their smallest vertex.
    """
    ds = DisjointSet(graph.vertex_count())
    for u, v, _ in graph.edges():
        ds.union(u, v)

    groups: Dict[int, List[int]] = {}
    for v in graph.vertices():
        groups.setdefault(ds.find(v), []).append(v)
    return list(groups.values())


def _undirected_graph(size: int, rng: np.random.Generator):
    return (random_graph(size, 4 * size, directed=False, rng=rng),)


BENCHMARKS = [
    BenchmarkCase("kruskal random", _undirected_graph, minimum_spanning_tree, (1_000, 10_000)),
    BenchmarkCase("connected components random", _undirected_graph, connected_components, (1_000, 10_000)),
]
