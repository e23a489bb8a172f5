from pyskiena.errors import InvalidEdge, VertexOutOfRange, NegativeWeight
from pyskiena.Graph import Graph
from pyskiena.DisjointSet import DisjointSet
from pyskiena.Traversal import (
    TraversalResult,
    breadth_first,
    depth_first,
    has_cycle
)
from pyskiena.ShortestPath import ShortestPathResult, shortest_paths
from pyskiena.SpanningTree import (
    SpanningTree,
    minimum_spanning_tree,
    connected_components
)
from pyskiena.Sorts import selection_sort, insertion_sort, merge_sort, quick_sort
from pyskiena.BinaryTree import BinaryTree
from pyskiena.Substring import RollingHash, find_substring
from pyskiena.Benchmark import (
    BenchmarkCase,
    BenchmarkResult,
    run_case,
    run_benchmarks,
    format_report
)
from pyskiena.plotting import plot_graph, plot_benchmark_timings

__all__ = [
    "InvalidEdge",
    "VertexOutOfRange",
    "NegativeWeight",
    "Graph",
    "DisjointSet",
    "TraversalResult",
    "breadth_first",
    "depth_first",
    "has_cycle",
    "ShortestPathResult",
    "shortest_paths",
    "SpanningTree",
    "minimum_spanning_tree",
    "connected_components",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "BinaryTree",
    "RollingHash",
    "find_substring",
    "BenchmarkCase",
    "BenchmarkResult",
    "run_case",
    "run_benchmarks",
    "format_report",
    "plot_graph",
    "plot_benchmark_timings",
]
