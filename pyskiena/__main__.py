"""Run every registered benchmark and print a timing report.

Usage::

    python -m pyskiena
"""

import logging
import sys

from pyskiena.Benchmark import format_report, run_benchmarks
from pyskiena.BinaryTree import BENCHMARKS as BINARY_TREE_BENCHMARKS
from pyskiena.DisjointSet import BENCHMARKS as DISJOINT_SET_BENCHMARKS
from pyskiena.Graph import BENCHMARKS as GRAPH_BENCHMARKS
from pyskiena.ShortestPath import BENCHMARKS as SHORTEST_PATH_BENCHMARKS
from pyskiena.Sorts import BENCHMARKS as SORT_BENCHMARKS
from pyskiena.SpanningTree import BENCHMARKS as SPANNING_TREE_BENCHMARKS
from pyskiena.Substring import BENCHMARKS as SUBSTRING_BENCHMARKS
from pyskiena.Traversal import BENCHMARKS as TRAVERSAL_BENCHMARKS

ALL_BENCHMARKS = (
    GRAPH_BENCHMARKS
    + DISJOINT_SET_BENCHMARKS
    + TRAVERSAL_BENCHMARKS
    + SHORTEST_PATH_BENCHMARKS
    + SPANNING_TREE_BENCHMARKS
    + SORT_BENCHMARKS
    + BINARY_TREE_BENCHMARKS
    + SUBSTRING_BENCHMARKS
)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    results = run_benchmarks(ALL_BENCHMARKS)
    print(format_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
