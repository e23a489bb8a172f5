import matplotlib.pyplot as plt
from pyskiena import run_benchmarks, format_report, plot_benchmark_timings
from pyskiena.DisjointSet import BENCHMARKS as DISJOINT_SET_BENCHMARKS
from pyskiena.ShortestPath import BENCHMARKS as SHORTEST_PATH_BENCHMARKS

if __name__ == "__main__":
    results = run_benchmarks(
        DISJOINT_SET_BENCHMARKS + SHORTEST_PATH_BENCHMARKS, repeats=10, workers=2
    )
    print(format_report(results))

    fig, ax = plt.subplots(figsize=(8, 5))
    plot_benchmark_timings(results, ax)
    fig.tight_layout()
    plt.show()
