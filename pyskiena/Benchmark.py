"""
Benchmark harness
=================

Every algorithm module publishes a static ``BENCHMARKS`` list of
:class:`BenchmarkCase` objects. A case knows how to build a private input for a
given problem size (``setup``) and which call to time (``run``). The harness
composes those lists explicitly, times each case over a range of sizes and
reports the resulting timing distributions.

Trials never share inputs: ``setup`` is called again before every timed
``run``, so cases that mutate their input (union-find, in-place sorts) are
measured from the same starting state each time. This also makes it safe to
fan trials out to worker processes.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Sequence, Tuple

import numpy as np

DEFAULT_REPEATS = 7
DEFAULT_SEED = 0


@dataclass(frozen=True)
class BenchmarkCase:
    """A named, sized, repeatable timing experiment.

    Parameters
    ----------
    name : str
        Human readable identifier shown in reports.
    setup : Callable[[int, np.random.Generator], Tuple]
        Builds the arguments for one trial of the given size.
    run : Callable[..., Any]
        The call being timed; invoked as ``run(*setup(size, rng))``.
    sizes : Tuple[int, ...]
        Problem sizes the case is measured at.

    Notes
    -----
    ``setup`` and ``run`` must be module-level functions (or partials of
    them) so the case can be pickled into worker processes.
    """

    name: str
    setup: Callable[[int, np.random.Generator], Tuple]
    run: Callable[..., Any]
    sizes: Tuple[int, ...] = (100, 1_000)


@dataclass(frozen=True, eq=False)
class BenchmarkResult:
    """Timings, in seconds, of one case at one size."""

    name: str
    size: int
    timings: np.ndarray = field(repr=False)

    @property
    def mean(self) -> float:
        return float(np.mean(self.timings))

    @property
    def std(self) -> float:
        return float(np.std(self.timings))

    @property
    def median(self) -> float:
        return float(np.median(self.timings))

    @property
    def best(self) -> float:
        return float(np.min(self.timings))


def run_case(
    case: BenchmarkCase,
    size: int,
    repeats: int = DEFAULT_REPEATS,
    seed: int = DEFAULT_SEED,
) -> BenchmarkResult:
    """Time ``case`` at ``size``.

    One untimed warm-up call is made first, then ``repeats`` timed trials.
    Each trial draws a fresh input from a generator seeded with ``seed``, so
    every trial sees the same input and results are reproducible.

    Parameters
    ----------
    case : BenchmarkCase
        The case to run.
    size : int
        Problem size handed to ``case.setup``.
    repeats : int, optional
        Number of timed trials. Must be positive.
    seed : int, optional
        Seed for the input generator.

    Returns
    -------
    BenchmarkResult
        The per-trial timings.
    """
    if repeats < 1:
        raise ValueError("repeats must be >= 1")

    case.run(*case.setup(size, np.random.default_rng(seed)))  # warm-up

    timings = np.empty(repeats)
    for i in range(repeats):
        args = case.setup(size, np.random.default_rng(seed))
        start = time.perf_counter()
        case.run(*args)
        timings[i] = time.perf_counter() - start

    result = BenchmarkResult(case.name, size, timings)
    logging.info(
        "%s [n=%d]: mean %.3f ms, std %.3f ms",
        case.name, size, result.mean * 1e3, result.std * 1e3,
    )
    return result


def _run_job(job: Tuple[BenchmarkCase, int, int, int]) -> BenchmarkResult:
    case, size, repeats, seed = job
    return run_case(case, size, repeats=repeats, seed=seed)


def run_benchmarks(
    cases: Iterable[BenchmarkCase],
    repeats: int = DEFAULT_REPEATS,
    seed: int = DEFAULT_SEED,
    workers: int = 1,
) -> List[BenchmarkResult]:
    """Run every case at each of its sizes.

    Parameters
    ----------
    cases : Iterable[BenchmarkCase]
        The cases to run, typically a concatenation of module ``BENCHMARKS``.
    repeats : int, optional
        Timed trials per (case, size).
    seed : int, optional
        Input generator seed.
    workers : int, optional
        If greater than 1, (case, size) jobs run in that many worker
        processes. Each job builds its own inputs.

    Returns
    -------
    List[BenchmarkResult]
        One result per (case, size), in case order then size order.
    """
    jobs = [(case, size, repeats, seed) for case in cases for size in case.sizes]
    logging.info("running %d benchmark jobs on %d worker(s)", len(jobs), workers)

    if workers <= 1:
        return [_run_job(job) for job in jobs]

    with ProcessPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(_run_job, jobs))


def format_report(results: Sequence[BenchmarkResult]) -> str:
    """Render results as an aligned text table with timings in milliseconds."""
    header = ("benchmark", "n", "mean ms", "std ms", "median ms", "best ms")
    rows = [
        (
            r.name,
            str(r.size),
            f"{r.mean * 1e3:.3f}",
            f"{r.std * 1e3:.3f}",
            f"{r.median * 1e3:.3f}",
            f"{r.best * 1e3:.3f}",
        )
        for r in results
    ]
    widths = [
        max(len(row[i]) for row in [header] + rows) for i in range(len(header))
    ]

    def fmt(row: Tuple[str, ...]) -> str:
        first = row[0].ljust(widths[0])
        rest = [cell.rjust(w) for cell, w in zip(row[1:], widths[1:])]
        return "  ".join([first] + rest)

    lines = [fmt(header), "  ".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)
