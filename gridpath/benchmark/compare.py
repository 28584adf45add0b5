"""
Side-by-side comparison of the search algorithms on one grid.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass

import numpy as np

from gridpath.grid.model import Grid
from gridpath.search.algorithms import Algorithm, get_algorithm
from gridpath.search.engine import search

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmStats:
    """
    Metrics for one algorithm run.

    Attributes:
        algorithm: Algorithm value
        visited: Cells expanded across all legs
        path_len: Cells in the concatenated path
        path_cost: Traversal cost of the path
        complete: Whether the finish was reached
        elapsed_ms: Wall time of the search
    """

    algorithm: str
    visited: int
    path_len: int
    path_cost: int
    complete: bool
    elapsed_ms: float

    def to_dict(self) -> dict:
        return asdict(self)


def compare_algorithms(
    grid: Grid,
    start: tuple[int, int],
    finish: tuple[int, int],
    waypoints: Sequence[tuple[int, int]] = (),
    algorithms: Iterable[str | Algorithm] | None = None,
) -> list[AlgorithmStats]:
    """
    Run several algorithms on the same request.

    Args:
        grid: Grid to search (not modified)
        start: Start position
        finish: Finish position
        waypoints: Ordered waypoints
        algorithms: Algorithms to run (default: all four)

    Returns:
        One AlgorithmStats per algorithm, in the order given
    """
    selected = [get_algorithm(a) for a in algorithms] if algorithms is not None else list(Algorithm)
    stats: list[AlgorithmStats] = []

    for algo in selected:
        began = time.perf_counter()
        result = search(algo, grid, start, finish, waypoints)
        elapsed_ms = (time.perf_counter() - began) * 1000

        stats.append(
            AlgorithmStats(
                algorithm=algo.value,
                visited=len(result.visited_in_order),
                path_len=len(result.path_in_order),
                path_cost=result.total_cost,
                complete=result.is_complete,
                elapsed_ms=elapsed_ms,
            )
        )
        logger.debug(f"{algo.value}: {stats[-1].to_dict()}")

    return stats


def summarize(stats: Sequence[AlgorithmStats]) -> dict:
    """
    Aggregate a comparison.

    Returns:
        Dict with mean/min visited counts, the cheapest complete cost and
        the algorithms achieving it, and the fewest-expansion algorithm
    """
    if not stats:
        return {}

    visited = np.array([s.visited for s in stats])
    summary = {
        "runs": len(stats),
        "mean_visited": float(visited.mean()),
        "min_visited": int(visited.min()),
        "fewest_visited": stats[int(visited.argmin())].algorithm,
        "cheapest_cost": None,
        "cheapest": [],
    }

    complete = [s for s in stats if s.complete]
    if complete:
        costs = np.array([s.path_cost for s in complete])
        best = int(costs.min())
        summary["cheapest_cost"] = best
        summary["cheapest"] = [s.algorithm for s in complete if s.path_cost == best]

    return summary
