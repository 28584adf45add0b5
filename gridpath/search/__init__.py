"""
Search module.

Provides the pathfinding engine over a weighted grid:
- search: Route start -> waypoints -> finish with one algorithm
- Algorithm: Dijkstra, A*, BFS, DFS selector
- SearchResult / LegResult: Expansion traces and paths
- InvalidGrid / LegUnreachable / InternalInvariantViolation: Errors
"""

from gridpath.search.algorithms import Algorithm, get_algorithm
from gridpath.search.engine import run_leg, search
from gridpath.search.errors import (
    InternalInvariantViolation,
    InvalidGrid,
    LegUnreachable,
)
from gridpath.search.result import LegResult, SearchResult, path_cost
from gridpath.search.working import (
    WorkingGrid,
    neighbor_positions,
    prepare_working_grid,
)

__all__ = [
    "Algorithm",
    "get_algorithm",
    "search",
    "run_leg",
    "SearchResult",
    "LegResult",
    "path_cost",
    "InvalidGrid",
    "LegUnreachable",
    "InternalInvariantViolation",
    "WorkingGrid",
    "neighbor_positions",
    "prepare_working_grid",
]
