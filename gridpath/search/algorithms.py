"""
Algorithm selector.

Each algorithm is a name plus the frontier policy that drives the shared
search loop.
"""

from __future__ import annotations

from enum import Enum

from gridpath.search.frontier import (
    AStarFrontier,
    DistanceFrontier,
    Frontier,
    QueueFrontier,
    StackFrontier,
)


class Algorithm(str, Enum):
    """Supported search algorithms."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def guarantees_shortest(self) -> bool:
        """Whether the returned path is optimal (by cost, or by hops for BFS)."""
        return self is not Algorithm.DFS

    def frontier(self) -> Frontier:
        """Fresh frontier for one leg."""
        return _FRONTIERS[self]()


_FRONTIERS: dict[Algorithm, type[Frontier]] = {
    Algorithm.DIJKSTRA: DistanceFrontier,
    Algorithm.ASTAR: AStarFrontier,
    Algorithm.BFS: QueueFrontier,
    Algorithm.DFS: StackFrontier,
}

_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
    Algorithm.ASTAR: "A* Search",
    Algorithm.BFS: "Breadth-First Search",
    Algorithm.DFS: "Depth-First Search",
}

_DESCRIPTIONS = {
    Algorithm.DIJKSTRA: (
        "Guarantees the shortest path. Explores all directions equally, "
        "prioritizing nodes closest to the start."
    ),
    Algorithm.ASTAR: (
        "Uses heuristics to find the shortest path more efficiently than "
        "Dijkstra's by favoring paths that seem to lead toward the goal."
    ),
    Algorithm.BFS: (
        "Explores all neighbors at the current depth before moving to nodes "
        "at the next depth level. Ignores weights."
    ),
    Algorithm.DFS: (
        "Explores as far as possible along each branch before backtracking. "
        "Does not guarantee the shortest path."
    ),
}

_ALIASES = {
    "a*": Algorithm.ASTAR,
    "a-star": Algorithm.ASTAR,
    "a_star": Algorithm.ASTAR,
    "uniform-cost": Algorithm.DIJKSTRA,
    "ucs": Algorithm.DIJKSTRA,
    "breadth-first": Algorithm.BFS,
    "depth-first": Algorithm.DFS,
}


def get_algorithm(name: str | Algorithm) -> Algorithm:
    """
    Get an algorithm by name.

    Args:
        name: Algorithm identifier (dijkstra, astar, bfs, dfs) or a common
            alias such as 'a*' or 'breadth-first'; case-insensitive

    Returns:
        The matching Algorithm

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(name, Algorithm):
        return name

    key = str(name).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Algorithm(key)
    except ValueError:
        available = ", ".join(a.value for a in Algorithm)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}") from None
