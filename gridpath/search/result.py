"""
Search result dataclasses.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from gridpath.grid.cell import Cell, Position
from gridpath.search.errors import LegUnreachable


def path_cost(path: Sequence[Cell]) -> int:
    """
    Total traversal cost of a route.

    Every step pays the entry cost of the cell it moves onto, so the first
    cell is free. An empty or single-cell route costs 0.
    """
    return sum(cell.cost for cell in path[1:])


@dataclass
class LegResult:
    """
    One completed leg of a route.

    Attributes:
        source: Leg start position
        target: Leg target position
        visited: Cells expanded during the leg, in order
        path: Route from source to target, both inclusive
    """

    source: Position
    target: Position
    visited: list[Cell]
    path: list[Cell]

    @property
    def cost(self) -> int:
        return path_cost(self.path)


@dataclass
class SearchResult:
    """
    Complete record of a search over start -> waypoints -> finish.

    Attributes:
        algorithm: Algorithm value (e.g. 'dijkstra')
        start: Requested start
        finish: Requested finish
        waypoints: Requested waypoints, in visiting order
        visited_in_order: Expanded cells of every leg, in leg order, including
            the exploration of a leg that failed to reach its target
        path_in_order: Path segments of every completed leg, in leg order
        legs: Completed legs
        failure: The leg that stopped the search, if any
    """

    algorithm: str
    start: Position
    finish: Position
    waypoints: list[Position] = field(default_factory=list)
    visited_in_order: list[Cell] = field(default_factory=list)
    path_in_order: list[Cell] = field(default_factory=list)
    legs: list[LegResult] = field(default_factory=list)
    failure: LegUnreachable | None = None

    def add_leg(self, leg: LegResult) -> None:
        """Append a completed leg's trace and path segment."""
        self.legs.append(leg)
        self.visited_in_order.extend(leg.visited)
        self.path_in_order.extend(leg.path)

    @property
    def expected_legs(self) -> int:
        return len(self.waypoints) + 1

    @property
    def is_complete(self) -> bool:
        """Whether every leg succeeded and the route ends at the finish."""
        return (
            self.failure is None
            and len(self.legs) == self.expected_legs
            and bool(self.path_in_order)
            and self.path_in_order[-1].position == self.finish
        )

    @property
    def total_cost(self) -> int:
        """Sum of completed legs' path costs."""
        return sum(leg.cost for leg in self.legs)

    @property
    def visited_positions(self) -> list[Position]:
        return [cell.position for cell in self.visited_in_order]

    @property
    def path_positions(self) -> list[Position]:
        return [cell.position for cell in self.path_in_order]

    def summary(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "visited": len(self.visited_in_order),
            "path_len": len(self.path_in_order),
            "total_cost": self.total_cost,
            "legs": f"{len(self.legs)}/{self.expected_legs}",
            "complete": self.is_complete,
        }
