"""
Cell and Position types shared by the grid model and the search engine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from gridpath.config import UNIT_COST


class Position(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int


@dataclass
class Cell:
    """
    One grid position.

    Static attributes describe what the user drew; the transient attributes
    are written only by the search engine on its own working copy.

    Attributes:
        row: Row index (identity)
        col: Column index (identity)
        is_start: Whether this is the start cell
        is_finish: Whether this is the finish cell
        is_wall: Impassable cell
        is_food: Waypoint that must be visited before the finish
        is_weight: Weighted terrain (weight_value applies)
        weight_value: Cost of entering the cell when is_weight is set
        is_visited: Settled/marked during the current leg
        distance: Best known cost from the leg start (math.inf if unknown)
        previous: Arena index of the predecessor on the best known route
        heuristic: Manhattan estimate to the leg target (A* only)
        f_score: distance + heuristic (A* only)
    """

    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False
    is_food: bool = False
    is_weight: bool = False
    weight_value: int = UNIT_COST
    is_visited: bool = False
    distance: float = math.inf
    previous: int | None = None
    heuristic: int = 0
    f_score: float = math.inf

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    @property
    def cost(self) -> int:
        """Cost of stepping onto this cell."""
        return self.weight_value if self.is_weight else UNIT_COST

    def reset_search_state(self) -> None:
        """Clear every transient field written by a search."""
        self.is_visited = False
        self.distance = math.inf
        self.previous = None
        self.heuristic = 0
        self.f_score = math.inf


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Manhattan distance between two (row, col) coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
