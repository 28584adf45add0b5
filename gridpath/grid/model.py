"""
Grid snapshot and the mutable grid owner.

Grid is the plain rectangular collection of cells the search engine reads.
GridModel owns one Grid and applies the editing actions a user performs
(walls, weights, waypoints, moving the endpoints) while keeping its
invariants: exactly one start, exactly one finish, and walls never carry
food or weight.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridpath.config import (
    DEFAULT_COLS,
    DEFAULT_FINISH,
    DEFAULT_ROWS,
    DEFAULT_START,
    DEFAULT_WEIGHT_VALUE,
    UNIT_COST,
)
from gridpath.grid.cell import Cell, Position

if TYPE_CHECKING:
    from gridpath.search import Algorithm
    from gridpath.search.result import SearchResult

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    """
    Rectangular collection of cells addressed by (row, col).

    Attributes:
        cells: Rows of cells, cells[row][col]
    """

    cells: list[list[Cell]]

    @classmethod
    def blank(cls, rows: int, cols: int) -> Grid:
        """Create an empty rows x cols grid with no flags set."""
        return cls([[Cell(row, col) for col in range(cols)] for row in range(rows)])

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def is_rectangular(self) -> bool:
        """Whether every row has the same length."""
        return all(len(row) == self.cols for row in self.cells)

    def in_bounds(self, position: tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, position: tuple[int, int]) -> Cell:
        """
        Return the cell at a position.

        Raises:
            IndexError: If the position is outside the grid
        """
        if not self.in_bounds(position):
            raise IndexError(f"Position {tuple(position)} out of bounds ({self.rows}x{self.cols})")
        row, col = position
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row


class GridModel:
    """
    Mutable owner of a Grid plus its start, finish and waypoint positions.

    Every editing method is a no-op when the action would break an
    invariant (out of bounds, editing an endpoint, stacking a weight on a
    wall, ...), mirroring how the editor silently ignores such clicks.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        start: tuple[int, int] = DEFAULT_START,
        finish: tuple[int, int] = DEFAULT_FINISH,
    ) -> None:
        """
        Initialize a blank board.

        Args:
            rows: Number of rows
            cols: Number of columns
            start: Start position
            finish: Finish position (must differ from start)

        Raises:
            ValueError: If the size is not positive or an endpoint is invalid
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid size must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._start = Position(*start)
        self._finish = Position(*finish)
        self._food: list[Position] = []

        if self._start == self._finish:
            raise ValueError(f"Start and finish must differ, both are {tuple(self._start)}")
        for name, pos in (("start", self._start), ("finish", self._finish)):
            if not (0 <= pos.row < rows and 0 <= pos.col < cols):
                raise ValueError(f"{name.capitalize()} {tuple(pos)} outside {rows}x{cols} grid")

        self._grid = self._build()

    def _build(self) -> Grid:
        grid = Grid.blank(self._rows, self._cols)
        grid.cell_at(self._start).is_start = True
        grid.cell_at(self._finish).is_finish = True
        for pos in self._food:
            grid.cell_at(pos).is_food = True
        return grid

    # -------------------- accessors --------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def start(self) -> Position:
        return self._start

    @property
    def finish(self) -> Position:
        return self._finish

    @property
    def waypoints(self) -> list[Position]:
        """Waypoints in the order they were placed."""
        return list(self._food)

    def snapshot(self) -> Grid:
        """The live grid. The search engine copies it before running."""
        return self._grid

    def in_bounds(self, position: tuple[int, int]) -> bool:
        return self._grid.in_bounds(position)

    # -------------------- endpoints --------------------

    def set_start(self, position: tuple[int, int]) -> None:
        """Move the start, unless the target is off-grid, a wall, or the finish."""
        pos = Position(*position)
        if not self._can_hold_endpoint(pos, other=self._finish):
            return
        self._grid.cell_at(self._start).is_start = False
        self._clear_terrain(pos)
        self._grid.cell_at(pos).is_start = True
        self._start = pos

    def set_finish(self, position: tuple[int, int]) -> None:
        """Move the finish, unless the target is off-grid, a wall, or the start."""
        pos = Position(*position)
        if not self._can_hold_endpoint(pos, other=self._start):
            return
        self._grid.cell_at(self._finish).is_finish = False
        self._clear_terrain(pos)
        self._grid.cell_at(pos).is_finish = True
        self._finish = pos

    def _can_hold_endpoint(self, pos: Position, other: Position) -> bool:
        return self.in_bounds(pos) and pos != other and not self._grid.cell_at(pos).is_wall

    def _clear_terrain(self, pos: Position) -> None:
        cell = self._grid.cell_at(pos)
        cell.is_wall = False
        cell.is_weight = False
        cell.weight_value = UNIT_COST
        if cell.is_food:
            cell.is_food = False
            self._food.remove(pos)

    # -------------------- terrain tools --------------------

    def toggle_wall(self, position: tuple[int, int]) -> None:
        """Add or remove a wall. A new wall erases food and weight."""
        pos = Position(*position)
        if not self.in_bounds(pos):
            return
        cell = self._grid.cell_at(pos)
        if cell.is_start or cell.is_finish:
            return
        if cell.is_wall:
            cell.is_wall = False
            return
        self._clear_terrain(pos)
        cell.is_wall = True

    def toggle_food(self, position: tuple[int, int]) -> None:
        """Add or remove a waypoint."""
        pos = Position(*position)
        if not self.in_bounds(pos):
            return
        cell = self._grid.cell_at(pos)
        if cell.is_start or cell.is_finish or cell.is_wall:
            return
        if cell.is_food:
            cell.is_food = False
            self._food.remove(pos)
        else:
            cell.is_food = True
            self._food.append(pos)

    def toggle_weight(self, position: tuple[int, int], value: int = DEFAULT_WEIGHT_VALUE) -> None:
        """Add or remove weighted terrain."""
        if value < UNIT_COST:
            raise ValueError(f"Weight value must be at least {UNIT_COST}, got {value}")
        pos = Position(*position)
        if not self.in_bounds(pos):
            return
        cell = self._grid.cell_at(pos)
        if cell.is_start or cell.is_finish or cell.is_wall or cell.is_food:
            return
        cell.is_weight = not cell.is_weight
        cell.weight_value = value if cell.is_weight else UNIT_COST

    def erase(self, position: tuple[int, int]) -> None:
        """Remove wall, weight and food from a cell."""
        pos = Position(*position)
        if self.in_bounds(pos):
            self._clear_terrain(pos)

    # -------------------- bulk actions --------------------

    def clear_walls_and_weights(self) -> None:
        """Remove every wall and weight, keeping endpoints and waypoints."""
        for cell in self._grid:
            cell.is_wall = False
            cell.is_weight = False
            cell.weight_value = UNIT_COST

    def clear_all(self) -> None:
        """Reset to a blank board, keeping only the endpoints."""
        self._food = []
        self._grid = self._build()

    def resize(self, rows: int, cols: int) -> None:
        """
        Rebuild the board at a new size.

        Endpoints are clamped into the new bounds and waypoints outside them
        are dropped. Terrain is not carried over.
        """
        if rows <= 0 or cols <= 0:
            return
        start = Position(min(self._start.row, rows - 1), min(self._start.col, cols - 1))
        finish = Position(min(self._finish.row, rows - 1), min(self._finish.col, cols - 1))
        if start == finish:
            logger.warning(f"Resize to {rows}x{cols} would merge start and finish, ignoring")
            return
        self._rows, self._cols = rows, cols
        self._start, self._finish = start, finish
        self._food = [p for p in self._food if p.row < rows and p.col < cols and p not in (start, finish)]
        self._grid = self._build()

    def load_walls(self, positions: Sequence[tuple[int, int]]) -> None:
        """Place walls at many positions at once (positions already walled are kept)."""
        for position in positions:
            pos = Position(*position)
            if self.in_bounds(pos) and not self._grid.cell_at(pos).is_wall:
                self.toggle_wall(pos)

    # -------------------- search --------------------

    def search(self, algorithm: str | Algorithm) -> SearchResult:
        """Run a search from start through every waypoint to finish."""
        from gridpath.search.engine import search

        return search(algorithm, self._grid, self._start, self._finish, self._food)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(rows={self._rows}, cols={self._cols}, "
            f"start={tuple(self._start)}, finish={tuple(self._finish)}, waypoints={len(self._food)})"
        )
