"""
Working copy of a grid used for one search run.

The caller's grid is never touched: prepare_working_grid validates it and
copies every cell into a flat arena addressed by row * cols + col.
Predecessor links are arena indices, so a route is rebuilt by index lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace

from gridpath.grid.cell import Cell, Position, manhattan
from gridpath.grid.model import Grid
from gridpath.search.errors import InternalInvariantViolation, InvalidGrid

logger = logging.getLogger(__name__)

# up, down, left, right
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbor_positions(row: int, col: int, rows: int, cols: int) -> list[Position]:
    """In-bounds 4-neighbors of (row, col), ordered up, down, left, right."""
    out: list[Position] = []
    for d_row, d_col in NEIGHBOR_OFFSETS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            out.append(Position(r, c))
    return out


@dataclass
class WorkingGrid:
    """
    Flat arena of cell copies owned by a single search run.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        cells: Cell copies, cells[row * cols + col]
    """

    rows: int
    cols: int
    cells: list[Cell]

    def index(self, position: tuple[int, int]) -> int:
        row, col = position
        return row * self.cols + col

    def cell_at(self, position: tuple[int, int]) -> Cell:
        return self.cells[self.index(position)]

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Neighbor cells (walls included) in up, down, left, right order."""
        return [
            self.cells[self.index(pos)]
            for pos in neighbor_positions(cell.row, cell.col, self.rows, self.cols)
        ]

    def reset_search_state(self) -> None:
        for cell in self.cells:
            cell.reset_search_state()

    def assign_heuristics(self, target: Cell) -> None:
        """Set every cell's heuristic to its Manhattan distance to target."""
        goal = target.position
        for cell in self.cells:
            cell.heuristic = manhattan(cell.position, goal)

    def reconstruct_path(self, end: Cell) -> list[Cell]:
        """
        Walk predecessor links back from end.

        Returns:
            Cells from the leg start to end, inclusive

        Raises:
            InternalInvariantViolation: If the chain is longer than the grid,
                which means the links form a cycle
        """
        limit = len(self.cells)
        path: list[Cell] = []
        cur: Cell | None = end
        while cur is not None:
            if len(path) >= limit:
                logger.error(
                    f"Predecessor chain from {tuple(end.position)} exceeds {limit} cells"
                )
                raise InternalInvariantViolation(
                    f"Cyclic predecessor chain ending at {tuple(end.position)}"
                )
            path.append(cur)
            cur = self.cells[cur.previous] if cur.previous is not None else None
        path.reverse()
        return path

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def _check_position(grid: Grid, name: str, position: tuple[int, int]) -> Position:
    try:
        pos = Position(*position)
    except TypeError as e:
        raise InvalidGrid(f"{name} must be a (row, col) pair, got {position!r}") from e
    if not grid.in_bounds(pos):
        raise InvalidGrid(f"{name} {tuple(pos)} outside {grid.rows}x{grid.cols} grid")
    if grid.cell_at(pos).is_wall:
        raise InvalidGrid(f"{name} {tuple(pos)} is a wall")
    return pos


def prepare_working_grid(
    grid: Grid,
    start: tuple[int, int],
    finish: tuple[int, int],
    waypoints: Sequence[tuple[int, int]] = (),
) -> WorkingGrid:
    """
    Validate a grid snapshot and copy it into a fresh arena.

    Static fields are preserved; transient search fields are reset.

    Raises:
        InvalidGrid: Empty or ragged grid, misplaced cell coordinates,
            endpoints or waypoints out of bounds or on walls,
            or start == finish
    """
    if grid.rows == 0 or grid.cols == 0:
        raise InvalidGrid("Grid is empty")
    if not grid.is_rectangular():
        lengths = sorted({len(row) for row in grid.cells})
        raise InvalidGrid(f"Grid rows differ in length: {lengths}")

    start = _check_position(grid, "Start", start)
    finish = _check_position(grid, "Finish", finish)
    if start == finish:
        raise InvalidGrid(f"Start and finish are both {tuple(start)}")
    for i, waypoint in enumerate(waypoints):
        _check_position(grid, f"Waypoint {i}", waypoint)

    cells: list[Cell] = []
    for row, line in enumerate(grid.cells):
        for col, cell in enumerate(line):
            if (cell.row, cell.col) != (row, col):
                raise InvalidGrid(
                    f"Cell at slot {(row, col)} claims position {(cell.row, cell.col)}"
                )
            copy = replace(cell)
            copy.reset_search_state()
            cells.append(copy)

    return WorkingGrid(rows=grid.rows, cols=grid.cols, cells=cells)
