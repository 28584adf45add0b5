"""
Build grids from compact layouts and render them back.

Text layouts are one string per row:

    S..#....
    ..*#..2.
    ...#...F

    .  open cell        #  wall
    S  start            F  finish
    *  waypoint (visited in row-major order)
    2-9 weighted cell with that entry cost

Array layouts are numpy integer arrays: -1 for walls, 1 for open cells,
and any value above 1 for weighted cells of that cost. Float arrays are
rejected rather than truncated.

render_grid only writes what grid_from_text can read back, so a weight
above 9 is an error there. render_result draws such cells as '+'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gridpath.config import (
    ARRAY_WALL,
    LAYOUT_EMPTY,
    LAYOUT_FINISH,
    LAYOUT_FOOD,
    LAYOUT_PATH,
    LAYOUT_START,
    LAYOUT_VISITED,
    LAYOUT_WALL,
    UNIT_COST,
)
from gridpath.grid.cell import Cell, Position
from gridpath.grid.model import Grid

if TYPE_CHECKING:
    from gridpath.search.result import SearchResult


def grid_from_text(
    text: str,
) -> tuple[Grid, Position | None, Position | None, list[Position]]:
    """
    Parse a text layout.

    Blank lines and surrounding whitespace are ignored.

    Returns:
        (grid, start, finish, waypoints); start/finish are None when the
        layout has no S/F marker

    Raises:
        ValueError: On unknown characters or repeated S/F markers
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    start: Position | None = None
    finish: Position | None = None
    waypoints: list[Position] = []
    cells: list[list[Cell]] = []

    for row, line in enumerate(lines):
        current: list[Cell] = []
        for col, char in enumerate(line):
            cell = Cell(row, col)
            if char == LAYOUT_WALL:
                cell.is_wall = True
            elif char == LAYOUT_START:
                if start is not None:
                    raise ValueError(f"Second start marker at {(row, col)}")
                cell.is_start = True
                start = cell.position
            elif char == LAYOUT_FINISH:
                if finish is not None:
                    raise ValueError(f"Second finish marker at {(row, col)}")
                cell.is_finish = True
                finish = cell.position
            elif char == LAYOUT_FOOD:
                cell.is_food = True
                waypoints.append(cell.position)
            elif char.isdigit() and int(char) > UNIT_COST:
                cell.is_weight = True
                cell.weight_value = int(char)
            elif char != LAYOUT_EMPTY:
                raise ValueError(f"Unknown layout character {char!r} at {(row, col)}")
            current.append(cell)
        cells.append(current)

    return Grid(cells), start, finish, waypoints


def grid_from_array(array: np.ndarray) -> Grid:
    """
    Build a grid from a 2-D integer cost array.

    Raises:
        ValueError: If the array is not a 2-D integer array, or holds a
            value below 1 other than the wall marker
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"Expected an integer array, got dtype {array.dtype}")
    invalid = (array != ARRAY_WALL) & (array < UNIT_COST)
    if invalid.any():
        row, col = np.argwhere(invalid)[0]
        raise ValueError(f"Invalid cost {array[row, col]} at {(int(row), int(col))}")

    cells: list[list[Cell]] = []
    for row in range(array.shape[0]):
        current = []
        for col in range(array.shape[1]):
            value = int(array[row, col])
            cell = Cell(row, col)
            if value == ARRAY_WALL:
                cell.is_wall = True
            elif value > UNIT_COST:
                cell.is_weight = True
                cell.weight_value = value
            current.append(cell)
        cells.append(current)
    return Grid(cells)


def cost_array(grid: Grid) -> np.ndarray:
    """Entry cost of every cell as a float array, with walls at inf."""
    costs = np.empty((grid.rows, grid.cols), dtype=float)
    for cell in grid:
        costs[cell.row, cell.col] = np.inf if cell.is_wall else cell.cost
    return costs


def _cell_char(cell: Cell, strict: bool = False) -> str:
    if cell.is_start:
        return LAYOUT_START
    if cell.is_finish:
        return LAYOUT_FINISH
    if cell.is_wall:
        return LAYOUT_WALL
    if cell.is_food:
        return LAYOUT_FOOD
    if cell.is_weight and cell.weight_value > UNIT_COST:
        if cell.weight_value < 10:
            return str(cell.weight_value)
        if strict:
            raise ValueError(
                f"Weight {cell.weight_value} at {tuple(cell.position)} has no text layout character"
            )
        return "+"
    return LAYOUT_EMPTY


def render_grid(grid: Grid) -> str:
    """
    Render a grid in the text layout format.

    Raises:
        ValueError: If a weighted cell costs more than 9, which
            grid_from_text could not read back
    """
    return "\n".join("".join(_cell_char(cell, strict=True) for cell in row) for row in grid.cells)


def render_result(grid: Grid, result: SearchResult) -> str:
    """
    Render a grid with the search overlaid.

    Visited cells are drawn as 'o' and path cells as '@'. Endpoints,
    waypoints and walls keep their own markers.
    """
    canvas = [[_cell_char(cell) for cell in row] for row in grid.cells]
    for mark, cells in ((LAYOUT_VISITED, result.visited_in_order), (LAYOUT_PATH, result.path_in_order)):
        for cell in cells:
            if not (cell.is_start or cell.is_finish or cell.is_food or cell.is_wall):
                canvas[cell.row][cell.col] = mark
    return "\n".join("".join(row) for row in canvas)
