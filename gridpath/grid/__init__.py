"""
Grid module.

Provides the grid data model consumed by the search engine:
- Cell: One grid position with static flags and transient search state
- Position: (row, col) coordinate
- Grid: Rectangular snapshot of cells
- GridModel: Mutable owner applying wall/weight/waypoint edits
- Layout helpers: text and numpy array constructors and renderers
"""

from gridpath.grid.cell import Cell, Position, manhattan
from gridpath.grid.layout import (
    cost_array,
    grid_from_array,
    grid_from_text,
    render_grid,
    render_result,
)
from gridpath.grid.model import Grid, GridModel

__all__ = [
    "Cell",
    "Position",
    "manhattan",
    "Grid",
    "GridModel",
    "grid_from_text",
    "grid_from_array",
    "cost_array",
    "render_grid",
    "render_result",
]
