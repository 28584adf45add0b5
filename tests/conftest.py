"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from gridpath.grid import Grid, Position, grid_from_text
from gridpath.search import Algorithm

ALL_ALGORITHMS = list(Algorithm)


def load(layout: str) -> tuple[Grid, Position, Position, list[Position]]:
    """Parse a text layout (thin alias so tests read naturally)."""
    return grid_from_text(layout)


def is_connected(positions: Sequence[tuple[int, int]]) -> bool:
    """Whether each consecutive pair of positions are 4-neighbors."""
    return all(
        abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(positions, positions[1:])
    )


@pytest.fixture
def open_grid() -> Grid:
    """Return an empty 5x5 grid."""
    return Grid.blank(5, 5)


@pytest.fixture
def detour_layout() -> str:
    """
    A weight of 5 on the only straight route.

    Straight: 4 steps costing 1 + 5 + 1 + 1 = 8.
    Detour through row 0 or 2: 6 steps costing 6.
    """
    return """
        .....
        S.5.F
        .....
    """


@pytest.fixture
def sealed_layout() -> str:
    """Return a layout where a full wall row separates start and finish."""
    return """
        S....
        #####
        ....F
    """


@pytest.fixture
def maze_layout() -> str:
    """Return a small maze with weights and one waypoint."""
    return """
        S..#......
        .#.#.##.#.
        .#...#..#.
        .####.3.#.
        ...*..#...
        .#.####.#.
        .#..2...#F
    """
