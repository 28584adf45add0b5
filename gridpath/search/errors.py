"""
Exceptions raised by the search engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell, Position


class InvalidGrid(ValueError):
    """Malformed input: ragged rows, bad endpoints, or endpoints on walls."""


class LegUnreachable(RuntimeError):
    """
    One leg's target cannot be reached from its source.

    Not fatal to a multi-leg search: the engine stops and returns the legs
    completed so far, with this exception attached to the result.

    Attributes:
        source: Leg start position
        target: Leg target position
        leg_index: 0-indexed position of the leg in the route
        visited: Cells explored before the frontier ran dry
    """

    def __init__(
        self,
        source: Position,
        target: Position,
        leg_index: int = 0,
        visited: list[Cell] | None = None,
    ) -> None:
        self.source = source
        self.target = target
        self.leg_index = leg_index
        self.visited = visited or []
        super().__init__(
            f"No route from {tuple(source)} to {tuple(target)} "
            f"(leg {leg_index}, {len(self.visited)} cells explored)"
        )


class InternalInvariantViolation(RuntimeError):
    """Engine state is corrupted (e.g. a cyclic predecessor chain). Indicates a bug."""
