"""
Frontier policies for the shared search skeleton.

All four algorithms run the same loop in engine.run_leg; they differ only
in how the frontier orders cells and when a cell counts as visited:

    Algorithm   Frontier          Order                      Marks visited
    ---------   ---------------   ------------------------   -------------
    Dijkstra    DistanceFrontier  distance, then FIFO        on pop
    A*          AStarFrontier     f_score, heuristic, FIFO   on pop
    BFS         QueueFrontier     FIFO                       on push
    DFS         StackFrontier     LIFO, neighbors reversed   on push
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections import deque
from itertools import count

from gridpath.grid.cell import Cell


class Frontier(ABC):
    """
    Container of cells waiting to be expanded.

    Class attributes:
        marks_on_push: Cells are marked visited when pushed (BFS/DFS)
            instead of when popped (Dijkstra/A*)
        reverse_neighbors: Push neighbors in right, left, down, up order
        uses_heuristic: Heuristics must be assigned before the leg starts
        weighted: Relaxation uses cell costs rather than hop counts
    """

    marks_on_push: bool = False
    reverse_neighbors: bool = False
    uses_heuristic: bool = False
    weighted: bool = True

    @abstractmethod
    def push(self, cell: Cell) -> None:
        """Add a cell (or a cheaper entry for a cell already queued)."""
        ...

    @abstractmethod
    def pop(self) -> Cell:
        """Remove and return the next cell to expand."""
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"


class DistanceFrontier(Frontier):
    """
    Min-heap on distance for uniform-cost search.

    A relaxed cell is pushed again rather than decreased in place; the
    older entry surfaces after the cell is settled and is skipped then.
    """

    def __init__(self) -> None:
        self._heap: list[tuple] = []
        self._seq = count()

    def _key(self, cell: Cell) -> tuple:
        return (cell.distance,)

    def push(self, cell: Cell) -> None:
        heapq.heappush(self._heap, (*self._key(cell), next(self._seq), cell))

    def pop(self) -> Cell:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)


class AStarFrontier(DistanceFrontier):
    """Min-heap on f_score; ties go to the smaller heuristic (closer to target)."""

    uses_heuristic = True

    def _key(self, cell: Cell) -> tuple:
        return (cell.f_score, cell.heuristic)


class QueueFrontier(Frontier):
    """FIFO queue for breadth-first search."""

    marks_on_push = True
    weighted = False

    def __init__(self) -> None:
        self._queue: deque[Cell] = deque()

    def push(self, cell: Cell) -> None:
        self._queue.append(cell)

    def pop(self) -> Cell:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class StackFrontier(Frontier):
    """LIFO stack for depth-first search."""

    marks_on_push = True
    reverse_neighbors = True
    weighted = False

    def __init__(self) -> None:
        self._stack: list[Cell] = []

    def push(self, cell: Cell) -> None:
        self._stack.append(cell)

    def pop(self) -> Cell:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)
