"""
Search engine: one shared loop for all four algorithms, plus routing
through waypoints.

A request start -> w1 -> ... -> wn -> finish is split into legs. Every leg
runs on the same working copy, so walls and weights carry over while
visited/distance state is reset per leg. If a leg cannot reach its target
the engine stops and returns what the earlier legs produced, followed by
the cells the failed leg explored.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from gridpath.grid.cell import Cell, Position
from gridpath.grid.model import Grid
from gridpath.search.algorithms import Algorithm, get_algorithm
from gridpath.search.errors import LegUnreachable
from gridpath.search.frontier import Frontier
from gridpath.search.result import LegResult, SearchResult
from gridpath.search.working import WorkingGrid, prepare_working_grid

logger = logging.getLogger(__name__)


def run_leg(
    grid: WorkingGrid,
    source: Cell,
    target: Cell,
    frontier: Frontier,
    leg_index: int = 0,
) -> LegResult:
    """
    Search from source to target on a working grid.

    Args:
        grid: Working copy; its transient state is overwritten
        source: Leg start (a cell of grid)
        target: Leg target (a cell of grid)
        frontier: Empty frontier deciding expansion order
        leg_index: Position of this leg in the route, for error reporting

    Returns:
        LegResult with the expansion trace and the source -> target path

    Raises:
        LegUnreachable: If the frontier empties before target is expanded
    """
    grid.reset_search_state()
    if frontier.uses_heuristic:
        grid.assign_heuristics(target)

    source.distance = 0
    source.f_score = source.heuristic
    if frontier.marks_on_push:
        source.is_visited = True
    frontier.push(source)

    visited: list[Cell] = []
    while frontier:
        cell = frontier.pop()
        if cell.is_wall:
            continue
        if not frontier.marks_on_push:
            if cell.is_visited:
                continue
            cell.is_visited = True
        visited.append(cell)

        if cell is target:
            return LegResult(
                source=source.position,
                target=target.position,
                visited=visited,
                path=grid.reconstruct_path(cell),
            )

        neighbors = grid.neighbors(cell)
        if frontier.reverse_neighbors:
            neighbors.reverse()
        here = grid.index(cell.position)

        for neighbor in neighbors:
            if neighbor.is_visited or neighbor.is_wall:
                continue
            if frontier.marks_on_push:
                neighbor.is_visited = True
                neighbor.distance = cell.distance + 1
                neighbor.previous = here
                frontier.push(neighbor)
                continue

            candidate = cell.distance + (neighbor.cost if frontier.weighted else 1)
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.f_score = candidate + neighbor.heuristic
                neighbor.previous = here
                frontier.push(neighbor)

    raise LegUnreachable(source.position, target.position, leg_index, visited)


def search(
    algorithm: str | Algorithm,
    grid: Grid,
    start: tuple[int, int],
    finish: tuple[int, int],
    waypoints: Sequence[tuple[int, int]] = (),
) -> SearchResult:
    """
    Find a route from start through each waypoint (in order) to finish.

    Args:
        algorithm: Algorithm or its name
        grid: Caller's grid; never modified
        start: Start position
        finish: Finish position
        waypoints: Positions to visit, in order, before the finish

    Returns:
        SearchResult whose cells belong to the caller's grid. If a leg is
        unreachable, the result holds the legs before it plus the failed
        leg's visited cells, and result.failure is set.

    Raises:
        InvalidGrid: If the grid or any position is malformed
        ValueError: If the algorithm name is unknown
    """
    algo = get_algorithm(algorithm)
    working = prepare_working_grid(grid, start, finish, waypoints)

    stops = [Position(*start), *(Position(*w) for w in waypoints), Position(*finish)]
    result = SearchResult(
        algorithm=algo.value,
        start=stops[0],
        finish=stops[-1],
        waypoints=stops[1:-1],
    )

    began = time.perf_counter()
    for leg_index, (source, target) in enumerate(zip(stops, stops[1:])):
        try:
            leg = run_leg(
                working,
                working.cell_at(source),
                working.cell_at(target),
                algo.frontier(),
                leg_index=leg_index,
            )
        except LegUnreachable as e:
            logger.warning(f"{algo.label}: {e}")
            e.visited = [grid.cells[c.row][c.col] for c in e.visited]
            result.visited_in_order.extend(e.visited)
            result.failure = e
            break

        logger.debug(
            f"{algo.label}: leg {leg_index} {tuple(source)} -> {tuple(target)} "
            f"visited {len(leg.visited)}, path {len(leg.path)} cells"
        )
        result.add_leg(_to_caller_cells(grid, leg))

    elapsed_ms = (time.perf_counter() - began) * 1000
    logger.info(
        f"{algo.label}: {len(result.visited_in_order)} visited, "
        f"{len(result.path_in_order)} path cells, cost {result.total_cost}, "
        f"{'complete' if result.is_complete else 'partial'} ({elapsed_ms:.1f}ms)"
    )
    return result


def _to_caller_cells(grid: Grid, leg: LegResult) -> LegResult:
    """Swap working-copy cells for the caller's cells at the same coordinates."""
    return LegResult(
        source=leg.source,
        target=leg.target,
        visited=[grid.cells[c.row][c.col] for c in leg.visited],
        path=[grid.cells[c.row][c.col] for c in leg.path],
    )
