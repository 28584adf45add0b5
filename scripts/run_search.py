#!/usr/bin/env python3
"""
Grid search CLI - Run one algorithm on a text layout and print the result.

Usage:
    python scripts/run_search.py
    python scripts/run_search.py --algorithm astar
    python scripts/run_search.py --layout path/to/layout.txt --algorithm dijkstra
    python scripts/run_search.py --algorithm bfs --verbose

Layout format (one line per row):
    .  open cell        #  wall
    S  start            F  finish
    *  waypoint         2-9 weighted cell

Algorithms:
    dijkstra - Uniform-cost search (shortest weighted path)
    astar    - A* with Manhattan heuristic (shortest weighted path)
    bfs      - Breadth-first search (fewest steps, ignores weights)
    dfs      - Depth-first search (any path)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.config import DEFAULT_ALGORITHM, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from gridpath.grid import grid_from_text, render_result  # noqa: E402
from gridpath.search import Algorithm, InvalidGrid, get_algorithm, search  # noqa: E402

DEMO_LAYOUT = """
S.......#...........
........#...........
...*....#.....5.....
........#...........
........#######.....
....................
.....5..........F...
"""


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid pathfinding search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="Text layout file (default: built-in demo grid)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[a.value for a in Algorithm],
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    text = args.layout.read_text(encoding="utf-8") if args.layout else DEMO_LAYOUT
    try:
        grid, start, finish, waypoints = grid_from_text(text)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if start is None or finish is None:
        print("Error: layout needs one 'S' and one 'F'", file=sys.stderr)
        return 1

    algorithm = get_algorithm(args.algorithm)

    print("\n" + "=" * 60)
    print(f"  Algorithm: {algorithm.label}")
    print(f"             {algorithm.description}")
    print(f"  Grid:      {grid.rows}x{grid.cols}")
    print(f"  Start:     {tuple(start)}")
    print(f"  Finish:    {tuple(finish)}")
    print(f"  Waypoints: {[tuple(w) for w in waypoints] or 'none'}")
    print("=" * 60 + "\n")

    try:
        result = search(algorithm, grid, start, finish, waypoints)
    except InvalidGrid as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_result(grid, result))
    print()

    if result.is_complete:
        print(f"Reached finish: {len(result.path_in_order)} path cells, cost {result.total_cost}")
    else:
        print(f"No complete route. {result.failure}")
    summary = result.summary()
    print(f"Cells explored: {summary['visited']} (legs {summary['legs']})")

    return 0 if result.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
