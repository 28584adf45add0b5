#!/usr/bin/env python3
"""
Quick benchmark to compare the four algorithms on a few layouts.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from gridpath.benchmark import compare_algorithms, summarize
from gridpath.grid import grid_from_text

# Test cases: (name, layout)
TEST_CASES = [
    (
        "Open field",
        """
        S.........
        ..........
        ..........
        .........F
        """,
    ),
    (
        "Weighted detour",
        """
        ..........
        S...9....F
        ..........
        """,
    ),
    (
        "Corridor with waypoint",
        """
        S...#.....
        ....#..*..
        ....#.....
        .........F
        """,
    ),
    (
        "Sealed finish",
        """
        S.........
        ##########
        .........F
        """,
    ),
]


def run_benchmark():
    print("=" * 70)
    print("Grid Pathfinding - Algorithm Comparison")
    print("=" * 70)

    for i, (name, layout) in enumerate(TEST_CASES, 1):
        grid, start, finish, waypoints = grid_from_text(layout)
        print(f"\n[{i}/{len(TEST_CASES)}] {name} ({grid.rows}x{grid.cols}, {len(waypoints)} waypoints)")
        print("-" * 50)

        stats = compare_algorithms(grid, start, finish, waypoints)
        for s in stats:
            status = "DONE" if s.complete else "FAIL"
            print(
                f"  {s.algorithm:10} : {status} visited {s.visited:4} "
                f"path {s.path_len:3} cost {s.path_cost:3} ({s.elapsed_ms:.2f}ms)"
            )

        summary = summarize(stats)
        if summary["cheapest"]:
            print(f"  cheapest: {', '.join(summary['cheapest'])} (cost {summary['cheapest_cost']})")
        print(f"  fewest expansions: {summary['fewest_visited']}")


if __name__ == "__main__":
    run_benchmark()
