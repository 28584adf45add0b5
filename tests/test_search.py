"""
Tests for the four search algorithms and multi-leg routing.
"""

import math

import numpy as np
import pytest
from conftest import ALL_ALGORITHMS, is_connected, load

from gridpath.grid import Grid, grid_from_array
from gridpath.search import (
    Algorithm,
    InvalidGrid,
    LegUnreachable,
    get_algorithm,
    path_cost,
    search,
)


class TestAlgorithmSelection:
    """Test name resolution and frontier policies."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("dijkstra", Algorithm.DIJKSTRA),
            ("A*", Algorithm.ASTAR),
            ("astar", Algorithm.ASTAR),
            (" BFS ", Algorithm.BFS),
            ("depth-first", Algorithm.DFS),
            (Algorithm.DFS, Algorithm.DFS),
        ],
    )
    def test_get_algorithm(self, name, expected):
        assert get_algorithm(name) is expected

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            get_algorithm("greedy")

    def test_frontier_policies(self):
        """Only BFS/DFS mark on push, only DFS reverses, only A* uses a heuristic."""
        assert [a.frontier().marks_on_push for a in Algorithm] == [False, False, True, True]
        assert [a.frontier().reverse_neighbors for a in Algorithm] == [False, False, False, True]
        assert [a.frontier().uses_heuristic for a in Algorithm] == [False, True, False, False]

    def test_frontier_is_fresh_per_call(self):
        assert Algorithm.BFS.frontier() is not Algorithm.BFS.frontier()

    def test_labels(self):
        assert Algorithm.ASTAR.label == "A* Search"
        assert not Algorithm.DFS.guarantees_shortest

    def test_descriptions(self):
        assert "shortest path" in Algorithm.DIJKSTRA.description
        assert "heuristics" in Algorithm.ASTAR.description
        assert len({a.description for a in Algorithm}) == len(Algorithm)


class TestOpenGrid:
    """Scenarios on an empty 5x5 grid."""

    @pytest.mark.parametrize("algo", [Algorithm.DIJKSTRA, Algorithm.BFS, Algorithm.ASTAR])
    def test_corner_to_corner_length(self, open_grid, algo):
        """Shortest route from (0,0) to (4,4) has 8 steps, 9 cells."""
        result = search(algo, open_grid, (0, 0), (4, 4))
        assert result.is_complete
        assert len(result.path_in_order) == 9
        assert result.total_cost == 8
        assert result.path_positions[0] == (0, 0)
        assert result.path_positions[-1] == (4, 4)

    def test_dfs_path_is_connected(self, open_grid):
        result = search("dfs", open_grid, (0, 0), (4, 4))
        assert result.is_complete
        assert is_connected(result.path_positions)
        assert result.path_positions[0] == (0, 0)
        assert result.path_positions[-1] == (4, 4)

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_adjacent_endpoints(self, open_grid, algo):
        result = search(algo, open_grid, (0, 0), (0, 1))
        assert result.path_positions == [(0, 0), (0, 1)]

    def test_astar_expands_fewer_than_dijkstra(self, open_grid):
        dijkstra = search("dijkstra", open_grid, (0, 0), (4, 4))
        astar = search("astar", open_grid, (0, 0), (4, 4))
        assert len(astar.visited_in_order) < len(dijkstra.visited_in_order)


class TestTraceOrder:
    """Exact expansion order on a 3x3 open grid starting from the center."""

    def test_dijkstra_order(self):
        result = search("dijkstra", Grid.blank(3, 3), (1, 1), (2, 2))
        assert result.visited_positions == [
            (1, 1), (0, 1), (2, 1), (1, 0), (1, 2), (0, 0), (0, 2), (2, 0), (2, 2),
        ]
        assert result.path_positions == [(1, 1), (2, 1), (2, 2)]

    def test_astar_order(self):
        """Ties on f_score go to the smaller heuristic."""
        result = search("astar", Grid.blank(3, 3), (1, 1), (2, 2))
        assert result.visited_positions == [(1, 1), (2, 1), (2, 2)]
        assert result.path_positions == [(1, 1), (2, 1), (2, 2)]

    def test_bfs_order(self):
        result = search("bfs", Grid.blank(3, 3), (1, 1), (0, 0))
        assert result.visited_positions == [(1, 1), (0, 1), (2, 1), (1, 0), (1, 2), (0, 0)]
        assert result.path_positions == [(1, 1), (0, 1), (0, 0)]

    def test_dfs_order(self):
        """Neighbors are pushed right, left, down, up so 'up' is explored first."""
        result = search("dfs", Grid.blank(3, 3), (1, 1), (2, 2))
        assert result.visited_positions == [
            (1, 1), (0, 1), (0, 0), (0, 2), (2, 1), (2, 0), (2, 2),
        ]
        assert result.path_positions == [(1, 1), (2, 1), (2, 2)]


class TestWeights:
    """Weighted terrain handling."""

    @pytest.mark.parametrize("algo", [Algorithm.DIJKSTRA, Algorithm.ASTAR])
    def test_weighted_search_takes_detour(self, detour_layout, algo):
        grid, start, finish, _ = load(detour_layout)
        result = search(algo, grid, start, finish)
        assert result.total_cost == 6
        assert len(result.path_in_order) == 7
        assert (1, 2) not in result.path_positions

    def test_bfs_ignores_weight(self, detour_layout):
        grid, start, finish, _ = load(detour_layout)
        result = search("bfs", grid, start, finish)
        assert result.path_positions == [(1, 0), (1, 1), (1, 2), (1, 3), (1, 4)]
        assert result.total_cost == 8

    def test_path_cost_counts_entry_costs(self, detour_layout):
        grid, *_ = load(detour_layout)
        route = [grid.cell_at(p) for p in [(1, 0), (1, 1), (1, 2), (1, 3)]]
        assert path_cost(route) == 1 + 5 + 1
        assert path_cost(route[:1]) == 0
        assert path_cost([]) == 0


class TestUnreachable:
    """A wall row splitting the grid makes the finish unreachable."""

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_sealed_finish(self, sealed_layout, algo):
        grid, start, finish, _ = load(sealed_layout)
        result = search(algo, grid, start, finish)
        assert result.path_in_order == []
        assert not result.is_complete
        assert isinstance(result.failure, LegUnreachable)
        assert result.failure.leg_index == 0
        assert sorted(c.position for c in result.failure.visited) == [(0, c) for c in range(5)]

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_sealed_finish_reports_explored_cells(self, sealed_layout, algo):
        """The failed leg's exploration stays in the visited trace."""
        grid, start, finish, _ = load(sealed_layout)
        result = search(algo, grid, start, finish)
        assert result.visited_in_order == result.failure.visited
        assert sorted(result.visited_positions) == [(0, c) for c in range(5)]
        for cell in result.visited_in_order:
            assert grid.cells[cell.row][cell.col] is cell

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_partial_result_keeps_completed_legs(self, algo):
        grid, start, finish, waypoints = load(
            """
            S.*..
            #####
            ....F
            """
        )
        result = search(algo, grid, start, finish, waypoints)
        assert not result.is_complete
        assert len(result.legs) == 1
        assert result.path_positions == [(0, 0), (0, 1), (0, 2)]
        assert result.failure.leg_index == 1
        assert result.failure.source == (0, 2)
        assert result.failure.target == (2, 4)
        assert result.visited_in_order == result.legs[0].visited + result.failure.visited
        assert result.failure.visited

    def test_summary_of_partial_result(self, sealed_layout):
        grid, start, finish, _ = load(sealed_layout)
        summary = search("dijkstra", grid, start, finish).summary()
        assert summary == {
            "algorithm": "dijkstra",
            "visited": 5,
            "path_len": 0,
            "total_cost": 0,
            "legs": "0/1",
            "complete": False,
        }


class TestWaypoints:
    """Multi-leg routing."""

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_composition_matches_independent_legs(self, maze_layout, algo):
        grid, start, finish, waypoints = load(maze_layout)
        (waypoint,) = waypoints

        combined = search(algo, grid, start, finish, waypoints)
        first = search(algo, grid, start, waypoint)
        second = search(algo, grid, waypoint, finish)

        assert combined.is_complete
        assert combined.visited_in_order == first.visited_in_order + second.visited_in_order
        assert combined.path_in_order == first.path_in_order + second.path_in_order
        assert combined.total_cost == first.total_cost + second.total_cost

    def test_waypoint_appears_at_leg_boundary(self, maze_layout):
        grid, start, finish, waypoints = load(maze_layout)
        result = search("dijkstra", grid, start, finish, waypoints)
        first_leg = result.legs[0]
        boundary = len(first_leg.path)
        assert result.path_positions[boundary - 1] == waypoints[0]
        assert result.path_positions[boundary] == waypoints[0]

    def test_summary_counts_legs(self, maze_layout):
        grid, start, finish, waypoints = load(maze_layout)
        result = search("astar", grid, start, finish, waypoints)
        summary = result.summary()
        assert summary["legs"] == "2/2"
        assert summary["complete"]
        assert summary["total_cost"] == result.total_cost
        assert summary["path_len"] == len(result.path_in_order)

    def test_waypoint_on_start_is_trivial_leg(self, open_grid):
        result = search("bfs", open_grid, (0, 0), (0, 2), [(0, 0)])
        assert result.is_complete
        assert result.legs[0].path == [open_grid.cell_at((0, 0))]
        assert result.path_positions == [(0, 0), (0, 0), (0, 1), (0, 2)]


class TestInvariants:
    """Properties that hold for every algorithm."""

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_trace_has_no_walls_or_duplicates_per_leg(self, maze_layout, algo):
        grid, start, finish, waypoints = load(maze_layout)
        result = search(algo, grid, start, finish, waypoints)
        for leg in result.legs:
            positions = [c.position for c in leg.visited]
            assert len(positions) == len(set(positions))
            assert not any(c.is_wall for c in leg.visited)

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_deterministic(self, maze_layout, algo):
        grid, start, finish, waypoints = load(maze_layout)
        a = search(algo, grid, start, finish, waypoints)
        b = search(algo, grid, start, finish, waypoints)
        assert a.visited_positions == b.visited_positions
        assert a.path_positions == b.path_positions

    @pytest.mark.parametrize("algo", ALL_ALGORITHMS)
    def test_caller_grid_untouched(self, maze_layout, algo):
        grid, start, finish, waypoints = load(maze_layout)
        search(algo, grid, start, finish, waypoints)
        for cell in grid:
            assert not cell.is_visited
            assert cell.distance == math.inf
            assert cell.previous is None

    def test_result_cells_belong_to_caller_grid(self, open_grid):
        result = search("astar", open_grid, (0, 0), (2, 2))
        for cell in result.path_in_order + result.visited_in_order:
            assert open_grid.cells[cell.row][cell.col] is cell

    def test_invalid_input_raises(self, open_grid):
        with pytest.raises(InvalidGrid):
            search("bfs", open_grid, (0, 0), (0, 0))
        with pytest.raises(ValueError):
            search("nope", open_grid, (0, 0), (1, 1))


def _random_grid(seed: int, size: int = 12, weighted: bool = True) -> Grid:
    rng = np.random.default_rng(seed)
    choices = [-1, 1, 1, 1, 5] if weighted else [-1, 1, 1, 1]
    costs = rng.choice(choices, size=(size, size))
    costs[0, 0] = 1
    costs[-1, -1] = 1
    return grid_from_array(costs)


class TestRandomGrids:
    """Cross-check algorithms against each other on seeded random grids."""

    @pytest.mark.parametrize("seed", range(8))
    def test_astar_matches_dijkstra_cost(self, seed):
        grid = _random_grid(seed)
        dijkstra = search("dijkstra", grid, (0, 0), (11, 11))
        astar = search("astar", grid, (0, 0), (11, 11))
        assert dijkstra.is_complete == astar.is_complete
        assert dijkstra.total_cost == astar.total_cost

    @pytest.mark.parametrize("seed", range(8))
    def test_bfs_is_fewest_hops(self, seed):
        """On unit-cost grids, Dijkstra's cost equals the hop count."""
        grid = _random_grid(seed, weighted=False)
        dijkstra = search("dijkstra", grid, (0, 0), (11, 11))
        bfs = search("bfs", grid, (0, 0), (11, 11))
        assert len(bfs.path_in_order) == len(dijkstra.path_in_order)

    @pytest.mark.parametrize("seed", range(8))
    def test_dfs_finds_a_valid_route_when_one_exists(self, seed):
        grid = _random_grid(seed)
        dijkstra = search("dijkstra", grid, (0, 0), (11, 11))
        dfs = search("dfs", grid, (0, 0), (11, 11))
        assert dfs.is_complete == dijkstra.is_complete
        if dfs.is_complete:
            assert is_connected(dfs.path_positions)
            assert not any(c.is_wall for c in dfs.path_in_order)
            assert dfs.total_cost >= dijkstra.total_cost
