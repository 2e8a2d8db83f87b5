"""
Unit tests for the minimal obstacle-removal search.

Covers:
- minimality: the smallest removal size wins, never a larger one
- shortest-path preference within the winning size
- grid restoration after every call, including failures and cancellation
- precondition handling for k and candidate cells
"""

import numpy as np
import pytest

from src.pathfinding.path_planner import obstacle_removal
from src.pathfinding.path_planner.bfs_planner import find_path
from src.pathfinding.path_planner.map_model import Cell
from src.pathfinding.path_planner.obstacle_removal import (
    find_obstacles_to_remove,
    normalize_candidates,
    removal_at_size,
    search_removal,
)


@pytest.fixture
def thick_wall_grid(make_grid):
    """One removal opens a long detour, two removals open a short route."""
    return make_grid([
        "..##..",
        "..##..",
        "..##..",
        "..##..",
        "...#..",
    ])


class TestMinimality:

    def test_single_required_obstacle(self, make_grid):
        grid = make_grid([
            "..#.#",
            "..#..",
            "..#..",
            "..#..",
            "#.#..",
        ])
        candidates = [Cell(0, 4), Cell(4, 0), Cell(2, 3)]
        assert find_obstacles_to_remove(grid, Cell(0, 0), Cell(4, 4), candidates) == [Cell(2, 3)]

    def test_any_single_door_is_enough(self, single_door_grid):
        candidates = single_door_grid.obstacles()
        result = search_removal(single_door_grid, Cell(0, 2), Cell(4, 2), candidates)
        assert result.ok
        assert len(result.obstacles) == 1
        assert result.obstacles[0] in candidates
        assert len(result.path) - 1 == 4

    def test_two_walls_need_two(self, double_wall_grid):
        result = search_removal(double_wall_grid, Cell(0, 1), Cell(6, 1), double_wall_grid.obstacles())
        assert result.ok
        assert sorted(c.x for c in result.obstacles) == [1, 5]

    def test_smaller_size_beats_shorter_path(self, thick_wall_grid):
        result = search_removal(thick_wall_grid, Cell(0, 0), Cell(5, 0), thick_wall_grid.obstacles())
        assert result.ok
        assert result.obstacles == [Cell(3, 3)]
        assert len(result.path) - 1 == 8

    def test_shortest_path_wins_within_size(self, full_wall_grid):
        # (2, 1) opens a 4-step route, (1, 1) a 2-step one
        result = search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(2, 1), Cell(1, 1)])
        assert result.obstacles == [Cell(1, 1)]
        assert result.path == [Cell(0, 0), Cell(1, 1), Cell(0, 2)]

    def test_tie_keeps_first_enumerated(self, full_wall_grid):
        result = search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(0, 1), Cell(1, 1)])
        assert result.obstacles == [Cell(0, 1)]

    def test_result_path_is_valid_after_removal(self, double_wall_grid):
        start, goal = Cell(0, 0), Cell(6, 2)
        result = search_removal(double_wall_grid, start, goal, double_wall_grid.obstacles())
        cleared = double_wall_grid.without(result.obstacles)
        assert find_path(cleared, start, goal) == result.path


class TestInfeasible:

    def test_no_candidates(self, full_wall_grid):
        assert find_obstacles_to_remove(full_wall_grid, Cell(0, 0), Cell(0, 2), []) is None

    def test_candidates_that_never_help(self, make_grid):
        grid = make_grid([".#.#."])
        assert find_obstacles_to_remove(grid, Cell(0, 0), Cell(4, 0), [Cell(1, 0)]) is None

    def test_max_size_caps_search(self, double_wall_grid):
        result = search_removal(
            double_wall_grid, Cell(0, 1), Cell(6, 1), double_wall_grid.obstacles(), max_size=1
        )
        assert result.status == "infeasible"

    def test_removal_at_size_reports_status(self, double_wall_grid):
        pool = double_wall_grid.obstacles()
        assert removal_at_size(double_wall_grid, Cell(0, 1), Cell(6, 1), pool, 1).status == "infeasible"
        assert removal_at_size(double_wall_grid, Cell(0, 1), Cell(6, 1), pool, 2).status == "found"


class TestGridRestoration:

    def test_restored_after_success(self, double_wall_grid):
        before = double_wall_grid.cells.copy()
        search_removal(double_wall_grid, Cell(0, 1), Cell(6, 1), double_wall_grid.obstacles())
        assert np.array_equal(double_wall_grid.cells, before)

    def test_restored_after_failure(self, make_grid):
        grid = make_grid([".#.#."])
        before = grid.cells.copy()
        find_obstacles_to_remove(grid, Cell(0, 0), Cell(4, 0), [Cell(1, 0)])
        assert np.array_equal(grid.cells, before)

    def test_restored_when_path_search_raises(self, single_door_grid, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(obstacle_removal, "find_path", broken)
        before = single_door_grid.cells.copy()
        with pytest.raises(RuntimeError):
            search_removal(single_door_grid, Cell(0, 2), Cell(4, 2), single_door_grid.obstacles())
        assert np.array_equal(single_door_grid.cells, before)

    def test_cancellation_between_subsets(self, double_wall_grid):
        calls = []

        def should_stop():
            calls.append(1)
            return len(calls) > 2

        before = double_wall_grid.cells.copy()
        result = search_removal(
            double_wall_grid, Cell(0, 1), Cell(6, 1), double_wall_grid.obstacles(),
            should_stop=should_stop,
        )
        assert result.status == "cancelled"
        assert not result.ok
        assert result.obstacles == []
        assert result.evaluated == 2
        assert len(calls) == 3
        assert np.array_equal(double_wall_grid.cells, before)


class TestPreconditions:

    def test_k_above_candidate_count_skips_search(self, full_wall_grid, monkeypatch):
        def unexpected(*args, **kwargs):
            raise AssertionError("path search should not run")

        monkeypatch.setattr(obstacle_removal, "find_path", unexpected)
        assert find_obstacles_to_remove(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(1, 1)], k=2) is None

    def test_k_below_one_rejected(self, full_wall_grid):
        with pytest.raises(ValueError):
            search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(1, 1)], k=0)

    def test_starting_at_larger_k(self, full_wall_grid):
        result = search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), full_wall_grid.obstacles(), k=2)
        assert len(result.obstacles) == 2

    def test_walkable_candidate_rejected(self, full_wall_grid):
        before = full_wall_grid.cells.copy()
        with pytest.raises(ValueError):
            search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(1, 1), Cell(0, 0)])
        assert np.array_equal(full_wall_grid.cells, before)

    def test_out_of_bounds_candidate_rejected(self, full_wall_grid):
        with pytest.raises(ValueError):
            normalize_candidates(full_wall_grid, [Cell(9, 9)])

    def test_duplicates_collapsed(self, full_wall_grid):
        assert normalize_candidates(full_wall_grid, [Cell(1, 1), Cell(0, 1), Cell(1, 1)]) == [
            Cell(1, 1),
            Cell(0, 1),
        ]
        # only one distinct candidate, so a 2-subset cannot exist
        assert search_removal(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(1, 1), Cell(1, 1)], k=2).ok is False

    def test_evaluated_count_accumulates(self, double_wall_grid):
        pool = double_wall_grid.obstacles()
        result = search_removal(double_wall_grid, Cell(0, 1), Cell(6, 1), pool)
        # all 6 singletons fail, then all 15 pairs are evaluated
        assert result.evaluated == 6 + 15

    def test_infeasible_reports_evaluated(self, make_grid):
        grid = make_grid([".#.#."])
        result = search_removal(grid, Cell(0, 0), Cell(4, 0), [Cell(1, 0)])
        assert result.status == "infeasible"
        assert result.evaluated == 1

    def test_removal_at_size_rejects_walkable_candidate(self, full_wall_grid):
        # (2, 2) is walkable; patching it must not turn it into an obstacle
        before = full_wall_grid.cells.copy()
        with pytest.raises(ValueError):
            removal_at_size(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(1, 1), Cell(2, 2)], 1)
        assert np.array_equal(full_wall_grid.cells, before)

    def test_removal_at_size_rejects_out_of_bounds_candidate(self, full_wall_grid):
        before = full_wall_grid.cells.copy()
        with pytest.raises(ValueError):
            removal_at_size(full_wall_grid, Cell(0, 0), Cell(0, 2), [Cell(-1, 1)], 1)
        assert np.array_equal(full_wall_grid.cells, before)
