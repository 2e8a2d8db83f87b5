"""
Pytest configuration and fixtures for grid pathfinding tests.

Fixtures provide common grids:
- open grids with no obstacles
- walled grids with and without gaps
- a small config file on disk
"""

import sys
from pathlib import Path
from typing import List

import numpy as np
import pytest

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.pathfinding.path_planner.map_model import GridMap  # noqa: E402


def grid_from_rows(rows: List[str]) -> GridMap:
    """Build a grid from strings, '#' = obstacle, anything else = walkable."""
    return GridMap(np.array([[1 if ch == "#" else 0 for ch in row] for row in rows], dtype=np.uint8))


# =============================================================================
# Grid Fixtures
# =============================================================================

@pytest.fixture
def make_grid():
    """Factory fixture wrapping grid_from_rows."""
    return grid_from_rows


@pytest.fixture
def open_grid():
    """3x3 grid with no obstacles."""
    return GridMap.empty(3, 3)


@pytest.fixture
def full_wall_grid():
    """3x3 grid with row y=1 fully blocked."""
    return grid_from_rows([
        "...",
        "###",
        "...",
    ])


@pytest.fixture
def single_door_grid():
    """5x5 grid, column x=2 is a wall; only (2, 2) opens it up."""
    return grid_from_rows([
        "..#..",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ])


@pytest.fixture
def double_wall_grid():
    """7x3 grid with two full walls, so at least two removals are needed."""
    return grid_from_rows([
        ".#...#.",
        ".#...#.",
        ".#...#.",
    ])


@pytest.fixture
def maze_grid():
    """Small maze with a single winding corridor."""
    return grid_from_rows([
        "......",
        "#####.",
        "......",
        ".#####",
        "......",
    ])


@pytest.fixture
def config_file(tmp_path):
    """Minimal valid YAML config."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  size: [10, 10]\n"
        "obstacles:\n"
        "  fixed: [[7, 7], [7, 8], [8, 7], [9, 7]]\n"
        "  random_count: 20\n"
        "  seed: 42\n"
        "plan:\n"
        "  start: [0, 0]\n"
        "  goal: [9, 9]\n",
        encoding="utf-8",
    )
    return path
