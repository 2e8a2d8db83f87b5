#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
控制台输出格式化
"""

from typing import Iterable, Optional

import numpy as np

from src.pathfinding.path_planner.map_model import Cell, GridMap, OBSTACLE


def format_cells(cells: Iterable[Cell]) -> str:
    """[(x, y), (x, y)]"""
    return "[" + ", ".join(str(c) for c in cells) + "]"


def format_occupancy(grid: GridMap) -> str:
    """逐行输出 0/1"""
    return "\n".join(" ".join(str(int(v)) for v in row) for row in grid.cells)


def render_ascii(
    grid: GridMap,
    path: Optional[Iterable[Cell]] = None,
    start: Optional[Cell] = None,
    goal: Optional[Cell] = None,
) -> str:
    """
    ASCII 可视化

    '#' = 障碍, '.' = 空地, '*' = 路径, 'S' = 起点, 'G' = 终点
    """
    vis = np.full((grid.rows, grid.cols), '.', dtype=str)
    vis[grid.cells == OBSTACLE] = '#'

    for cell in path or []:
        vis[cell.y, cell.x] = '*'
    if start is not None:
        vis[start.y, start.x] = 'S'
    if goal is not None:
        vis[goal.y, goal.x] = 'G'

    return "\n".join("".join(row) for row in vis)
