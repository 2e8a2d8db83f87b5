#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
邻居枚举：8 方向移动（4 正交 + 4 对角），统一单位代价
"""

from typing import List, Tuple

from src.pathfinding.path_planner.map_model import Cell, GridMap

# 顺序固定，BFS 在等长路径间的选择依赖此顺序
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 1),    # 右下
    (0, 1),    # 下
    (1, 0),    # 右
    (-1, 1),   # 左下
    (1, -1),   # 右上
    (-1, 0),   # 左
    (0, -1),   # 上
    (-1, -1),  # 左上
)


def is_walkable(grid: GridMap, cell: Cell) -> bool:
    """在栅格范围内且不是障碍"""
    return grid.is_walkable(cell)


def find_neighbors(grid: GridMap, cell: Cell) -> List[Cell]:
    """
    返回一步可达的全部可通行邻居

    Args:
        grid: 栅格地图
        cell: 当前格

    Returns:
        按 DIRECTIONS 顺序排列的邻居列表
    """
    neighbors = []
    for dx, dy in DIRECTIONS:
        neighbor = cell.offset(dx, dy)
        if is_walkable(grid, neighbor):
            neighbors.append(neighbor)
    return neighbors
