#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格构建模块

负责空栅格初始化、固定障碍与随机障碍的放置。
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np
from loguru import logger

from src.pathfinding.config.models import PathfindingConfig
from src.pathfinding.path_planner.map_model import Cell, GridMap


def empty_grid(cols: int, rows: int) -> GridMap:
    """全部可通行的栅格"""
    return GridMap.empty(cols, rows)


def place_obstacles(grid: GridMap, cells: Iterable[Cell]) -> List[Cell]:
    """
    放置固定障碍

    Args:
        grid: 栅格地图（原地修改）
        cells: 障碍坐标

    Returns:
        实际放置的障碍列表
    """
    placed = []
    for cell in cells:
        grid.set_obstacle(cell)
        placed.append(cell)
    return placed


def populate_random_obstacles(
    grid: GridMap,
    count: int,
    start: Cell,
    goal: Cell,
    rng: Optional[np.random.Generator] = None,
) -> List[Cell]:
    """
    在不同的空格上随机放置 count 个障碍，避开起点和终点

    Args:
        grid: 栅格地图（原地修改）
        count: 障碍数量
        start: 起点
        goal: 终点
        rng: 随机数生成器

    Returns:
        按放置顺序排列的障碍列表

    Raises:
        ValueError: 可用空格不足
    """
    if rng is None:
        rng = np.random.default_rng()

    free = [
        Cell(x, y)
        for y in range(grid.rows)
        for x in range(grid.cols)
        if grid.is_walkable(Cell(x, y)) and Cell(x, y) not in (start, goal)
    ]
    if count > len(free):
        error_msg = f"可用空格不足: 需要 {count} 个，只有 {len(free)} 个"
        logger.error(error_msg)
        raise ValueError(error_msg)

    added = []
    while len(added) < count:
        x = int(rng.integers(grid.cols))
        y = int(rng.integers(grid.rows))
        cell = Cell(x, y)
        # 已是障碍或是起点/终点则重新抽取
        if not grid.is_walkable(cell) or cell in (start, goal):
            continue
        grid.set_obstacle(cell)
        added.append(cell)

    logger.debug(f"随机放置障碍 {len(added)} 个")
    return added


def build_grid(
    cfg: PathfindingConfig,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[GridMap, List[Cell], List[Cell]]:
    """
    按配置构建栅格

    Returns:
        (grid, 固定障碍, 随机障碍)
    """
    if rng is None:
        rng = np.random.default_rng(cfg.obstacles.seed)

    cols, rows = cfg.grid.size
    start = Cell(*cfg.plan.start)
    goal = Cell(*cfg.plan.goal)

    grid = empty_grid(cols, rows)
    fixed = place_obstacles(grid, (Cell(x, y) for x, y in cfg.obstacles.fixed))
    added = populate_random_obstacles(grid, cfg.obstacles.random_count, start, goal, rng)

    logger.info(
        f"栅格构建完成: size=({cols}, {rows}), 固定障碍={len(fixed)}, 随机障碍={len(added)}"
    )
    return grid, fixed, added
