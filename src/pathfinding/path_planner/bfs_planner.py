#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：逐层 BFS 求 8 邻域单位代价下的最短路径
"""

from typing import Dict, List, Optional, Set

from loguru import logger

from src.pathfinding.path_planner.map_model import Cell, GridMap, Path
from src.pathfinding.path_planner.neighbors import find_neighbors


def reconstruct_path(predecessors: Dict[Cell, Optional[Cell]], end: Cell) -> Path:
    """
    沿前驱表从终点回溯到起点（起点前驱为 None），再反转

    Args:
        predecessors: 前驱表
        end: 终点

    Returns:
        起点到终点的路径（含两端）
    """
    path: Path = []
    current: Optional[Cell] = end
    while current is not None:
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return path


def find_path(grid: GridMap, start: Cell, end: Cell) -> Optional[Path]:
    """
    逐层 BFS，首次发现终点即返回

    Args:
        grid: 栅格地图（0=可通行，1=障碍）
        start: 起点
        end: 终点

    Returns:
        最短路径；不可达时返回 None
    """
    if start == end:
        return [start]

    visited: Set[Cell] = {start}
    frontier: List[Cell] = [start]
    predecessors: Dict[Cell, Optional[Cell]] = {start: None}
    depth = 0

    while frontier:
        next_frontier: List[Cell] = []
        depth += 1
        for cell in frontier:
            for neighbor in find_neighbors(grid, cell):
                # visited 在入队时即标记，已覆盖"已在下一层队列中"的情况
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                next_frontier.append(neighbor)
                predecessors[neighbor] = cell

                if neighbor == end:
                    path = reconstruct_path(predecessors, end)
                    logger.debug(f"[BFS] 找到路径: depth={depth}, 探索节点数={len(visited)}")
                    return path
        frontier = next_frontier

    logger.debug(f"[BFS] 无法到达终点: start={start}, end={end}, 探索节点数={len(visited)}")
    return None


def path_length(path: Optional[Path]) -> Optional[int]:
    """路径边数；None 表示不可达"""
    if path is None:
        return None
    return len(path) - 1
