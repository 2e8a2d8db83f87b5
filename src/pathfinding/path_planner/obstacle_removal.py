#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
障碍移除搜索

按组合大小 k = 1, 2, ... 依次穷举候选障碍的 k 元组合，临时移除后跑 BFS；
某一层只要有组合成功就返回该层路径最短的组合，不再进入 k+1。
搜索代价随 k 与候选数指数增长，仅适用于小规模栅格。
"""

from itertools import combinations
from typing import Callable, Iterable, List, Optional, Sequence

from loguru import logger

from src.pathfinding.path_planner.bfs_planner import find_path, path_length
from src.pathfinding.path_planner.map_model import Cell, GridMap, RemovalResult

StopCheck = Callable[[], bool]

FOUND = "found"
INFEASIBLE = "infeasible"
CANCELLED = "cancelled"


def normalize_candidates(grid: GridMap, candidates: Iterable[Cell]) -> List[Cell]:
    """
    去重并校验候选障碍

    Args:
        grid: 栅格地图
        candidates: 候选障碍列表

    Returns:
        去重后的候选列表（保留首次出现顺序）

    Raises:
        ValueError: 候选格越界或当前不是障碍
    """
    unique: List[Cell] = []
    seen = set()
    for cell in candidates:
        if cell in seen:
            continue
        if not grid.is_obstacle(cell):
            error_msg = f"候选格不是障碍或超出栅格范围: {cell}"
            logger.error(error_msg)
            raise ValueError(error_msg)
        seen.add(cell)
        unique.append(cell)
    return unique


def removal_at_size(
    grid: GridMap,
    start: Cell,
    end: Cell,
    candidates: Sequence[Cell],
    k: int,
    should_stop: Optional[StopCheck] = None,
) -> RemovalResult:
    """
    评估全部 k 元组合，返回路径最短的成功组合

    Args:
        grid: 栅格地图，评估期间被临时修改，返回前一定恢复
        start: 起点
        end: 终点
        candidates: 候选障碍，每个必须当前为障碍
        k: 组合大小
        should_stop: 可选的取消检查，只在两次组合评估之间调用

    Returns:
        RemovalResult，status 为 found / infeasible / cancelled，
        evaluated 为本层实际评估的组合数

    Raises:
        ValueError: 候选格越界或当前不是障碍（栅格不被修改）
    """
    best: Optional[RemovalResult] = None
    evaluated = 0

    for subset in combinations(candidates, k):
        if should_stop is not None and should_stop():
            logger.warning(f"[Removal] 搜索在 k={k} 被取消，已评估 {evaluated} 个组合")
            return RemovalResult(evaluated=evaluated, status=CANCELLED)

        with grid.patched(subset):
            path = find_path(grid, start, end)
        evaluated += 1

        # 严格小于：等长时保留先枚举到的组合
        if path is not None and (best is None or len(path) < len(best.path)):
            best = RemovalResult(obstacles=list(subset), path=path, status=FOUND)

    logger.debug(f"[Removal] k={k}: 评估组合数={evaluated}, 成功={best is not None}")
    if best is None:
        return RemovalResult(evaluated=evaluated, status=INFEASIBLE)
    best.evaluated = evaluated
    return best


def search_removal(
    grid: GridMap,
    start: Cell,
    end: Cell,
    candidates: Iterable[Cell],
    k: int = 1,
    max_size: Optional[int] = None,
    should_stop: Optional[StopCheck] = None,
) -> RemovalResult:
    """
    从 k 开始逐层搜索最小障碍移除集合

    Args:
        grid: 栅格地图，返回后与调用前完全一致
        start: 起点
        end: 终点
        candidates: 候选障碍（每个必须当前为障碍）
        k: 起始组合大小
        max_size: 组合大小上限，默认等于候选数
        should_stop: 可选的取消检查

    Returns:
        RemovalResult；k 超过候选数时直接返回 infeasible，evaluated 为 0

    Raises:
        ValueError: k < 1 或候选格无效
    """
    if k < 1:
        error_msg = f"组合大小必须 >= 1: k={k}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    pool = normalize_candidates(grid, candidates)
    limit = len(pool) if max_size is None else min(max_size, len(pool))
    if k > limit:
        logger.debug(f"[Removal] k={k} 超过候选数 {limit}，直接返回")
        return RemovalResult(status=INFEASIBLE)

    total_evaluated = 0
    for size in range(k, limit + 1):
        result = removal_at_size(grid, start, end, pool, size, should_stop)
        total_evaluated += result.evaluated
        result.evaluated = total_evaluated
        if result.status == FOUND:
            logger.info(
                f"[Removal] 找到最小移除集合: size={size}, "
                f"路径长度={path_length(result.path)}, 累计评估组合数={total_evaluated}"
            )
            return result
        if result.status == CANCELLED:
            return result

    logger.info(f"[Removal] 无可行移除方案: 候选数={len(pool)}, 累计评估组合数={total_evaluated}")
    return RemovalResult(evaluated=total_evaluated, status=INFEASIBLE)


def find_obstacles_to_remove(
    grid: GridMap,
    start: Cell,
    end: Cell,
    candidates: Iterable[Cell],
    k: int = 1,
) -> Optional[List[Cell]]:
    """只返回需要移除的障碍集合，不可行时返回 None"""
    result = search_removal(grid, start, end, candidates, k)
    if not result.ok:
        return None
    return result.obstacles
