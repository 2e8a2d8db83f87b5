#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路主程序

构建带障碍的栅格，先尝试直接寻路；无路径时搜索需要移除的最少障碍，
移除后再次寻路并输出结果。
"""

import argparse
from pathlib import Path
from typing import List, Optional

from loguru import logger

from src.pathfinding.config.loader import load_config
from src.pathfinding.config.models import LogConfig, PathfindingConfig
from src.pathfinding.core.grid_builder import build_grid
from src.pathfinding.core.grid_render import format_cells, format_occupancy, render_ascii
from src.pathfinding.path_planner.map_model import Cell, PlanRequest
from src.pathfinding.path_planner.path_planner_core import PathPlanningCore
from src.pathfinding.utils.global_path import GetConfigPath
from src.pathfinding.utils.logger import SetupLogger


def run(cfg: PathfindingConfig) -> int:
    """
    执行一次完整的寻路流程

    Args:
        cfg: 寻路配置

    Returns:
        退出码：找到路径（直接或移除障碍后）为 0，否则为 1
    """
    grid, fixed, added = build_grid(cfg)
    start = Cell(*cfg.plan.start)
    goal = Cell(*cfg.plan.goal)

    print(f"Location of the {len(added)} randomly placed obstacles: \n{format_cells(added)}\n")
    print(format_occupancy(grid))

    core = PathPlanningCore(max_removal_size=cfg.search.max_removal_size)
    # 候选顺序：先固定障碍，再按放置顺序的随机障碍
    result = core.plan(grid, PlanRequest(start=start, goal=goal), candidates=fixed + added)

    if result.reason == "direct":
        print(f"Path found: {format_cells(result.path)}")
    else:
        print("No path found initially. Attempting to find obstacles to remove...")
        if result.ok:
            print(f"Obstacles to remove: {format_cells(result.removed)}")
            print(f"Path after removing obstacles: {format_cells(result.path)}")
        elif result.removed:
            print(f"Obstacles to remove: {format_cells(result.removed)}")
            print("Still no path found after removing obstacles.")
        else:
            print("No valid path could be created, even by removing obstacles.")

    if result.ok:
        print()
        print(render_ascii(grid.without(result.removed), result.path, start, goal))

    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="栅格 BFS 寻路，必要时搜索需要移除的最少障碍")
    parser.add_argument("--config", type=str, default=None, help="配置文件路径（默认 config/config.yaml）")
    parser.add_argument("--seed", type=int, default=None, help="随机种子（覆盖配置）")
    parser.add_argument("--obstacles", type=int, default=None, help="随机障碍数量（覆盖配置）")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别（覆盖配置）")
    args = parser.parse_args(argv)

    # 先按命令行级别输出到控制台，配置加载后再按配置重建日志
    bootstrap_log = LogConfig(level=args.log_level) if args.log_level else LogConfig()
    SetupLogger(None, bootstrap_log.level)

    config_path = Path(args.config) if args.config else GetConfigPath()
    cfg = load_config(config_path)

    # 命令行参数覆盖配置，重新走一遍校验
    if args.seed is not None or args.obstacles is not None or args.log_level is not None:
        data = cfg.model_dump()
        if args.seed is not None:
            data["obstacles"]["seed"] = args.seed
        if args.obstacles is not None:
            data["obstacles"]["random_count"] = args.obstacles
        if args.log_level is not None:
            data["log"]["level"] = args.log_level
        cfg = PathfindingConfig(**data)

    SetupLogger(cfg.log.log_dir, cfg.log.level)
    logger.debug(f"使用配置: {config_path}")

    return run(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
