# src/pathfinding/path_planner/path_planner_core.py
from typing import Iterable, Optional

from loguru import logger

from src.pathfinding.path_planner.bfs_planner import find_path, path_length
from src.pathfinding.path_planner.map_model import Cell, GridMap, PlanRequest, PlanResult
from src.pathfinding.path_planner.obstacle_removal import CANCELLED, StopCheck, search_removal


class PathPlanningCore:
    """纯路径规划器：先直接 BFS，失败后搜索最小障碍移除集合。"""

    def __init__(self, max_removal_size: Optional[int] = None) -> None:
        self._max_removal_size = max_removal_size

        # 统计计数器
        self._plan_count: int = 0
        self._direct_count: int = 0
        self._removal_count: int = 0
        self._fail_count: int = 0
        self._cancel_count: int = 0
        self._evaluated_total: int = 0

    def _check_endpoint(self, grid: GridMap, name: str, cell: Cell) -> None:
        if not grid.is_walkable(cell):
            error_msg = f"{name} 超出范围或位于障碍上: {cell}, grid=({grid.cols}, {grid.rows})"
            logger.error(error_msg)
            raise ValueError(error_msg)

    def plan(
        self,
        grid: GridMap,
        req: PlanRequest,
        candidates: Optional[Iterable[Cell]] = None,
        should_stop: Optional[StopCheck] = None,
    ) -> PlanResult:
        """
        在给定栅格上做一次规划，不修改调用方的栅格

        Args:
            grid: 栅格地图
            req: 起点/终点
            candidates: 可移除的候选障碍，默认使用栅格上的全部障碍
            should_stop: 可选的取消检查，只在障碍组合之间调用

        Returns:
            PlanResult，reason 为 "direct" / "removed" / "infeasible" / "cancelled"
        """
        start, goal = req.start, req.goal
        self._check_endpoint(grid, "start", start)
        self._check_endpoint(grid, "goal", goal)
        self._plan_count += 1

        # 1) 直接寻路
        path = find_path(grid, start, goal)
        if path is not None:
            self._direct_count += 1
            logger.info(f"直接找到路径: 长度={path_length(path)}")
            self._log_stats()
            return PlanResult(ok=True, path=path, reason="direct")

        # 2) 搜索最小移除集合
        logger.info("初始无路径，尝试搜索需要移除的障碍...")
        if candidates is None:
            candidates = grid.obstacles()
        removal = search_removal(
            grid, start, goal, candidates,
            max_size=self._max_removal_size,
            should_stop=should_stop,
        )
        self._evaluated_total += removal.evaluated

        if not removal.ok:
            if removal.status == CANCELLED:
                self._cancel_count += 1
            else:
                self._fail_count += 1
            self._log_stats()
            return PlanResult(ok=False, reason=removal.status, evaluated=removal.evaluated)

        # 3) 在移除后的副本上重新寻路
        final_path = find_path(grid.without(removal.obstacles), start, goal)
        if final_path is None:
            self._fail_count += 1
            logger.error(f"移除障碍后仍无路径: removed={[str(c) for c in removal.obstacles]}")
            self._log_stats()
            return PlanResult(ok=False, removed=removal.obstacles, reason="infeasible",
                              evaluated=removal.evaluated)

        self._removal_count += 1
        self._log_stats()
        return PlanResult(
            ok=True,
            path=final_path,
            removed=removal.obstacles,
            reason="removed",
            evaluated=removal.evaluated,
        )

    def _log_stats(self) -> None:
        logger.debug(
            f"规划统计: 总次数={self._plan_count}, 直接={self._direct_count}, "
            f"移除后成功={self._removal_count}, 失败={self._fail_count}, "
            f"取消={self._cancel_count}, 累计评估组合数={self._evaluated_total}"
        )

    @property
    def stats(self) -> dict:
        return {
            "plans": self._plan_count,
            "direct": self._direct_count,
            "removed": self._removal_count,
            "failed": self._fail_count,
            "cancelled": self._cancel_count,
            "evaluated": self._evaluated_total,
        }
