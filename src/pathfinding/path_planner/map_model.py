#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格地图数据模型

Cell 只表示坐标，GridMap 封装 0/1 栅格（0=可通行，1=障碍），
其余为规划请求/结果的数据类。
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

import numpy as np

WALKABLE = 0
OBSTACLE = 1


@dataclass(frozen=True, order=True)
class Cell:
    """栅格坐标：x=列，y=行"""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Path = List[Cell]


class GridMap:
    """
    固定尺寸的 0/1 栅格地图

    尺寸在构造后不再改变；只允许通过 patched() 做可回滚的临时修改。

    示例:
        ```python
        grid = GridMap(np.zeros((10, 10), dtype=np.uint8))
        with grid.patched([Cell(3, 4)]):
            ...
        ```
    """

    def __init__(self, cells: np.ndarray):
        """
        Args:
            cells: 形状为 (rows, cols) 的二维数组，取值只能是 0 或 1

        Raises:
            ValueError: 数组维度或取值无效
        """
        arr = np.asarray(cells)
        if arr.ndim != 2 or arr.size == 0:
            raise ValueError(f"栅格必须是非空二维数组: shape={arr.shape}")
        if not np.isin(arr, (WALKABLE, OBSTACLE)).all():
            raise ValueError("栅格取值只能是 0（可通行）或 1（障碍）")
        self.cells_ = arr.astype(np.uint8, copy=True)

    @classmethod
    def empty(cls, cols: int, rows: int) -> "GridMap":
        if cols <= 0 or rows <= 0:
            raise ValueError(f"栅格尺寸必须大于0: cols={cols}, rows={rows}")
        return cls(np.zeros((rows, cols), dtype=np.uint8))

    @property
    def cells(self) -> np.ndarray:
        """只读视图"""
        view = self.cells_.view()
        view.flags.writeable = False
        return view

    @property
    def rows(self) -> int:
        return self.cells_.shape[0]

    @property
    def cols(self) -> int:
        return self.cells_.shape[1]

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.cols and 0 <= cell.y < self.rows

    def is_walkable(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        return bool(self.cells_[cell.y, cell.x] == WALKABLE)

    def is_obstacle(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        return bool(self.cells_[cell.y, cell.x] == OBSTACLE)

    def set_obstacle(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"坐标超出栅格范围: {cell}")
        self.cells_[cell.y, cell.x] = OBSTACLE

    def obstacles(self) -> List[Cell]:
        """按行优先顺序返回全部障碍格"""
        ys, xs = np.nonzero(self.cells_ == OBSTACLE)
        return [Cell(int(x), int(y)) for y, x in zip(ys, xs)]

    def copy(self) -> "GridMap":
        return GridMap(self.cells_)

    def _require_obstacles(self, cells: List[Cell]) -> None:
        for cell in cells:
            if not self.is_obstacle(cell):
                raise ValueError(f"格子不是障碍或超出栅格范围: {cell}")

    def without(self, cells: Iterable[Cell]) -> "GridMap":
        """
        返回清除了给定障碍的副本，自身不变

        Raises:
            ValueError: 某个格子越界或当前不是障碍
        """
        cells = list(cells)
        self._require_obstacles(cells)
        clone = self.copy()
        for cell in cells:
            clone.cells_[cell.y, cell.x] = WALKABLE
        return clone

    @contextmanager
    def patched(self, cells: Iterable[Cell]) -> Iterator["GridMap"]:
        """
        临时把给定格子设为可通行，退出时无条件恢复为障碍

        Args:
            cells: 要临时移除的障碍格（必须当前为障碍）

        Raises:
            ValueError: 某个格子越界或当前不是障碍，此时栅格不做任何修改
        """
        cells = list(cells)
        self._require_obstacles(cells)
        for cell in cells:
            self.cells_[cell.y, cell.x] = WALKABLE
        try:
            yield self
        finally:
            for cell in cells:
                self.cells_[cell.y, cell.x] = OBSTACLE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridMap):
            return NotImplemented
        return np.array_equal(self.cells_, other.cells_)

    def __repr__(self) -> str:
        return f"GridMap(rows={self.rows}, cols={self.cols}, obstacles={int(self.cells_.sum())})"


@dataclass
class PlanRequest:
    start: Cell
    goal: Cell


@dataclass
class RemovalResult:
    """
    障碍移除搜索结果

    status: "found" 找到移除方案 / "infeasible" 无可行方案 / "cancelled" 被取消
    """
    obstacles: List[Cell] = field(default_factory=list)   # 需要移除的障碍
    path: Path = field(default_factory=list)              # 移除后的最短路径
    evaluated: int = 0                                    # 评估过的组合数
    status: str = "infeasible"

    @property
    def ok(self) -> bool:
        return self.status == "found"


@dataclass
class PlanResult:
    ok: bool
    path: Path = field(default_factory=list)
    removed: List[Cell] = field(default_factory=list)
    reason: str = ""
    evaluated: int = 0
