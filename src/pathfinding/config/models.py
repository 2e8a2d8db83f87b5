#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模型

使用Pydantic定义类型安全的配置模型，坐标统一为 (x, y)。
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator


class GridConfig(BaseModel):
    """栅格配置"""
    size: Tuple[int, int] = Field(..., description="栅格尺寸 (cols, rows)")

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        """验证尺寸"""
        cols, rows = v
        if cols <= 0 or rows <= 0:
            raise ValueError(f"栅格尺寸必须大于0: {v}")
        return v


class ObstacleConfig(BaseModel):
    """障碍配置"""
    fixed: List[Tuple[int, int]] = Field(default_factory=list, description="固定障碍坐标 (x, y)")
    random_count: int = Field(0, description="随机障碍数量")
    seed: Optional[int] = Field(None, description="随机种子，None 表示每次不同")

    @field_validator('random_count')
    @classmethod
    def validate_random_count(cls, v: int) -> int:
        """验证随机障碍数量"""
        if v < 0:
            raise ValueError(f"随机障碍数量不能为负: {v}")
        return v


class PlanConfig(BaseModel):
    """起点/终点配置"""
    start: Tuple[int, int] = Field(..., description="起点 (x, y)")
    goal: Tuple[int, int] = Field(..., description="终点 (x, y)")


class SearchConfig(BaseModel):
    """障碍移除搜索配置"""
    max_removal_size: Optional[int] = Field(
        None, description="最多移除的障碍数，None 表示不限（等于候选数）"
    )

    @field_validator('max_removal_size')
    @classmethod
    def validate_max_removal_size(cls, v: Optional[int]) -> Optional[int]:
        """验证上限"""
        if v is not None and v < 1:
            raise ValueError(f"最多移除的障碍数必须 >= 1: {v}")
        return v


class LogConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，None 表示只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        valid = {'TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL'}
        level = v.upper()
        if level not in valid:
            raise ValueError(f"日志级别无效: {v}，可选 {sorted(valid)}")
        return level


class PathfindingConfig(BaseModel):
    """寻路主配置"""
    grid: GridConfig = Field(..., description="栅格配置")
    obstacles: ObstacleConfig = Field(default_factory=ObstacleConfig, description="障碍配置")
    plan: PlanConfig = Field(..., description="起点/终点配置")
    search: SearchConfig = Field(default_factory=SearchConfig, description="搜索配置")
    log: LogConfig = Field(default_factory=LogConfig, description="日志配置")

    @model_validator(mode='after')
    def validate_layout(self) -> 'PathfindingConfig':
        """起点、终点、固定障碍必须在栅格范围内，且起点/终点不能是障碍"""
        cols, rows = self.grid.size

        def in_bounds(p: Tuple[int, int]) -> bool:
            return 0 <= p[0] < cols and 0 <= p[1] < rows

        for name, p in (('start', self.plan.start), ('goal', self.plan.goal)):
            if not in_bounds(p):
                raise ValueError(f"{name} 超出栅格范围: {p}, size={self.grid.size}")
        if self.plan.start == self.plan.goal:
            raise ValueError(f"起点和终点不能相同: {self.plan.start}")

        for p in self.obstacles.fixed:
            if not in_bounds(p):
                raise ValueError(f"固定障碍超出栅格范围: {p}, size={self.grid.size}")
            if p in (self.plan.start, self.plan.goal):
                raise ValueError(f"固定障碍不能位于起点或终点: {p}")

        free = cols * rows - len(set(self.obstacles.fixed)) - 2
        if self.obstacles.random_count > free:
            raise ValueError(
                f"随机障碍数量 {self.obstacles.random_count} 超过可用空格数 {free}"
            )
        return self
