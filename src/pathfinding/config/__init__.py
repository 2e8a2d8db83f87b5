#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    PathfindingConfig,
    GridConfig,
    ObstacleConfig,
    PlanConfig,
    SearchConfig,
    LogConfig,
)
from .loader import load_config

__all__ = [
    'PathfindingConfig',
    'GridConfig',
    'ObstacleConfig',
    'PlanConfig',
    'SearchConfig',
    'LogConfig',
    'load_config'
]
