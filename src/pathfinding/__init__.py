#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格寻路模块

BFS 最短路径，以及无路径时的最小障碍移除搜索。
"""

from .path_planner import (
    Cell,
    GridMap,
    PathPlanningCore,
    find_obstacles_to_remove,
    find_path,
)

__all__ = ['Cell', 'GridMap', 'PathPlanningCore', 'find_obstacles_to_remove', 'find_path']
