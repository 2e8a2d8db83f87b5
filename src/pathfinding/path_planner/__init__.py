#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块

BFS 最短路径与最小障碍移除搜索。
"""

from .map_model import Cell, GridMap, PlanRequest, PlanResult, RemovalResult
from .neighbors import DIRECTIONS, find_neighbors
from .bfs_planner import find_path
from .obstacle_removal import find_obstacles_to_remove, search_removal
from .path_planner_core import PathPlanningCore

__all__ = [
    'Cell',
    'GridMap',
    'PlanRequest',
    'PlanResult',
    'RemovalResult',
    'DIRECTIONS',
    'find_neighbors',
    'find_path',
    'find_obstacles_to_remove',
    'search_removal',
    'PathPlanningCore',
]
