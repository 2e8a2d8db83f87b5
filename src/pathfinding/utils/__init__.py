#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块
提供日志初始化和路径管理
"""
