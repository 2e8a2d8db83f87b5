#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格构建与控制台输出
"""
