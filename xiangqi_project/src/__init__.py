"""
象棋规则核心源代码模块

- xiangqi_engine: 棋盘、棋子、走法历史
"""

from . import xiangqi_engine

__all__ = ["xiangqi_engine"]
