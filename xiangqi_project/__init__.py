"""
中国象棋规则核心 (Xiangqi Core)

象棋棋盘状态、走法生成接口和可逆走法历史。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Core Team"
__description__ = "中国象棋规则核心 - 棋盘状态、走法生成与可逆走法历史"

from xiangqi_project.src import xiangqi_engine

__all__ = [
    "xiangqi_engine",
    "__version__",
    "__author__",
    "__description__",
]
