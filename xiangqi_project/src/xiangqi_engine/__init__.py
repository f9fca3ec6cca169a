"""
中国象棋规则核心

可变棋盘、按棋子种类分派的走法生成，以及支持悔棋、重做和棋谱回放的走法历史。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Core Team"

from .rules_engine import ChessBoard, Move, History, Piece, Pos, Color, Identity, BoardValidator
from .config import ConfigManager, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, XiangqiError

__all__ = [
    "__version__", "__author__",
    "ChessBoard", "Move", "History", "Piece", "Pos", "Color", "Identity", "BoardValidator",
    "ConfigManager", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "XiangqiError"
]
