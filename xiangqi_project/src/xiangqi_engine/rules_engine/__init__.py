"""
象棋规则引擎模块

包含棋盘坐标、棋子、走法生成、走法历史和棋盘状态。
"""

from .position import Pos, BOARD_ROWS, BOARD_COLS
from .piece import Color, Identity, Piece
from .piece_rules import generate_candidates, register_generator, get_generator
from .move import Move
from .history import History
from .chess_board import ChessBoard
from .board_validator import BoardValidator

__all__ = [
    'Pos', 'BOARD_ROWS', 'BOARD_COLS',
    'Color', 'Identity', 'Piece',
    'generate_candidates', 'register_generator', 'get_generator',
    'Move', 'History', 'ChessBoard', 'BoardValidator'
]
