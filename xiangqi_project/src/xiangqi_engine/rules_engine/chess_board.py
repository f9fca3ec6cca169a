"""
象棋棋盘数据结构

维护棋盘格子、当前走子方和走法历史，提供走子、悔棋、重做和棋谱回放。
"""

import copy
import hashlib
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .history import History
from .move import Move
from .piece import Color, Identity, Piece
from .position import BOARD_COLS, BOARD_ROWS, Pos
from ..utils.exceptions import GameStateError
from ..utils.logger import LoggerMixin


# 棋谱文本开头的先手标记
FIRST_PLAYER_MARKS = {'r': Color.RED, 'b': Color.BLACK}


class ChessBoard(LoggerMixin):
    """
    象棋棋盘类

    10x9 的格子矩阵，每格至多一个棋子。棋盘是棋子位置的唯一来源：
    格子上的棋子其 pos 始终等于该格坐标。
    被吃的棋子只是离开棋盘，悔棋时可放回。
    """

    # 初始局面四个象限对称，只需给出黑方左半边，其余由镜像得到
    INIT_LAYOUT: Dict[Pos, Identity] = {
        Pos(0, 0): Identity.CAR,
        Pos(0, 1): Identity.HORSE,
        Pos(0, 2): Identity.ELEPHANT,
        Pos(0, 3): Identity.GUARD,
        Pos(0, 4): Identity.KING,
        Pos(2, 1): Identity.CANNON,
        Pos(3, 0): Identity.PAWN,
        Pos(3, 2): Identity.PAWN,
        Pos(3, 4): Identity.PAWN,
    }

    def __init__(self, encoded: Optional[str] = None, first_player: Color = Color.RED,
                 generators: Optional[Dict[Identity, Any]] = None):
        """
        初始化棋盘

        Args:
            encoded: serialize 产生的棋谱文本，为None时创建初始局面。
                文本以先手标记 "r"/"b" 开头时，以该标记为准
            first_player: 先手方（棋谱文本没有先手标记时使用）
            generators: 只对本棋盘生效的走法生成器，按棋子种类覆盖全局表
        """
        first_player, moves_text = self._split_header(encoded or "", first_player)

        self.matrix: List[List[Optional[Piece]]] = []
        self.history: History[Move] = History()
        self.current_player = first_player
        self.first_player = first_player
        self.generators: Dict[Identity, Any] = dict(generators or {})

        self._apply_initial_layout()

        if moves_text:
            # 在独立的历史对象中解析，不影响当前局面
            self._replay(History.deserialize(moves_text, Move))

    @staticmethod
    def _split_header(encoded: str, default: Color) -> Tuple[Color, str]:
        """拆分先手标记和走法文本"""
        tokens = encoded.split()
        if tokens and tokens[0] in FIRST_PLAYER_MARKS:
            return FIRST_PLAYER_MARKS[tokens[0]], " ".join(tokens[1:])
        return default, " ".join(tokens)

    @classmethod
    def from_serialized(cls, encoded: str, first_player: Color = Color.RED) -> 'ChessBoard':
        """
        从棋谱文本重建棋盘

        从初始局面出发逐步回放每一步走法，与实战走子使用同一个落子操作。
        """
        return cls(encoded=encoded, first_player=first_player)

    @classmethod
    def from_config(cls, game_config, encoded: Optional[str] = None) -> 'ChessBoard':
        """
        根据对局配置创建棋盘

        Args:
            game_config: GameConfig 对象
            encoded: 可选的棋谱文本

        Returns:
            ChessBoard: 棋盘对象
        """
        board = cls(encoded=encoded, first_player=Color.from_name(game_config.first_player))
        if encoded and game_config.validate_on_load:
            is_valid, errors = board.validate_board_state()
            if not is_valid:
                raise GameStateError("棋谱回放后的局面不合法", "; ".join(errors))
        return board

    def _apply_initial_layout(self):
        """摆放初始局面"""
        self.matrix = [[None] * BOARD_COLS for _ in range(BOARD_ROWS)]

        for pos, identity in self.INIT_LAYOUT.items():
            black_piece = identity.spawn(Color.BLACK)
            red_piece = identity.spawn(Color.RED)
            red_pos = pos.invert_row()

            self.set(pos, black_piece)
            self.set(red_pos, red_piece)

            # 位于中线上的棋子（将、中卒）镜像后是同一格
            if pos.invert_col() != pos:
                self.set(pos.invert_col(), black_piece.copy())
                self.set(red_pos.invert_col(), red_piece.copy())

    def _replay(self, history: History[Move]):
        """在当前局面上依次回放历史走法"""
        for index, mv in enumerate(history):
            if self.get(mv.origin) is None:
                self.log_error(f"回放第{index + 1}步失败: {mv}")
                raise GameStateError(f"第{index + 1}步 {mv}", "起点没有棋子")

            occupant = self.get(mv.dest)
            expected = mv.captured.symbol if mv.captured is not None else None
            actual = occupant.symbol if occupant is not None else None
            if expected != actual:
                self.log_error(f"回放第{index + 1}步失败: {mv}")
                raise GameStateError(f"第{index + 1}步 {mv}",
                                     f"记录的被吃棋子为 {expected}, 实际为 {actual}")

            self.make_move(mv)

        self.log_debug(f"回放完成，共 {len(history)} 步")

    # ==================== 走子操作 ====================

    def move(self, origin: Pos, dest: Pos, record_history: bool = True) -> Optional[Piece]:
        """
        执行走子

        不检查走法是否合法，调用方应只提交 available_moves 给出的落点。
        起点没有棋子（或坐标越界）时不做任何操作。

        Args:
            origin: 要移动的棋子所在位置
            dest: 目标位置
            record_history: 是否记录到历史

        Returns:
            Optional[Piece]: 被吃掉的棋子（如果有）
        """
        piece = self.get(origin)
        if piece is None or not dest.is_valid():
            self.log_debug(f"忽略走子 {origin} -> {dest}: 起点无子或终点越界")
            return None

        self.set(origin, None)
        captured = self.get(dest)
        self.set(dest, piece)
        self.current_player = self.current_player.next()

        if record_history:
            self.history.push(Move(origin, dest, captured))

        return captured

    def make_move(self, move: Move, record_history: bool = True) -> Optional[Piece]:
        """
        按走法记录走子

        Args:
            move: 走法记录，只使用其起点和终点
            record_history: 是否记录到历史

        Returns:
            Optional[Piece]: 被吃掉的棋子（如果有）
        """
        return self.move(move.origin, move.dest, record_history)

    def redo(self) -> Optional[Move]:
        """
        重做上一步被撤销的走法

        Returns:
            Optional[Move]: 被重做的走法，没有可重做的走法时返回None
        """
        mv = self.history.restore()
        if mv is not None:
            self.move(mv.origin, mv.dest, record_history=False)
        return mv

    def undo(self) -> Optional[Move]:
        """
        撤销上一步走法

        Returns:
            Optional[Move]: 被撤销的走法，没有可撤销的走法时返回None
        """
        mv = self.history.revert()
        if mv is not None:
            self.move(mv.dest, mv.origin, record_history=False)

            # 把被吃的棋子放回原位
            self.set(mv.dest, mv.captured)
        return mv

    @property
    def can_undo(self) -> bool:
        return self.history.can_revert

    @property
    def can_redo(self) -> bool:
        return self.history.can_restore

    @property
    def move_count(self) -> int:
        return len(self.history)

    # ==================== 格子访问 ====================

    def set(self, pos: Pos, piece: Optional[Piece]):
        """
        设置格子上的棋子，并同步棋子的位置

        清空格子不会修改原棋子的位置。
        """
        if not pos.is_valid():
            raise ValueError(f"无效的位置坐标: {pos}")
        self.matrix[pos.row][pos.col] = piece
        if piece is not None:
            piece.pos = pos

    def get(self, pos: Pos) -> Optional[Piece]:
        """获取格子上的棋子，越界坐标返回None"""
        if not pos.is_valid():
            return None
        return self.matrix[pos.row][pos.col]

    def pieces(self, color: Optional[Color] = None) -> List[Piece]:
        """
        棋盘上的所有棋子（按行优先顺序）

        Args:
            color: 指定颜色，None表示双方

        Returns:
            List[Piece]: 棋子列表
        """
        return [
            piece
            for row in self.matrix
            for piece in row
            if piece is not None and (color is None or piece.color is color)
        ]

    def set_generator(self, identity: Identity, generator) -> None:
        """
        为本棋盘替换某个棋子种类的走法生成器

        只影响本棋盘及之后从它复制出的副本，不影响其他棋盘。
        generator 为None时恢复使用全局表。
        """
        if generator is None:
            self.generators.pop(identity, None)
        else:
            self.generators[identity] = generator

    def available_moves(self, pos: Pos) -> List[Pos]:
        """指定位置棋子的可走落点，空格返回空列表"""
        piece = self.get(pos)
        return piece.available_moves(self) if piece is not None else []

    # ==================== 序列化 ====================

    def serialize(self) -> str:
        """
        序列化棋局

        局面完全由先手方、初始局面和走法历史决定，因此只序列化先手标记和历史，
        如 "r h7e7 h0g2"，尚未走子时为 "r"。
        """
        mark = 'r' if self.first_player is Color.RED else 'b'
        moves_text = self.history.serialize()
        return f"{mark} {moves_text}" if moves_text else mark

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: 10x9 矩阵，红方棋子为正编码，黑方为负编码，空格为0
        """
        board = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=int)
        for piece in self.pieces():
            board[piece.pos.row, piece.pos.col] = piece.signed_code
        return board

    def get_board_hash(self) -> str:
        """
        获取棋局状态的哈希值

        Returns:
            str: 棋盘矩阵和当前玩家的MD5哈希值
        """
        state_str = f"{self.to_matrix().tobytes()}{self.current_player.value}"
        return hashlib.md5(state_str.encode()).hexdigest()

    # ==================== 验证 ====================

    def validate_board_state(self) -> Tuple[bool, List[str]]:
        """
        验证棋局状态的合法性

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        from .board_validator import BoardValidator
        return BoardValidator().full_validation(self)

    def get_validation_report(self) -> Dict[str, Any]:
        from .board_validator import BoardValidator
        return BoardValidator().get_validation_report(self)

    # ==================== 实用工具方法 ====================

    def copy(self) -> 'ChessBoard':
        """
        创建棋盘的深拷贝

        副本拥有独立的棋子和历史，可用于试走分析，修改副本不影响原棋盘。
        """
        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:
        """棋盘内容和当前玩家相同即相等"""
        if not isinstance(other, ChessBoard):
            return NotImplemented
        return (np.array_equal(self.to_matrix(), other.to_matrix()) and
                self.current_player == other.current_player)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"ChessBoard(current_player={self.current_player.name.lower()}, "
                f"pieces={len(self.pieces())}, moves={self.move_count})")
