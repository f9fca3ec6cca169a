"""
棋子数据结构

定义棋子颜色、棋子种类以及棋子的走法接口。
"""

from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from .position import Pos
from ..utils.exceptions import ConfigurationError, NotationError

if TYPE_CHECKING:
    from .chess_board import ChessBoard


class Color(Enum):
    """棋子颜色（双方）"""
    BLACK = -1
    RED = 1

    def next(self) -> 'Color':
        """轮换到对方"""
        return Color.RED if self is Color.BLACK else Color.BLACK

    @property
    def display_name(self) -> str:
        return '红方' if self is Color.RED else '黑方'

    @classmethod
    def from_name(cls, name: str) -> 'Color':
        """
        从配置中的名称创建颜色

        Args:
            name: "red" 或 "black"（不区分大小写）

        Returns:
            Color: 颜色
        """
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ConfigurationError('first_player', f"未知的颜色: {name!r}, 应为 red 或 black") from None


class Identity(Enum):
    """
    棋子种类

    每个种类同时是一个工厂，可为指定颜色生成棋子。
    枚举值为棋子编码（与矩阵表示一致，红方为正，黑方为负）。
    """
    KING = 1       # 帅/将
    GUARD = 2      # 仕/士
    ELEPHANT = 3   # 相/象
    HORSE = 4      # 马
    CAR = 5        # 车
    CANNON = 6     # 炮
    PAWN = 7       # 兵/卒

    @property
    def code(self) -> int:
        return self.value

    @property
    def letter(self) -> str:
        """记法字母（大写形式）"""
        return _LETTERS[self]

    def symbol(self, color: Color) -> str:
        """记法符号：红方大写，黑方小写"""
        return self.letter if color is Color.RED else self.letter.lower()

    def display_name(self, color: Color) -> str:
        return _NAMES[self][0 if color is Color.RED else 1]

    def signed_code(self, color: Color) -> int:
        return self.value * color.value

    def spawn(self, color: Color) -> 'Piece':
        """生成该种类的新棋子"""
        return Piece(self, color)

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Piece':
        """
        从记法符号生成棋子

        Args:
            symbol: 单个字母，如 "R"（红车）或 "n"（黑马）

        Returns:
            Piece: 新生成的棋子
        """
        identity = _BY_LETTER.get(symbol.upper()) if len(symbol) == 1 else None
        if identity is None:
            raise NotationError(symbol, "未知的棋子符号")
        color = Color.RED if symbol.isupper() else Color.BLACK
        return identity.spawn(color)


_LETTERS = {
    Identity.KING: 'K', Identity.GUARD: 'A', Identity.ELEPHANT: 'B',
    Identity.HORSE: 'N', Identity.CAR: 'R', Identity.CANNON: 'C', Identity.PAWN: 'P'
}

_BY_LETTER = {letter: identity for identity, letter in _LETTERS.items()}

# (红方名称, 黑方名称)
_NAMES = {
    Identity.KING: ("帅", "将"), Identity.GUARD: ("仕", "士"), Identity.ELEPHANT: ("相", "象"),
    Identity.HORSE: ("马", "马"), Identity.CAR: ("车", "车"), Identity.CANNON: ("炮", "炮"),
    Identity.PAWN: ("兵", "卒")
}


class Piece:
    """
    棋子

    种类和颜色在创建后不可变；位置只由棋盘在落子时更新。
    棋子不持有棋盘，查询走法时由调用方传入棋盘。
    两个同种同色的棋子是不同的实例，按实例比较。
    """

    __slots__ = ('identity', 'color', 'pos')

    def __init__(self, identity: Identity, color: Color, pos: Optional[Pos] = None):
        self.identity = identity
        self.color = color
        self.pos = pos if pos is not None else Pos(0, 0)

    @property
    def symbol(self) -> str:
        return self.identity.symbol(self.color)

    @property
    def signed_code(self) -> int:
        return self.identity.signed_code(self.color)

    def copy(self) -> 'Piece':
        """生成同种同色、位置独立的新棋子"""
        return self.identity.spawn(self.color)

    def candidate_moves(self, board: 'ChessBoard') -> List[Pos]:
        """
        未经过滤的候选落点

        由该种类的走法生成器给出，可能包含越界坐标和己方棋子所在位置。
        """
        from .piece_rules import generate_candidates
        return generate_candidates(self.identity, self.color, self.pos, board)

    def available_moves(self, board: 'ChessBoard') -> List[Pos]:
        """
        可走的落点

        在候选落点的基础上去掉越界坐标和己方棋子占据的位置。
        不考虑将军、送将等全局规则。

        Args:
            board: 当前棋盘，仅在本次查询期间使用

        Returns:
            List[Pos]: 落点列表
        """
        moves = []
        for dest in self.candidate_moves(board):
            if not dest.is_valid():
                continue
            occupant = board.get(dest)
            if occupant is not None and occupant.color is self.color:
                continue
            moves.append(dest)
        return moves

    def __repr__(self) -> str:
        return (f"Piece({self.identity.display_name(self.color)}, "
                f"{self.color.name.lower()}, pos={self.pos})")
