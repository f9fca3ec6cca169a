"""
象棋走法数据结构

定义走法记录及其文本记法。
"""

import re
from dataclasses import dataclass
from typing import Optional

from .piece import Identity, Piece
from .position import Pos
from ..utils.exceptions import NotationError


# 起点 + 终点 + 可选的被吃棋子符号，如 "h7e7"、"b7b0n"
_NOTATION_RE = re.compile(r'^([a-i][0-9])([a-i][0-9])([KABNRCPkabnrcp]?)$')


@dataclass(frozen=True)
class Move:
    """
    象棋走法

    记录起点、终点以及走子时终点上被吃掉的棋子。
    走法是可逆操作的单位：正向重放得到同样的局面，
    撤销时恢复走子方位置和被吃的棋子。
    """
    origin: Pos
    dest: Pos
    captured: Optional[Piece] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def to_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 如 "h7e7"，吃子时附加被吃棋子的符号，如 "b7b0n"
        """
        suffix = self.captured.symbol if self.captured is not None else ''
        return f"{self.origin.to_notation()}{self.dest.to_notation()}{suffix}"

    def serialize(self) -> str:
        return self.to_notation()

    @classmethod
    def from_notation(cls, notation: str) -> 'Move':
        """
        从坐标记法创建走法

        被吃的棋子根据符号重新生成，是新的棋子实例。

        Args:
            notation: 坐标记法字符串

        Returns:
            Move: 走法对象
        """
        match = _NOTATION_RE.match(notation)
        if match is None:
            raise NotationError(notation, "应为 起点+终点[+被吃棋子符号]，如 b7b0n")

        origin_str, dest_str, captured_str = match.groups()
        captured = Identity.from_symbol(captured_str) if captured_str else None
        return cls(Pos.from_notation(origin_str), Pos.from_notation(dest_str), captured)

    @classmethod
    def deserialize(cls, text: str) -> 'Move':
        return cls.from_notation(text)

    def __str__(self) -> str:
        return self.to_notation()
