"""
棋盘坐标

定义 10x9 棋盘上的不可变坐标及其对称变换。
"""

from dataclasses import dataclass
from typing import Tuple

from ..utils.exceptions import NotationError


BOARD_ROWS = 10
BOARD_COLS = 9

FILES = 'abcdefghi'


@dataclass(frozen=True)
class Pos:
    """
    棋盘坐标 (行, 列)

    行 0 为黑方底线，行 9 为红方底线。走法生成过程中允许临时出现
    越界坐标，落子前必须由 is_valid 过滤。
    """
    row: int
    col: int

    def is_valid(self) -> bool:
        """坐标是否在棋盘内"""
        return 0 <= self.row < BOARD_ROWS and 0 <= self.col < BOARD_COLS

    def invert_row(self) -> 'Pos':
        """关于棋盘水平中线（楚河汉界）镜像"""
        return Pos(BOARD_ROWS - 1 - self.row, self.col)

    def invert_col(self) -> 'Pos':
        """关于棋盘竖直中线镜像"""
        return Pos(self.row, BOARD_COLS - 1 - self.col)

    def shifted(self, d_row: int, d_col: int) -> 'Pos':
        """平移后的坐标，结果可能越界"""
        return Pos(self.row + d_row, self.col + d_col)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def to_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 列字母 + 行数字，如 (9, 4) -> "e9"
        """
        return f"{FILES[self.col]}{self.row}"

    @classmethod
    def from_notation(cls, notation: str) -> 'Pos':
        """
        从坐标记法创建坐标

        Args:
            notation: 坐标记法字符串，如 "e9"

        Returns:
            Pos: 坐标对象
        """
        if len(notation) != 2 or notation[0] not in FILES or notation[1] not in '0123456789':
            raise NotationError(notation, "坐标应为列字母a-i加行数字0-9")
        return cls(int(notation[1]), FILES.index(notation[0]))

    def __str__(self) -> str:
        return self.to_notation() if self.is_valid() else f"({self.row}, {self.col})"
