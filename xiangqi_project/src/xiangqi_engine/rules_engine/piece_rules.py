"""
棋子走法生成器

每个棋子种类对应一个纯函数 (颜色, 位置, 棋盘) -> 候选落点列表。
生成器只描述几何规则，结果可能含越界坐标或己方棋子所在位置，
统一的过滤由 Piece.available_moves 完成。

棋盘方向：黑方在上（行 0-4），红方在下（行 5-9）。
"""

from typing import Callable, Dict, List, TYPE_CHECKING

from .piece import Color, Identity
from .position import Pos

if TYPE_CHECKING:
    from .chess_board import ChessBoard


CandidateGenerator = Callable[[Color, Pos, 'ChessBoard'], List[Pos]]

ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]   # 上下左右
DIAGONAL = [(1, 1), (1, -1), (-1, 1), (-1, -1)]   # 斜向

# 马：日字，(落点偏移, 马腿偏移)
HORSE_JUMPS = [
    ((2, 1), (1, 0)), ((2, -1), (1, 0)), ((-2, 1), (-1, 0)), ((-2, -1), (-1, 0)),
    ((1, 2), (0, 1)), ((-1, 2), (0, 1)), ((1, -2), (0, -1)), ((-1, -2), (0, -1))
]

PALACE_COLS = range(3, 6)


def in_palace(color: Color, pos: Pos) -> bool:
    """是否在己方九宫内"""
    rows = range(7, 10) if color is Color.RED else range(0, 3)
    return pos.row in rows and pos.col in PALACE_COLS


def on_own_side(color: Color, pos: Pos) -> bool:
    """是否在己方半场（未过河）"""
    return pos.row >= 5 if color is Color.RED else pos.row <= 4


def forward(color: Color) -> int:
    """前进方向的行增量"""
    return -1 if color is Color.RED else 1


def _car_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """车：直线滑行，直到遇到第一个棋子（含该位置）"""
    moves = []
    for dr, dc in ORTHOGONAL:
        dest = pos.shifted(dr, dc)
        while dest.is_valid():
            moves.append(dest)
            if board.get(dest) is not None:
                break
            dest = dest.shifted(dr, dc)
    return moves


def _horse_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """马：日字，马腿被绊则不能走"""
    moves = []
    for (dr, dc), (leg_r, leg_c) in HORSE_JUMPS:
        if board.get(pos.shifted(leg_r, leg_c)) is not None:
            continue
        moves.append(pos.shifted(dr, dc))
    return moves


def _elephant_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """相/象：田字，塞象眼则不能走，不能过河"""
    moves = []
    for dr, dc in DIAGONAL:
        dest = pos.shifted(2 * dr, 2 * dc)
        if not on_own_side(color, dest):
            continue
        if board.get(pos.shifted(dr, dc)) is not None:
            continue
        moves.append(dest)
    return moves


def _guard_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """仕/士：九宫内斜走一步"""
    return [pos.shifted(dr, dc) for dr, dc in DIAGONAL if in_palace(color, pos.shifted(dr, dc))]


def _king_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """帅/将：九宫内直走一步"""
    return [pos.shifted(dr, dc) for dr, dc in ORTHOGONAL if in_palace(color, pos.shifted(dr, dc))]


def _pawn_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """兵/卒：向前一步，过河后可左右一步"""
    moves = [pos.shifted(forward(color), 0)]
    if not on_own_side(color, pos):
        moves.append(pos.shifted(0, -1))
        moves.append(pos.shifted(0, 1))
    return moves


def _cannon_moves(color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """炮：不吃子时同车，吃子时须隔一个炮架"""
    moves = []
    for dr, dc in ORTHOGONAL:
        dest = pos.shifted(dr, dc)
        found_platform = False
        while dest.is_valid():
            occupant = board.get(dest)
            if not found_platform:
                if occupant is None:
                    moves.append(dest)
                else:
                    found_platform = True
            elif occupant is not None:
                moves.append(dest)
                break
            dest = dest.shifted(dr, dc)
    return moves


_GENERATORS: Dict[Identity, CandidateGenerator] = {
    Identity.CAR: _car_moves,
    Identity.HORSE: _horse_moves,
    Identity.ELEPHANT: _elephant_moves,
    Identity.GUARD: _guard_moves,
    Identity.KING: _king_moves,
    Identity.PAWN: _pawn_moves,
    Identity.CANNON: _cannon_moves,
}


def register_generator(identity: Identity, generator: CandidateGenerator) -> CandidateGenerator:
    """
    替换某个棋子种类的全局走法生成器

    全局表在整个进程内共享，会影响所有没有单独覆盖该种类的棋盘。
    只想改变一个棋盘时使用 ChessBoard.set_generator。

    Args:
        identity: 棋子种类
        generator: 新的生成器

    Returns:
        CandidateGenerator: 被替换的旧生成器，便于恢复
    """
    previous = _GENERATORS[identity]
    _GENERATORS[identity] = generator
    return previous


def get_generator(identity: Identity) -> CandidateGenerator:
    return _GENERATORS[identity]


def generate_candidates(identity: Identity, color: Color, pos: Pos, board: 'ChessBoard') -> List[Pos]:
    """按棋子种类分派到对应的生成器，棋盘自带的覆盖优先于全局表"""
    overrides = getattr(board, 'generators', None) or {}
    generator = overrides.get(identity, _GENERATORS[identity])
    return list(generator(color, pos, board))
