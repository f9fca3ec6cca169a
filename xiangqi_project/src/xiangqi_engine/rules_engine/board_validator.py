"""
棋局一致性验证器

检查棋盘的占位不变量：格子与棋子位置一致、棋子实例不重复、
棋子数量不超限，以及走法历史能否重放出当前局面。
"""

from collections import Counter
from typing import Any, Dict, List, Tuple

from .chess_board import ChessBoard
from .piece import Color, Identity
from .position import BOARD_COLS, BOARD_ROWS, Pos


class BoardValidator:
    """
    棋局一致性验证器

    每项验证返回 (是否合法, 错误信息列表)，不抛出异常。
    """

    def __init__(self):
        """初始化验证器"""
        # 每方各种棋子的数量上限
        self.piece_limits = {
            Identity.KING: 1,
            Identity.GUARD: 2,
            Identity.ELEPHANT: 2,
            Identity.HORSE: 2,
            Identity.CAR: 2,
            Identity.CANNON: 2,
            Identity.PAWN: 5
        }

    def validate_board_structure(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """验证棋盘基本结构"""
        errors = []

        if len(board.matrix) != BOARD_ROWS or any(len(row) != BOARD_COLS for row in board.matrix):
            shape = (len(board.matrix), [len(row) for row in board.matrix])
            errors.append(f"棋盘尺寸错误: {shape}, 应为({BOARD_ROWS}, {BOARD_COLS})")

        if not isinstance(board.current_player, Color):
            errors.append(f"当前玩家值错误: {board.current_player!r}, 应为Color")

        return len(errors) == 0, errors

    def validate_piece_positions(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证格子与棋子位置是否一致

        格子 (r, c) 上的棋子，其 pos 必须等于 (r, c)。
        """
        errors = []

        for row in range(len(board.matrix)):
            for col in range(len(board.matrix[row])):
                piece = board.matrix[row][col]
                if piece is not None and piece.pos != Pos(row, col):
                    errors.append(f"{piece!r} 位于格子 {Pos(row, col)}, 但记录的位置为 {piece.pos}")

        return len(errors) == 0, errors

    def validate_unique_pieces(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """验证同一个棋子实例不会出现在两个格子上"""
        errors = []

        seen = {}
        for row in range(len(board.matrix)):
            for col in range(len(board.matrix[row])):
                piece = board.matrix[row][col]
                if piece is None:
                    continue
                if id(piece) in seen:
                    errors.append(f"{piece!r} 同时出现在 {seen[id(piece)]} 和 {Pos(row, col)}")
                else:
                    seen[id(piece)] = Pos(row, col)

        return len(errors) == 0, errors

    def validate_piece_counts(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """验证每方各种棋子的数量不超过上限"""
        errors = []

        counts = Counter((piece.color, piece.identity) for piece in board.pieces())
        for (color, identity), count in counts.items():
            limit = self.piece_limits[identity]
            if count > limit:
                name = identity.display_name(color)
                errors.append(f"{color.display_name}{name}数量超限: {count} > {limit}")

        return len(errors) == 0, errors

    def validate_move_history(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证走法历史的一致性

        从初始局面重放已执行的走法，结果应与当前局面一致。
        """
        errors = []

        temp_board = ChessBoard(first_player=board.first_player)
        for i, move in enumerate(board.history):
            if temp_board.get(move.origin) is None:
                errors.append(f"第{i + 1}步走法起点无子: {move}")
                break
            temp_board.make_move(move)
        else:
            if temp_board != board:
                errors.append("重放走法后的棋局状态与当前状态不一致")

        return len(errors) == 0, errors

    def full_validation(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        完整的棋局验证

        Returns:
            Tuple[bool, List[str]]: (是否合法, 所有错误信息列表)
        """
        all_errors = []
        for validation_func in self._validations().values():
            _, errors = validation_func(board)
            all_errors.extend(errors)

        return len(all_errors) == 0, all_errors

    def get_validation_report(self, board: ChessBoard) -> Dict[str, Any]:
        """
        获取详细的验证报告

        Returns:
            Dict[str, Any]: 验证报告
        """
        report = {
            'overall_valid': True,
            'total_errors': 0,
            'validations': {}
        }

        for test_name, test_func in self._validations().items():
            is_valid, errors = test_func(board)
            report['validations'][test_name] = {
                'valid': is_valid,
                'errors': errors,
                'error_count': len(errors)
            }

            if not is_valid:
                report['overall_valid'] = False
                report['total_errors'] += len(errors)

        return report

    def _validations(self):
        return {
            'structure': self.validate_board_structure,
            'piece_positions': self.validate_piece_positions,
            'unique_pieces': self.validate_unique_pieces,
            'piece_counts': self.validate_piece_counts,
            'move_history': self.validate_move_history
        }
