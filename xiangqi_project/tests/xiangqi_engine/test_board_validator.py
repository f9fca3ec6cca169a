"""
测试BoardValidator类的功能

测试占位不变量、棋子数量和走法历史一致性的检查。
"""

import pytest

from xiangqi_project.src.xiangqi_engine.rules_engine import (
    BoardValidator, ChessBoard, Pos, Color, Identity
)


class TestBoardValidator:
    """BoardValidator类的测试"""

    def setup_method(self):
        self.validator = BoardValidator()
        self.board = ChessBoard()

    def test_validator_creation(self):
        """测试验证器创建"""
        assert self.validator.piece_limits[Identity.KING] == 1
        assert self.validator.piece_limits[Identity.PAWN] == 5

    def test_initial_board(self):
        """测试初始局面所有验证通过"""
        is_valid, errors = self.validator.full_validation(self.board)
        assert is_valid
        assert errors == []

    def test_position_mismatch(self):
        """测试棋子记录的位置与格子不一致"""
        self.board.get(Pos(9, 4)).pos = Pos(8, 4)
        is_valid, errors = self.validator.validate_piece_positions(self.board)
        assert not is_valid
        assert len(errors) == 1

    def test_duplicate_instance(self):
        """测试同一个棋子实例出现在两个格子上"""
        self.board.matrix[5][5] = self.board.get(Pos(9, 4))
        is_valid, errors = self.validator.validate_unique_pieces(self.board)
        assert not is_valid
        assert len(errors) == 1

    def test_piece_count_limit(self):
        """测试棋子数量超限"""
        self.board.set(Pos(5, 5), Identity.KING.spawn(Color.RED))
        is_valid, errors = self.validator.validate_piece_counts(self.board)
        assert not is_valid
        assert "帅" in errors[0]

    def test_history_mismatch(self):
        """测试绕过走子直接修改棋盘后历史不一致"""
        self.board.move(Pos(6, 4), Pos(5, 4))
        self.board.set(Pos(6, 0), None)

        is_valid, errors = self.validator.validate_move_history(self.board)
        assert not is_valid

    def test_history_consistent_after_play(self):
        """测试正常走子后历史一致"""
        self.board.move(Pos(7, 7), Pos(7, 4))
        self.board.move(Pos(0, 7), Pos(2, 6))
        self.board.move(Pos(7, 4), Pos(3, 4))
        self.board.undo()

        is_valid, errors = self.validator.validate_move_history(self.board)
        assert is_valid, errors

    def test_validation_report(self):
        """测试验证报告"""
        report = self.board.get_validation_report()
        assert report['overall_valid']
        assert report['total_errors'] == 0
        assert set(report['validations']) == {
            'structure', 'piece_positions', 'unique_pieces', 'piece_counts', 'move_history'
        }

        self.board.matrix[5][5] = self.board.get(Pos(9, 4))
        report = self.validator.get_validation_report(self.board)
        assert not report['overall_valid']
        assert not report['validations']['unique_pieces']['valid']
        assert report['total_errors'] >= 2


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
