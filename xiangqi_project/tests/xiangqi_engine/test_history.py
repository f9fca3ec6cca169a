"""
测试History类的功能

测试撤销、恢复、分支丢弃和序列化。
"""

import pytest

from xiangqi_project.src.xiangqi_engine.rules_engine import History, Move, Pos, Identity, Color
from xiangqi_project.src.xiangqi_engine.utils.exceptions import NotationError


def make_moves():
    return [
        Move(Pos(7, 7), Pos(7, 4)),
        Move(Pos(0, 7), Pos(2, 6)),
        Move(Pos(7, 4), Pos(3, 4), Identity.PAWN.spawn(Color.BLACK)),
    ]


class TestHistory:
    """History类的测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.history = History()
        self.moves = make_moves()

    def test_empty_history(self):
        """测试空历史"""
        assert len(self.history) == 0
        assert not self.history.can_revert
        assert not self.history.can_restore
        assert self.history.revert() is None
        assert self.history.restore() is None
        assert self.history.last() is None
        assert self.history.serialize() == ""

    def test_push_and_revert(self):
        """测试压入和撤销"""
        for mv in self.moves:
            self.history.push(mv)

        assert len(self.history) == 3
        assert self.history.last() is self.moves[2]

        assert self.history.revert() is self.moves[2]
        assert self.history.revert() is self.moves[1]
        assert len(self.history) == 1
        assert self.history.redo_stack == (self.moves[2], self.moves[1])

    def test_restore_order(self):
        """测试恢复顺序与撤销顺序相反"""
        for mv in self.moves:
            self.history.push(mv)
        self.history.revert()
        self.history.revert()

        assert self.history.restore() is self.moves[1]
        assert self.history.restore() is self.moves[2]
        assert self.history.restore() is None
        assert self.history.stack == tuple(self.moves)

    def test_push_discards_redo(self):
        """测试撤销后压入新记录会丢弃重做缓冲区"""
        self.history.push(self.moves[0])
        self.history.push(self.moves[1])
        self.history.revert()
        assert self.history.can_restore

        self.history.push(self.moves[2])
        assert not self.history.can_restore
        assert self.history.restore() is None
        assert self.history.stack == (self.moves[0], self.moves[2])

    def test_serialize(self):
        """测试序列化只包含已执行的记录"""
        for mv in self.moves:
            self.history.push(mv)
        assert self.history.serialize() == "h7e7 h0g2 e7e3p"

        self.history.revert()
        assert self.history.serialize() == "h7e7 h0g2"

    def test_deserialize(self):
        """测试反序列化"""
        history = History.deserialize("h7e7 h0g2 e7e3p", Move)

        assert len(history) == 3
        assert not history.can_restore
        assert [mv.to_notation() for mv in history] == ["h7e7", "h0g2", "e7e3p"]
        assert history.stack[2].captured.identity is Identity.PAWN
        assert history.serialize() == "h7e7 h0g2 e7e3p"

    def test_deserialize_empty(self):
        """测试空文本"""
        assert len(History.deserialize("", Move)) == 0
        assert len(History.deserialize("   ", Move)) == 0

    def test_deserialize_invalid(self):
        """测试无效文本"""
        with pytest.raises(NotationError):
            History.deserialize("h7e7 zz", Move)

    def test_copy_is_independent(self):
        """测试复制的历史互不影响"""
        for mv in self.moves:
            self.history.push(mv)
        self.history.revert()

        other = self.history.copy()
        assert other.stack == self.history.stack
        assert other.redo_stack == self.history.redo_stack

        other.push(self.moves[0])
        assert len(other) == 3
        assert len(self.history) == 2
        assert self.history.can_restore


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
