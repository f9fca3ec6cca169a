"""
走法历史

带悔棋/重做缓冲区的可回放历史记录。
"""

from typing import Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from ..utils.logger import LoggerMixin


T = TypeVar('T')

SEPARATOR = ' '


class History(Generic[T], LoggerMixin):
    """
    走法历史

    由两部分组成：已执行的记录（可撤销）和重做缓冲区（可恢复）。
    撤销后再压入新记录会丢弃重做缓冲区。

    记录类型需提供 serialize() 和类方法 deserialize(text)。
    """

    def __init__(self, items: Iterable[T] = ()):
        self._stack: List[T] = list(items)
        self._redo: List[T] = []

    @property
    def stack(self) -> Tuple[T, ...]:
        """已执行的记录，从旧到新"""
        return tuple(self._stack)

    @property
    def redo_stack(self) -> Tuple[T, ...]:
        """重做缓冲区，最后一个元素最先恢复"""
        return tuple(self._redo)

    @property
    def can_revert(self) -> bool:
        return bool(self._stack)

    @property
    def can_restore(self) -> bool:
        return bool(self._redo)

    def push(self, item: T) -> None:
        """压入新记录并丢弃重做缓冲区"""
        if self._redo:
            self.log_debug(f"丢弃 {len(self._redo)} 条重做记录")
            self._redo.clear()
        self._stack.append(item)

    def revert(self) -> Optional[T]:
        """
        撤销最近一条记录

        Returns:
            Optional[T]: 被撤销的记录，没有可撤销的记录时返回None
        """
        if not self._stack:
            return None
        item = self._stack.pop()
        self._redo.append(item)
        return item

    def restore(self) -> Optional[T]:
        """
        恢复最近撤销的记录

        Returns:
            Optional[T]: 被恢复的记录，重做缓冲区为空时返回None
        """
        if not self._redo:
            return None
        item = self._redo.pop()
        self._stack.append(item)
        return item

    def last(self) -> Optional[T]:
        return self._stack[-1] if self._stack else None

    def copy(self) -> 'History[T]':
        """复制历史（两部分都复制，记录本身共享）"""
        other = History(self._stack)
        other._redo = list(self._redo)
        return other

    def serialize(self) -> str:
        """
        序列化已执行的记录

        重做缓冲区不参与序列化。

        Returns:
            str: 以空格分隔的记录文本，空历史为空字符串
        """
        return SEPARATOR.join(item.serialize() for item in self._stack)

    @classmethod
    def deserialize(cls, text: str, item_type: Type[T]) -> 'History':
        """
        从文本重建历史

        Args:
            text: serialize 产生的文本
            item_type: 记录类型，需提供类方法 deserialize(text)

        Returns:
            History: 只含已执行记录的历史
        """
        return cls(item_type.deserialize(token) for token in text.split())

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self):
        return iter(self._stack)

    def __repr__(self) -> str:
        return f"History(applied={len(self._stack)}, redo={len(self._redo)})"
