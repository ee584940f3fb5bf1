"""core/stack.py - 求值栈"""
from core.errors import StackUnderflowError


class Stack:
    """
    单一操作数类型的 LIFO 栈，可按已知容量预分配。
    超出容量时自动扩容（只会在求值器声明的元数不诚实时发生）。
    """

    def __init__(self, capacity=0, dtype=None):
        self._items = [None] * capacity
        self._size = 0
        self.dtype = dtype  # numpy dtype，供 zero/one 这类零元求值器使用

    @classmethod
    def with_capacity(cls, capacity, dtype=None):
        return cls(capacity, dtype=dtype)

    @property
    def capacity(self):
        return len(self._items)

    def __len__(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def push(self, value):
        if self._size == len(self._items):
            self._items.append(value)
        else:
            self._items[self._size] = value
        self._size += 1

    def pop(self):
        if self._size == 0:
            raise StackUnderflowError("pop from an empty stack")
        self._size -= 1
        value = self._items[self._size]
        self._items[self._size] = None
        return value

    def peek(self):
        if self._size == 0:
            raise StackUnderflowError("peek on an empty stack")
        return self._items[self._size - 1]

    def to_list(self):
        """栈底在前"""
        return self._items[:self._size]

    def __repr__(self):
        return f"Stack({self.to_list()!r}, capacity={self.capacity})"


def pop_two(stack):
    """
    弹出两个操作数，返回 (left, right)：
    left 是先入栈的（离栈顶较远），right 是后入栈的（栈顶）。
    "4 3 -" => left=4, right=3 => 4 - 3
    """
    right = stack.pop()
    left = stack.pop()
    return left, right
