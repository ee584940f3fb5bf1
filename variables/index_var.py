"""variables/index_var.py - 带前缀的变量Token: $0, $close"""
import re

from core.errors import InvalidVariableName, VariableIndexError
from config.config import EXPRESSION_CONFIG

_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


class IndexVar:
    """
    按位置索引变量容器（list / np.ndarray ...）的变量，如 "$0"。
    """

    __slots__ = ('key',)

    sigil = EXPRESSION_CONFIG['variable_sigil']

    def __init__(self, key):
        self.key = key

    @classmethod
    def from_token(cls, token):
        if not token.startswith(cls.sigil):
            raise InvalidVariableName(token, cls.sigil)
        index = token[len(cls.sigil):]
        if not index.isascii() or not index.isdigit():
            raise VariableIndexError(token, f"{index!r} is not a non-negative integer")
        return cls(int(index))

    def __int__(self):
        return self.key

    def __eq__(self, other):
        return type(self) is type(other) and self.key == other.key

    def __hash__(self):
        return hash((type(self), self.key))

    def __repr__(self):
        return f"{type(self).__name__}({self.key!r})"

    def __str__(self):
        return f"{self.sigil}{self.key}"


class NameVar(IndexVar):
    """按名称索引（dict / pd.Series / DataFrame 行）的变量，如 "$close"。"""

    __slots__ = ()

    @classmethod
    def from_token(cls, token):
        if not token.startswith(cls.sigil):
            raise InvalidVariableName(token, cls.sigil)
        name = token[len(cls.sigil):]
        if not _NAME_PATTERN.match(name):
            raise VariableIndexError(token, f"{name!r} is not an identifier")
        return cls(name)
