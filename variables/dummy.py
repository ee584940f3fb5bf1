"""variables/dummy.py - 不需要变量时的占位类型"""
from core.errors import NoVariablesError


class DummyVariable:
    """from_token 总是失败，表达式因此不含变量"""

    @classmethod
    def from_token(cls, token):
        raise NoVariablesError(token)


class DummyVariables:
    """空的变量容器：任何查找都找不到"""

    def get_variable(self, key):
        return None

    def __len__(self):
        return 0
