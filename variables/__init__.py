"""变量模块 - 变量Token类型和容器查找"""
from .index_var import IndexVar, NameVar
from .dummy import DummyVariable, DummyVariables
from .lookup import get_variable

__all__ = ['IndexVar', 'NameVar', 'DummyVariable', 'DummyVariables', 'get_variable']
