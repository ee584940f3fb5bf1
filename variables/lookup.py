"""variables/lookup.py - 从外部容器读取变量（只读）"""
from collections.abc import Mapping, Sequence
import numbers

import numpy as np
import pandas as pd


def get_variable(container, key):
    """
    按索引/键从容器取值，找不到返回 None。
      - list / tuple / deque / 一维 np.ndarray: 非负整数位置
      - dict / OrderedDict 等 Mapping: 键
      - pd.Series: 索引标签
      - 实现了 get_variable(key) 的对象: 委托给它
    """
    if container is None:
        return None

    if hasattr(container, 'get_variable'):
        return container.get_variable(key)

    if isinstance(container, pd.Series):
        if key in container.index:
            return container.loc[key]
        return None

    if isinstance(container, Mapping):
        return container.get(key)

    if isinstance(container, (Sequence, np.ndarray)) and not isinstance(container, (str, bytes)):
        if isinstance(key, bool) or not isinstance(key, numbers.Integral):
            return None
        # 负数不按 Python 的倒数索引解释
        if 0 <= key < len(container):
            return container[key]
        return None

    raise TypeError(f"Unsupported variable container: {type(container).__name__}")
