"""core/operands.py - 数值操作数类型注册表"""
import re
import numbers

import numpy as np

from core.errors import InvalidOperandToken

_INT_PATTERN = re.compile(r'^[+-]?[0-9]+$')
_FLOAT_PATTERN = re.compile(
    r'^[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)$',
    re.IGNORECASE
)


class NumericOperand:
    """
    以 numpy 标量类型作为操作数类型。
    from_token 解析Token，to_text 输出规范文本，coerce 把变量容器里的值转成同一类型。
    """

    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        self.scalar_type = self.dtype.type
        self.name = self.dtype.name
        self.is_integer = np.issubdtype(self.dtype, np.integer)
        if self.is_integer:
            info = np.iinfo(self.dtype)
            self.min_value, self.max_value = int(info.min), int(info.max)
        else:
            info = np.finfo(self.dtype)
            self.min_value, self.max_value = float(info.min), float(info.max)

    def from_token(self, token):
        if self.is_integer:
            if not _INT_PATTERN.match(token):
                raise InvalidOperandToken(token, self.name, "not an integer literal")
            value = int(token)
            if not self.min_value <= value <= self.max_value:
                raise InvalidOperandToken(token, self.name, "out of range")
            return self.scalar_type(value)

        if not _FLOAT_PATTERN.match(token):
            raise InvalidOperandToken(token, self.name, "not a float literal")
        # 超出范围的字面量得到 ±inf
        with np.errstate(over='ignore'):
            return self.scalar_type(token)

    def to_text(self, value):
        if self.is_integer:
            return str(int(value))
        if np.isnan(value):
            return 'nan'
        if np.isinf(value):
            return 'inf' if value > 0 else '-inf'
        # 整数值的浮点数不带 ".0"，与解析互逆
        return np.format_float_positional(self.scalar_type(value), trim='-')

    def coerce(self, value):
        """变量值 -> 操作数类型；无法表示时抛出 TypeError/ValueError"""
        if isinstance(value, self.scalar_type):
            return value
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"boolean {value!r} is not a {self.name}")
        if isinstance(value, str):
            return self.from_token(value)

        if self.is_integer:
            if isinstance(value, numbers.Integral):
                value = int(value)
            elif isinstance(value, numbers.Real) and float(value).is_integer():
                value = int(value)
            else:
                raise TypeError(f"{value!r} is not an integer")
            if not self.min_value <= value <= self.max_value:
                raise ValueError(f"{value} out of range for {self.name}")
            return self.scalar_type(value)

        if not isinstance(value, numbers.Real):
            raise TypeError(f"{value!r} is not a real number")
        with np.errstate(over='ignore'):
            return self.scalar_type(value)

    def zero(self):
        return self.scalar_type(0)

    def one(self):
        return self.scalar_type(1)

    def __eq__(self, other):
        return isinstance(other, NumericOperand) and self.dtype == other.dtype

    def __hash__(self):
        return hash(self.dtype)

    def __repr__(self):
        return f"NumericOperand({self.name})"


# 每种支持的数值类型注册一次
OPERAND_TYPES = {
    name: NumericOperand(name)
    for name in ('int8', 'int16', 'int32', 'int64', 'float32', 'float64')
}


def get_operand_type(name):
    """按名称获取操作数类型，如 'int32' / 'float64'"""
    if isinstance(name, NumericOperand):
        return name
    try:
        return OPERAND_TYPES[str(np.dtype(name))]
    except (KeyError, TypeError) as e:
        raise KeyError(f"Unsupported operand type: {name!r}; "
                       f"available: {', '.join(OPERAND_TYPES)}") from e
