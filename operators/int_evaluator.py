"""operators/int_evaluator.py - 有符号整数求值器（带溢出检查）"""
from enum import Enum

import numpy as np

from core.errors import (
    InvalidEvaluatorToken, AddOverflow, SubUnderflow, MulOverflow,
    InvalidDiv, InvalidRem, NegOverflow, PowOverflow, InvalidExponent
)
from core.evaluator import Evaluator
from core.stack import pop_two


class IntEvaluator(Evaluator, Enum):
    """
    适用于 np.int8 ~ np.int64 操作数。
    所有运算先在 Python int 上计算，再按 dtype 的取值范围检查，
    越界时抛出 IntEvaluateError 的子类，错误中保留操作数。
    除法和取余向零截断。
    """
    ADD = '+'      # 弹出2，压入1
    SUB = '-'      # 弹出2，压入1
    MUL = '*'      # 弹出2，压入1
    DIV = '/'      # 弹出2，压入1
    REM = '%'      # 弹出2，压入1
    NEG = 'neg'    # 弹出1，压入1
    POW = 'pow'    # 弹出2，压入1
    SWAP = 'swap'  # 弹出2，压入2
    ZERO = 'zero'  # 弹出0，压入1
    ONE = 'one'    # 弹出0，压入1

    @classmethod
    def from_token(cls, token):
        try:
            return cls(token)
        except ValueError:
            raise InvalidEvaluatorToken(token, 'integer evaluator') from None

    @classmethod
    def accepts_operand_type(cls, operand_type):
        # 溢出检查依赖 np.iinfo，只支持有符号整数
        dtype = getattr(operand_type, 'dtype', None)
        return dtype is not None and np.issubdtype(dtype, np.signedinteger)

    def operands_needed(self):
        return _ARITY[self][0]

    def operands_generated(self):
        return _ARITY[self][1]

    def evaluate(self, stack):
        _OPERATIONS[self](stack)

    def __str__(self):
        return self.value


def _dtype(stack, sample=None):
    if stack.dtype is not None:
        return np.dtype(stack.dtype)
    return np.asarray(sample if sample is not None else 0).dtype


def _checked(stack, value, error, *operands):
    """value 在 dtype 范围内则压栈，否则抛出 error(*operands)"""
    dtype = _dtype(stack, operands[0] if operands else None)
    info = np.iinfo(dtype)
    if not int(info.min) <= value <= int(info.max):
        raise error(*operands)
    stack.push(dtype.type(value))


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _add(stack):
    left, right = (int(v) for v in pop_two(stack))
    _checked(stack, left + right, AddOverflow, left, right)


def _sub(stack):
    left, right = (int(v) for v in pop_two(stack))
    _checked(stack, left - right, SubUnderflow, left, right)


def _mul(stack):
    left, right = (int(v) for v in pop_two(stack))
    _checked(stack, left * right, MulOverflow, left, right)


def _div(stack):
    left, right = (int(v) for v in pop_two(stack))
    if right == 0:
        raise InvalidDiv(left, right)
    # MIN / -1 越界
    _checked(stack, _trunc_div(left, right), InvalidDiv, left, right)


def _rem(stack):
    left, right = (int(v) for v in pop_two(stack))
    if right == 0:
        raise InvalidRem(left, right)
    _checked(stack, left - right * _trunc_div(left, right), InvalidRem, left, right)


def _neg(stack):
    value = int(stack.pop())
    _checked(stack, -value, NegOverflow, value)


def _pow(stack):
    base, exponent = (int(v) for v in pop_two(stack))
    if exponent < 0:
        raise InvalidExponent(base, exponent)
    bits = _dtype(stack, base).itemsize * 8
    # |base| >= 2 时指数超过位宽必然溢出，避免计算巨大整数
    if abs(base) >= 2 and exponent >= bits:
        raise PowOverflow(base, exponent)
    _checked(stack, base ** exponent, PowOverflow, base, exponent)


def _swap(stack):
    left, right = pop_two(stack)
    stack.push(right)
    stack.push(left)


def _zero(stack):
    stack.push(_dtype(stack).type(0))


def _one(stack):
    stack.push(_dtype(stack).type(1))


_ARITY = {
    IntEvaluator.ADD: (2, 1),
    IntEvaluator.SUB: (2, 1),
    IntEvaluator.MUL: (2, 1),
    IntEvaluator.DIV: (2, 1),
    IntEvaluator.REM: (2, 1),
    IntEvaluator.NEG: (1, 1),
    IntEvaluator.POW: (2, 1),
    IntEvaluator.SWAP: (2, 2),
    IntEvaluator.ZERO: (0, 1),
    IntEvaluator.ONE: (0, 1),
}

_OPERATIONS = {
    IntEvaluator.ADD: _add,
    IntEvaluator.SUB: _sub,
    IntEvaluator.MUL: _mul,
    IntEvaluator.DIV: _div,
    IntEvaluator.REM: _rem,
    IntEvaluator.NEG: _neg,
    IntEvaluator.POW: _pow,
    IntEvaluator.SWAP: _swap,
    IntEvaluator.ZERO: _zero,
    IntEvaluator.ONE: _one,
}
