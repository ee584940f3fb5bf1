"""operators/float_evaluator.py - 浮点求值器（IEEE 语义，不会失败）"""
from enum import Enum

import numpy as np

from core.errors import InvalidEvaluatorToken
from core.evaluator import Evaluator
from core.stack import pop_two


class FloatEvaluator(Evaluator, Enum):
    """
    适用于 np.float32 / np.float64 操作数。
    除零得到 ±inf，0/0 得到 nan，与 IEEE 754 一致。
    """
    ADD = '+'        # 弹出2，压入1
    SUB = '-'        # 弹出2，压入1
    MUL = '*'        # 弹出2，压入1
    DIV = '/'        # 弹出2，压入1
    REM = '%'        # 弹出2，压入1（fmod，符号随被除数）
    NEG = 'neg'      # 弹出1，压入1
    SQRT = 'sqrt'    # 弹出1，压入1
    POW = 'pow'      # 弹出2，压入1
    LOG2 = 'log2'    # 弹出1，压入1
    EXP = 'exp'      # 弹出1，压入1
    SWAP = 'swap'    # 弹出2，压入2
    ZERO = 'zero'    # 弹出0，压入1
    ONE = 'one'      # 弹出0，压入1
    ROUND = 'round'  # 弹出1，压入1（四舍五入，.5 远离零）

    @classmethod
    def from_token(cls, token):
        try:
            return cls(token)
        except ValueError:
            raise InvalidEvaluatorToken(token, 'float evaluator') from None

    @classmethod
    def accepts_operand_type(cls, operand_type):
        dtype = getattr(operand_type, 'dtype', None)
        return dtype is not None and np.issubdtype(dtype, np.floating)

    def operands_needed(self):
        return _ARITY[self][0]

    def operands_generated(self):
        return _ARITY[self][1]

    def evaluate(self, stack):
        with np.errstate(all='ignore'):
            _OPERATIONS[self](stack)

    def __str__(self):
        return self.value


def _scalar_type(stack):
    return np.dtype(stack.dtype).type if stack.dtype is not None else np.float64


def _binary(func):
    def operation(stack):
        left, right = pop_two(stack)
        stack.push(func(left, right))
    return operation


def _unary(func):
    def operation(stack):
        stack.push(func(stack.pop()))
    return operation


def _round(value):
    # value - trunc(value) 是精确的；不能用 floor(|x| + 0.5)，加 0.5 会先舍入
    whole = np.trunc(value)
    step = np.copysign(np.abs(value - whole) >= 0.5, value)
    return type(value)(whole + step)


def _swap(stack):
    left, right = pop_two(stack)
    stack.push(right)
    stack.push(left)


def _zero(stack):
    stack.push(_scalar_type(stack)(0))


def _one(stack):
    stack.push(_scalar_type(stack)(1))


_ARITY = {
    FloatEvaluator.ADD: (2, 1),
    FloatEvaluator.SUB: (2, 1),
    FloatEvaluator.MUL: (2, 1),
    FloatEvaluator.DIV: (2, 1),
    FloatEvaluator.REM: (2, 1),
    FloatEvaluator.NEG: (1, 1),
    FloatEvaluator.SQRT: (1, 1),
    FloatEvaluator.POW: (2, 1),
    FloatEvaluator.LOG2: (1, 1),
    FloatEvaluator.EXP: (1, 1),
    FloatEvaluator.SWAP: (2, 2),
    FloatEvaluator.ZERO: (0, 1),
    FloatEvaluator.ONE: (0, 1),
    FloatEvaluator.ROUND: (1, 1),
}

_OPERATIONS = {
    FloatEvaluator.ADD: _binary(np.add),
    FloatEvaluator.SUB: _binary(np.subtract),
    FloatEvaluator.MUL: _binary(np.multiply),
    FloatEvaluator.DIV: _binary(np.divide),
    FloatEvaluator.REM: _binary(np.fmod),
    FloatEvaluator.NEG: _unary(np.negative),
    FloatEvaluator.SQRT: _unary(np.sqrt),
    FloatEvaluator.POW: _binary(np.power),
    FloatEvaluator.LOG2: _unary(np.log2),
    FloatEvaluator.EXP: _unary(np.exp),
    FloatEvaluator.SWAP: _swap,
    FloatEvaluator.ZERO: _zero,
    FloatEvaluator.ONE: _one,
    FloatEvaluator.ROUND: _unary(_round),
}
