"""core/expression.py - 经过验证的不可变RPN表达式"""
import logging

from core.errors import IncompatibleOperandType
from core.operands import get_operand_type
from core.rpn_evaluator import RPNEvaluator
from core.token_system import RPNValidator, classify_token

logger = logging.getLogger(__name__)


class Expression:
    """
    有序的Token元组 + 预先计算的最大栈深度 max_stack。

    只能通过 from_tokens / from_string 构造：
    分类 -> 元数验证 -> 栈深度规划，任何一步失败都只抛出异常，不会得到表达式。
    构造完成后只读，可被多个线程同时求值。
    """

    __slots__ = ('_tokens', '_max_stack', '_operand_type', '_evaluator_type', '_variable_type')

    def __init__(self, tokens, max_stack, operand_type, evaluator_type, variable_type=None):
        # 内部构造；外部请用 from_tokens
        object.__setattr__(self, '_tokens', tuple(tokens))
        object.__setattr__(self, '_max_stack', max_stack)
        object.__setattr__(self, '_operand_type', operand_type)
        object.__setattr__(self, '_evaluator_type', evaluator_type)
        object.__setattr__(self, '_variable_type', variable_type)

    def __setattr__(self, name, value):
        raise AttributeError("Expression is immutable")

    @classmethod
    def from_tokens(cls, tokens, evaluator_type, operand_type='float64', variable_type=None):
        """
        Args:
            tokens: 原始Token的可迭代对象（只遍历一次）
            evaluator_type: 求值器类型（实现 from_token 的 Evaluator 子类）
            operand_type: 操作数类型，名称（'int32'）或实现 from_token 的对象
            variable_type: 变量类型（IndexVar/NameVar...），None 表示不接受变量
        Raises:
            IncompatibleOperandType, ClassificationError, NotEnoughOperands, TooManyOperands
        """
        if isinstance(operand_type, str):
            operand_type = get_operand_type(operand_type)
        accepts = getattr(evaluator_type, 'accepts_operand_type', None)
        if accepts is not None and not accepts(operand_type):
            raise IncompatibleOperandType(evaluator_type, operand_type)

        draft = [
            classify_token(raw, evaluator_type, variable_type, operand_type)
            for raw in tokens
        ]
        max_stack = RPNValidator.check(draft)

        logger.debug(f"Built expression with {len(draft)} tokens, max_stack={max_stack}")
        return cls(draft, max_stack, operand_type, evaluator_type, variable_type)

    @classmethod
    def from_string(cls, text, evaluator_type, operand_type='float64', variable_type=None):
        """按空白切分后构造"""
        return cls.from_tokens(text.split(), evaluator_type, operand_type, variable_type)

    @property
    def tokens(self):
        return self._tokens

    @property
    def max_stack(self):
        return self._max_stack

    @property
    def operand_type(self):
        return self._operand_type

    @property
    def evaluator_type(self):
        return self._evaluator_type

    @property
    def variable_type(self):
        return self._variable_type

    @property
    def variables(self):
        """表达式中引用到的变量（按出现顺序，去重）"""
        ordered, seen = [], set()
        for token in self._tokens:
            if token.is_variable and token.value not in seen:
                seen.add(token.value)
                ordered.append(token.value)
        return ordered

    def evaluate(self, variables=None):
        return RPNEvaluator.evaluate(self, variables)

    def __iter__(self):
        return iter(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return (self._tokens == other._tokens
                and self._operand_type == other._operand_type
                and self._evaluator_type == other._evaluator_type)

    def __hash__(self):
        return hash((self._tokens, self._evaluator_type))

    def __str__(self):
        return ' '.join(token.text for token in self._tokens)

    def __repr__(self):
        return f"Expression({str(self)!r}, max_stack={self._max_stack})"
