"""core/token_system.py - Token分类、元数验证和栈深度规划"""
from enum import Enum
import logging

from core.errors import (
    ClassificationError, ConversionError, NoVariablesError,
    NotEnoughOperands, TooManyOperands
)

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "operand"      # 字面量，直接入栈
    VARIABLE = "variable"    # 求值时从外部容器取值
    EVALUATOR = "evaluator"  # 操作符


class Token:
    """
    分类后的Token，三种角色只填一个。构造后只读。
    text 是规范文本形式（渲染时使用）。
    """

    __slots__ = ('type', 'value', 'text')

    def __init__(self, token_type, value, text=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'text', str(value) if text is None else text)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_variable(self):
        return self.type == TokenType.VARIABLE

    @property
    def is_evaluator(self):
        return self.type == TokenType.EVALUATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.value}, {self.text!r})"

    def __str__(self):
        return self.text


def classify_token(token, evaluator_type, variable_type, operand_type):
    """
    把一个原始Token分类为 求值器 / 变量 / 操作数。
    优先级固定：求值器 > 变量 > 操作数。
      - 求值器符号是一个小的封闭集合，应遮蔽其他解析；
      - 变量有前缀标记（如 '$'）；
      - 数值解析最宽松，放在最后。
    三者都失败时抛出 ClassificationError，保留全部三个原因。
    """
    try:
        evaluator = evaluator_type.from_token(token)
    except ConversionError as e:
        evaluator_error = e
    else:
        return Token(TokenType.EVALUATOR, evaluator)

    if variable_type is None:
        variable_error = NoVariablesError(token)
    else:
        try:
            variable = variable_type.from_token(token)
        except ConversionError as e:
            variable_error = e
        else:
            return Token(TokenType.VARIABLE, variable)

    try:
        operand = operand_type.from_token(token)
    except ConversionError as operand_error:
        raise ClassificationError(token, evaluator_error, variable_error, operand_error) from None
    to_text = getattr(operand_type, 'to_text', str)
    return Token(TokenType.OPERAND, operand, to_text(operand))


class RPNValidator:
    """
    对分类后的Token序列做静态模拟（只关心计数，不关心数值）：
      操作数/变量: balance += 1
      求值器:     balance -= needed（不足则失败），再 balance += generated
    """

    @staticmethod
    def _step(balance, token):
        """单步模拟；栈不足时返回 None"""
        if not token.is_evaluator:
            return balance + 1
        needed = token.value.operands_needed()
        if balance < needed:
            return None
        return balance - needed + token.value.operands_generated()

    @staticmethod
    def check(tokens):
        """
        验证 + 栈深度规划（单次遍历）
        Returns:
            最大栈深度
        Raises:
            NotEnoughOperands / TooManyOperands
        """
        balance = 0
        max_depth = 0
        for position, token in enumerate(tokens):
            balance = RPNValidator._step(balance, token)
            if balance is None:
                raise NotEnoughOperands(position, token)
            max_depth = max(max_depth, balance)

        if balance == 0:
            raise NotEnoughOperands()
        if balance > 1:
            raise TooManyOperands(balance)
        return max_depth

    @staticmethod
    def validate(tokens):
        """只做元数验证，失败时抛出 ArityError"""
        RPNValidator.check(tokens)

    @staticmethod
    def is_valid(tokens):
        try:
            RPNValidator.check(tokens)
        except (NotEnoughOperands, TooManyOperands):
            return False
        return True

    @staticmethod
    def max_depth(tokens):
        """
        计算模拟过程中栈的最大深度，用于预分配求值栈。
        不做验证：下溢时 balance 截断为 0 继续。
        """
        balance = 0
        max_depth = 0
        for token in tokens:
            if token.is_evaluator:
                needed = token.value.operands_needed()
                balance = max(balance - needed, 0) + token.value.operands_generated()
            else:
                balance += 1
            max_depth = max(max_depth, balance)
        return max_depth

    @staticmethod
    def calculate_stack_size(tokens):
        """模拟结束时栈中的元素数量；下溢返回 None"""
        balance = 0
        for token in tokens:
            balance = RPNValidator._step(balance, token)
            if balance is None:
                return None
        return balance
