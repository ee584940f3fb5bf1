"""RPN表达式求值器 - 在栈上重放已验证的Token序列"""
import logging

from core.errors import (
    ConversionError, StackUnderflowError, VariableNotFound, VariableTypeError
)
from core.stack import Stack
from core.token_system import TokenType
from variables.lookup import get_variable

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估已验证表达式的值"""

    @staticmethod
    def evaluate(expression, variables=None):
        """
        Args:
            expression: 已验证的 Expression
            variables: 变量容器（list / dict / pd.Series ...），无变量时可为 None
        Returns:
            表达式的值（操作数类型）
        Raises:
            EvaluationError: 求值器领域错误、VariableNotFound、VariableTypeError
        """
        operand_type = expression.operand_type
        stack = Stack.with_capacity(expression.max_stack,
                                    dtype=getattr(operand_type, 'dtype', None))

        for token in expression.tokens:
            if token.type == TokenType.OPERAND:
                stack.push(token.value)

            elif token.type == TokenType.VARIABLE:
                stack.push(RPNEvaluator._resolve(token.value, variables, operand_type))

            else:
                token.value.evaluate(stack)

        if stack.is_empty():
            # 构造时已证明恰好剩一个值
            raise StackUnderflowError(f"no result left after evaluating {expression}")
        return stack.pop()

    @staticmethod
    def _resolve(variable, variables, operand_type):
        key = variable.key if hasattr(variable, 'key') else variable
        value = get_variable(variables, key)
        if value is None:
            logger.debug(f"Variable {variable} missing from {type(variables).__name__}")
            raise VariableNotFound(variable)

        coerce = getattr(operand_type, 'coerce', None)
        if coerce is None:
            return value
        try:
            return coerce(value)
        except (TypeError, ValueError, ConversionError) as e:
            raise VariableTypeError(variable, value, getattr(operand_type, 'name', operand_type)) from e
