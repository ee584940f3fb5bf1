"""核心模块 - 栈、Token分类、元数验证、表达式和RPN求值器"""
from .errors import (
    ExpressionError, ConversionError, ClassificationError, IncompatibleOperandType,
    ArityError, NotEnoughOperands, TooManyOperands,
    EvaluationError, VariableNotFound, StackUnderflowError
)
from .stack import Stack, pop_two
from .evaluator import Evaluator
from .operands import NumericOperand, OPERAND_TYPES, get_operand_type
from .token_system import TokenType, Token, classify_token, RPNValidator
from .rpn_evaluator import RPNEvaluator
from .expression import Expression

__all__ = [
    'ExpressionError', 'ConversionError', 'ClassificationError', 'IncompatibleOperandType',
    'ArityError', 'NotEnoughOperands', 'TooManyOperands',
    'EvaluationError', 'VariableNotFound', 'StackUnderflowError',
    'Stack', 'pop_two', 'Evaluator',
    'NumericOperand', 'OPERAND_TYPES', 'get_operand_type',
    'TokenType', 'Token', 'classify_token', 'RPNValidator',
    'RPNEvaluator', 'Expression'
]
