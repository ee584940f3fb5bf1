"""core/errors.py - 表达式构造与求值的异常体系"""


class ExpressionError(Exception):
    """所有表达式相关错误的基类"""


# 类型转换 ====================================

class ConversionError(ExpressionError):
    """单个Token无法转换为某种类型（操作数/变量/求值器）"""

    def __init__(self, token, message=None):
        self.token = token
        super().__init__(message or f"cannot convert token {token!r}")


class InvalidEvaluatorToken(ConversionError):
    def __init__(self, token, family=None):
        self.family = family
        name = family or 'evaluator'
        super().__init__(token, f"{token!r} is not a valid {name} symbol")


class InvalidOperandToken(ConversionError):
    def __init__(self, token, type_name=None, reason=None):
        self.type_name = type_name
        self.reason = reason
        message = f"{token!r} is not a valid {type_name or 'operand'}"
        if reason:
            message += f" ({reason})"
        super().__init__(token, message)


class InvalidVariableName(ConversionError):
    """缺少变量前缀（如 '$'）"""

    def __init__(self, token, sigil='$'):
        self.sigil = sigil
        super().__init__(token, f"{token!r} does not start with variable sigil {sigil!r}")


class VariableIndexError(ConversionError):
    """有变量前缀，但索引部分无法解析"""

    def __init__(self, token, reason=None):
        self.reason = reason
        super().__init__(token, f"invalid variable index in {token!r}: {reason}")


class NoVariablesError(ConversionError):
    def __init__(self, token):
        super().__init__(token, f"{token!r}: this expression does not accept variables")


class ClassificationError(ExpressionError):
    """Token 既不是求值器，也不是变量，也不是操作数；保留三个失败原因"""

    def __init__(self, token, evaluator_error, variable_error, operand_error):
        self.token = token
        self.evaluator_error = evaluator_error
        self.variable_error = variable_error
        self.operand_error = operand_error
        super().__init__(
            f"invalid token {token!r}: "
            f"evaluator: {evaluator_error}; "
            f"variable: {variable_error}; "
            f"operand: {operand_error}"
        )

    @property
    def errors(self):
        return self.evaluator_error, self.variable_error, self.operand_error


class IncompatibleOperandType(ExpressionError):
    """求值器家族不能处理该操作数类型（如整数求值器 + float64）"""

    def __init__(self, evaluator_type, operand_type):
        self.evaluator_type = evaluator_type
        self.operand_type = operand_type
        evaluator_name = getattr(evaluator_type, '__name__', evaluator_type)
        operand_name = getattr(operand_type, 'name', operand_type)
        super().__init__(f"{evaluator_name} cannot evaluate {operand_name} operands")


# 元数检查 ====================================

class ArityError(ExpressionError):
    pass


class NotEnoughOperands(ArityError):
    def __init__(self, position=None, token=None):
        self.position = position
        self.token = token
        if token is None:
            message = "not enough operands: expression leaves no result"
        else:
            message = f"not enough operands for {token} at position {position}"
        super().__init__(message)


class TooManyOperands(ArityError):
    def __init__(self, remaining):
        self.remaining = remaining
        super().__init__(f"too many operands: {remaining} values left on the stack, expected 1")


# 求值 ========================================

class EvaluationError(ExpressionError):
    """求值阶段的领域错误，总是返回给调用者"""


class OperandsError(EvaluationError):
    """携带出错操作数的求值错误，按 (类型, 操作数) 比较"""

    description = "evaluation failed"

    def __init__(self, *operands):
        self.operands = operands
        super().__init__(f"{self.description}: {', '.join(repr(op) for op in operands)}")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.operands == other.operands

    def __hash__(self):
        return hash((type(self), self.operands))


class IntEvaluateError(OperandsError):
    pass


class AddOverflow(IntEvaluateError):
    description = "addition overflow"


class SubUnderflow(IntEvaluateError):
    description = "subtraction underflow"


class MulOverflow(IntEvaluateError):
    description = "multiplication overflow"


class InvalidDiv(IntEvaluateError):
    description = "invalid division"


class InvalidRem(IntEvaluateError):
    description = "invalid remainder"


class NegOverflow(IntEvaluateError):
    description = "negation overflow"


class PowOverflow(IntEvaluateError):
    description = "power overflow"


class InvalidExponent(IntEvaluateError):
    description = "exponent is not a non-negative integer"


class VariableNotFound(EvaluationError):
    def __init__(self, variable):
        self.variable = variable
        super().__init__(f"variable {variable} not found in container")


class VariableTypeError(EvaluationError):
    def __init__(self, variable, value, type_name):
        self.variable = variable
        self.value = value
        super().__init__(f"variable {variable} holds {value!r}, not convertible to {type_name}")


# 内部不变量 ==================================

class StackUnderflowError(RuntimeError):
    """栈下溢：已验证的表达式不应触发，出现即说明求值器声明的元数不诚实"""
