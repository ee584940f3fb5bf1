"""
自定义操作数和求值器的例子。

只要提供：
  1. 操作数类型：from_token(token)，失败抛出 ConversionError
  2. 求值器类型：继承 Evaluator，实现 from_token / operands_needed /
     operands_generated / evaluate
就可以直接交给 Expression 使用，核心代码无需修改。

    python -m examples.custom_expression "1 1 +"
"""
import sys
from enum import Enum

from core import ConversionError, EvaluationError, Evaluator, Expression, ExpressionError, pop_two
from core.errors import InvalidEvaluatorToken


class MyOperand(Enum):
    NUMBER1 = '1'
    NUMBER2 = '2'

    @classmethod
    def from_token(cls, token):
        try:
            return cls(token)
        except ValueError:
            raise ConversionError(token, f"{token!r} is neither '1' nor '2'") from None

    def to_text(self):
        return self.value


class MyOperandType:
    """Expression 层面的操作数类型"""

    from_token = staticmethod(MyOperand.from_token)

    @staticmethod
    def to_text(value):
        return value.to_text()


class CannotAddOperands(EvaluationError):
    pass


class CannotSubOperands(EvaluationError):
    pass


class MyEvaluator(Evaluator, Enum):
    ADD = '+'
    SUB = '-'

    @classmethod
    def from_token(cls, token):
        try:
            return cls(token)
        except ValueError:
            raise InvalidEvaluatorToken(token, 'my evaluator') from None

    def operands_needed(self):
        return 2

    def operands_generated(self):
        return 1

    def evaluate(self, stack):
        left, right = pop_two(stack)
        if self is MyEvaluator.ADD:
            if (left, right) != (MyOperand.NUMBER1, MyOperand.NUMBER1):
                raise CannotAddOperands(f"cannot add {left.value} and {right.value}")
            stack.push(MyOperand.NUMBER2)
        else:
            if (left, right) != (MyOperand.NUMBER2, MyOperand.NUMBER1):
                raise CannotSubOperands(f"cannot subtract {right.value} from {left.value}")
            stack.push(MyOperand.NUMBER1)

    def __str__(self):
        return self.value


def parse(text):
    return Expression.from_string(text, MyEvaluator, MyOperandType)


def main(argv):
    text = argv[1] if len(argv) > 1 else "1 1 +"
    try:
        expression = parse(text)
    except ExpressionError as e:
        print(f"Parsing results in {type(e).__name__}: {e}")
        return 1

    try:
        print(f"Evaluation of {text!r} gives {expression.evaluate().value}")
    except EvaluationError as e:
        print(f"Evaluation of {text!r} fails: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
