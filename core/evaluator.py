"""core/evaluator.py - 求值器（操作符）接口"""


class Evaluator:
    """
    所有求值器的能力接口。

    operands_needed / operands_generated 必须是纯函数，
    并且与 evaluate 实际弹出/压入的数量一致 —— RPNValidator 的元数证明
    和栈深度规划都依赖这一点。

    子类（通常是 Enum）需要实现：
      - from_token(token): 类方法，失败时抛出 ConversionError
      - operands_needed(), operands_generated()
      - evaluate(stack): 失败时抛出 EvaluationError
      - __str__: 规范文本形式，用于渲染
    可选覆盖 accepts_operand_type(operand_type)：默认接受任何操作数类型。
    """

    @classmethod
    def from_token(cls, token):
        raise NotImplementedError

    @classmethod
    def accepts_operand_type(cls, operand_type):
        return True

    def operands_needed(self):
        raise NotImplementedError

    def operands_generated(self):
        raise NotImplementedError

    def evaluate(self, stack):
        raise NotImplementedError

    @property
    def arity(self):
        return self.operands_needed(), self.operands_generated()
