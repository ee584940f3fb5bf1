"""操作符模块 - 浮点和整数求值器"""
from .float_evaluator import FloatEvaluator
from .int_evaluator import IntEvaluator

# 求值器族注册表
EVALUATORS = {
    'float': FloatEvaluator,
    'int': IntEvaluator,
}


def get_evaluator(name):
    try:
        return EVALUATORS[name]
    except KeyError:
        raise KeyError(f"Unknown evaluator family: {name!r}; available: {', '.join(EVALUATORS)}") from None


__all__ = ['FloatEvaluator', 'IntEvaluator', 'EVALUATORS', 'get_evaluator']
