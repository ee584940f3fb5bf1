"""公式模块 - 带缓存的公式求值和 DataFrame 批量求值"""
from .evaluator import FormulaEvaluator

__all__ = ['FormulaEvaluator']
