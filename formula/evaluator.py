import logging
import threading
from collections import OrderedDict
from typing import Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd

from config.config import EXPRESSION_CONFIG, FORMULA_CONFIG
from core import Expression, EvaluationError, IncompatibleOperandType, get_operand_type
from operators import get_evaluator
from variables import NameVar

logger = logging.getLogger(__name__)


class FormulaEvaluator:
    """
    公式字符串 -> Expression（带 LRU 缓存）-> 求值。
    可对 DataFrame 的每一行求值，变量按列名解析（$close, $volume ...）。
    """

    def __init__(self, operand_type=None, evaluator=None, variable_type=NameVar,
                 cache_size=None, nan_on_error=None):
        evaluator = evaluator or EXPRESSION_CONFIG['default_evaluator']
        if operand_type is None:
            operand_type = (EXPRESSION_CONFIG['family_operand_types'].get(evaluator)
                            or EXPRESSION_CONFIG['default_operand_type'])
        self.operand_type = get_operand_type(operand_type)
        self.evaluator_type = get_evaluator(evaluator) if not isinstance(evaluator, type) else evaluator
        accepts = getattr(self.evaluator_type, 'accepts_operand_type', None)
        if accepts is not None and not accepts(self.operand_type):
            raise IncompatibleOperandType(self.evaluator_type, self.operand_type)
        self.variable_type = variable_type
        self.cache_size = cache_size or FORMULA_CONFIG['cache_size']
        self.nan_on_error = FORMULA_CONFIG['nan_on_error'] if nan_on_error is None else nan_on_error
        # 使用有限大小的OrderedDict实现LRU缓存
        self._expression_cache = OrderedDict()
        self._cache_lock = threading.Lock()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        while len(self._expression_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._expression_cache.popitem(last=False)

    def clear_cache(self):
        with self._cache_lock:
            self._expression_cache.clear()
            logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
            self._cache_hits = 0
            self._cache_misses = 0

    @property
    def cache_info(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses,
                'size': len(self._expression_cache), 'max_size': self.cache_size}

    def parse(self, formula: str) -> Expression:
        """
        解析公式；构造错误（ClassificationError / ArityError）直接抛给调用方，不缓存
        """
        key = ' '.join(formula.split())
        with self._cache_lock:
            if key in self._expression_cache:
                self._expression_cache.move_to_end(key)
                self._cache_hits += 1
                return self._expression_cache[key]
            self._cache_misses += 1

        expression = Expression.from_string(
            key, self.evaluator_type, self.operand_type, self.variable_type
        )
        logger.debug(f"Parsed formula '{key[:50]}' (max_stack={expression.max_stack})")

        with self._cache_lock:
            self._expression_cache[key] = expression
            self._manage_cache()
        return expression

    def evaluate(self, formula: Union[str, Expression], variables=None):
        """单次求值，返回操作数类型的标量"""
        expression = formula if isinstance(formula, Expression) else self.parse(formula)
        return expression.evaluate(variables)

    def evaluate_frame(self, formula: Union[str, Expression],
                       data: Union[pd.DataFrame, Dict]) -> pd.Series:
        """
        对 DataFrame 每一行求值
        Args:
            formula: RPN公式字符串，变量用列名: "$close $open - $open /"
            data: DataFrame或 {列名: Series/ndarray} 字典
        Returns:
            与 data 同索引的 Series；nan_on_error 时出错行为 NaN
        """
        expression = formula if isinstance(formula, Expression) else self.parse(formula)
        frame = self._prepare_data(data)

        values = []
        failures = 0
        for index, row in frame.iterrows():
            try:
                values.append(expression.evaluate(row))
            except EvaluationError as e:
                if not self.nan_on_error:
                    raise
                failures += 1
                logger.debug(f"Row {index!r} failed: {e}")
                values.append(np.nan)

        if failures:
            logger.warning(f"Formula '{str(expression)[:50]}' failed on {failures}/{len(frame)} rows")

        return pd.Series(values, index=frame.index, name=str(expression))

    def apply_formulas(self, data: pd.DataFrame, formulas: Iterable[str]) -> pd.DataFrame:
        """返回包含原始列和每个公式结果列的新 DataFrame"""
        transformed = data.copy()
        for formula in formulas:
            result = self.evaluate_frame(formula, data)
            transformed[result.name] = result
        return transformed

    @staticmethod
    def _prepare_data(data) -> pd.DataFrame:
        if isinstance(data, pd.DataFrame):
            return data
        if isinstance(data, dict):
            ref_index: Optional[pd.Index] = None
            for value in data.values():
                if isinstance(value, pd.Series):
                    ref_index = value.index
                    break
            return pd.DataFrame(
                {key: (value if isinstance(value, pd.Series) else pd.Series(np.asarray(value), index=ref_index))
                 for key, value in data.items()}
            )
        raise TypeError(f"Unsupported data type: {type(data).__name__}")
