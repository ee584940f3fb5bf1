import numpy as np
import pandas as pd
import pytest

from core import ClassificationError, IncompatibleOperandType, NotEnoughOperands
from core.errors import InvalidDiv
from formula import FormulaEvaluator


@pytest.fixture
def prices():
    return pd.DataFrame(
        {'close': [10.0, 12.0, 9.0], 'open': [8.0, 12.0, 0.0]},
        index=pd.Index(['a', 'b', 'c'], name='ticker')
    )


def test_evaluate_frame_row_by_row(prices):
    evaluator = FormulaEvaluator()
    result = evaluator.evaluate_frame("$close $open - $open /", prices)
    assert list(result.index) == ['a', 'b', 'c']
    assert result.name == "$close $open - $open /"
    assert result['a'] == 0.25
    assert result['b'] == 0.0
    assert np.isinf(result['c'])


def test_failing_rows_become_nan():
    data = pd.DataFrame({'a': [1, 2, 7], 'b': [0, 1, 2]})
    evaluator = FormulaEvaluator(operand_type='int32', evaluator='int')
    result = evaluator.evaluate_frame("$a $b /", data)
    assert np.isnan(result.iloc[0])
    assert result.iloc[1] == 2
    assert result.iloc[2] == 3


def test_failing_rows_raise_when_configured():
    data = pd.DataFrame({'a': [1], 'b': [0]})
    evaluator = FormulaEvaluator(operand_type='int32', evaluator='int', nan_on_error=False)
    with pytest.raises(InvalidDiv):
        evaluator.evaluate_frame("$a $b /", data)


def test_dict_of_arrays():
    evaluator = FormulaEvaluator()
    result = evaluator.evaluate_frame("$x 2 *", {'x': np.array([1.0, 2.5])})
    assert list(result) == [2.0, 5.0]


def test_parse_errors_are_raised():
    evaluator = FormulaEvaluator()
    with pytest.raises(NotEnoughOperands):
        evaluator.parse("$close +")
    with pytest.raises(ClassificationError):
        evaluator.parse("$close &")
    assert evaluator.cache_info['size'] == 0


def test_parse_cache_hits_and_eviction():
    evaluator = FormulaEvaluator(cache_size=1)
    first = evaluator.parse("1 2 +")
    assert evaluator.parse("1  2 +") is first
    assert evaluator.cache_info['hits'] == 1
    evaluator.parse("3 4 +")
    assert evaluator.cache_info['size'] == 1
    assert evaluator.parse("1 2 +") is not first
    evaluator.clear_cache()
    assert evaluator.cache_info == {'hits': 0, 'misses': 0, 'size': 0, 'max_size': 1}


def test_evaluate_scalar_with_named_variables():
    evaluator = FormulaEvaluator()
    assert evaluator.evaluate("$x $y pow", {'x': 2.0, 'y': 10.0}) == 1024.0


def test_apply_formulas_adds_columns(prices):
    evaluator = FormulaEvaluator()
    transformed = evaluator.apply_formulas(prices, ["$close $open +", "$close neg"])
    assert list(transformed.columns) == ['close', 'open', '$close $open +', '$close neg']
    assert transformed.loc['a', '$close neg'] == -10.0
    assert list(prices.columns) == ['close', 'open']


def test_int_evaluator_defaults_to_int64():
    evaluator = FormulaEvaluator(evaluator='int')
    assert evaluator.operand_type.name == 'int64'
    result = evaluator.evaluate("3 4 +")
    assert result == 7
    assert isinstance(result, np.int64)


def test_float_evaluator_defaults_to_float64():
    assert FormulaEvaluator(evaluator='float').operand_type.name == 'float64'


@pytest.mark.parametrize("operand_type, evaluator", [
    ('float64', 'int'),
    ('int8', 'float'),
])
def test_rejects_mismatched_family_at_construction(operand_type, evaluator):
    with pytest.raises(IncompatibleOperandType):
        FormulaEvaluator(operand_type=operand_type, evaluator=evaluator)
