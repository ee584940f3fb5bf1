import pytest

from core import Expression
from operators import FloatEvaluator, IntEvaluator
from variables import IndexVar


@pytest.fixture
def parse_float():
    def _parse(text, operand_type='float32', variable_type=None):
        return Expression.from_string(text, FloatEvaluator, operand_type, variable_type)
    return _parse


@pytest.fixture
def parse_int():
    def _parse(text, operand_type='int32', variable_type=None):
        return Expression.from_string(text, IntEvaluator, operand_type, variable_type)
    return _parse


@pytest.fixture
def parse_with_index_vars():
    def _parse(text, operand_type='float32'):
        return Expression.from_string(text, FloatEvaluator, operand_type, IndexVar)
    return _parse
