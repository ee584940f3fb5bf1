import math

import numpy as np
import pytest

from core.errors import InvalidEvaluatorToken
from operators import FloatEvaluator


@pytest.mark.parametrize("text, expected", [
    ("3 4 +", 7.0),
    ("4 3 -", 1.0),
    ("3 4 *", 12.0),
    ("9 3 /", 3.0),
    ("9 3 %", 0.0),
    ("-7 2 %", -1.0),
    ("9 neg", -9.0),
    ("9 sqrt", 3.0),
    ("3 4 pow", 81.0),
    ("2 -1 pow", 0.5),
    ("4 log2", 2.0),
    ("0 exp", 1.0),
    ("2 4 swap /", 2.0),
    ("zero", 0.0),
    ("one", 1.0),
    ("3.3 round", 3.0),
    ("2.5 round", 3.0),
    ("-2.5 round", -3.0),
    ("3.3 3 + round neg 4 +", -2.0),
])
def test_evaluates(parse_float, text, expected):
    assert parse_float(text).evaluate() == expected


def test_keeps_operand_dtype(parse_float):
    assert isinstance(parse_float("3 4 +").evaluate(), np.float32)
    assert isinstance(parse_float("zero", 'float64').evaluate(), np.float64)


def test_division_by_zero_is_infinite(parse_float):
    result = parse_float("9 0 /").evaluate()
    assert math.isinf(result) and result > 0


def test_zero_by_zero_is_nan(parse_float):
    assert math.isnan(parse_float("0 0 /").evaluate())


def test_sqrt_of_negative_is_nan(parse_float):
    assert math.isnan(parse_float("-1 sqrt").evaluate())


def test_arity_declarations():
    assert FloatEvaluator.ADD.arity == (2, 1)
    assert FloatEvaluator.SWAP.arity == (2, 2)
    assert FloatEvaluator.ONE.arity == (0, 1)
    assert FloatEvaluator.LOG2.arity == (1, 1)


def test_from_token():
    assert FloatEvaluator.from_token('sqrt') is FloatEvaluator.SQRT
    with pytest.raises(InvalidEvaluatorToken):
        FloatEvaluator.from_token('&')


def test_renders_symbol():
    assert [str(e) for e in FloatEvaluator][:5] == ['+', '-', '*', '/', '%']


@pytest.mark.parametrize("text, operand_type, expected", [
    ("4503599627370497 round", 'float64', 4503599627370497.0),
    ("-4503599627370497 round", 'float64', -4503599627370497.0),
    ("0.49999999999999994 round", 'float64', 0.0),
    ("-0.49999999999999994 round", 'float64', 0.0),
    ("8388609 round", 'float32', 8388609.0),
    ("1.5 round", 'float64', 2.0),
    ("-1.5 round", 'float64', -2.0),
])
def test_round_is_exact_near_precision_limits(parse_float, text, operand_type, expected):
    result = parse_float(text, operand_type).evaluate()
    assert result == expected
    assert result.dtype == np.dtype(operand_type)


def test_round_keeps_non_finite_values(parse_float):
    assert math.isnan(parse_float("nan round", 'float64').evaluate())
    assert parse_float("inf round", 'float64').evaluate() == math.inf
