import argparse

import pytest

from examples import custom_expression
from examples.custom_expression import CannotAddOperands, MyOperand
from main import main


def _args(expression, **overrides):
    values = dict(expression=expression, operand_type='float64', evaluator='float',
                  var=None, named_var=None, show_plan=False, log_level='INFO')
    values.update(overrides)
    return argparse.Namespace(**values)


def test_prints_result(capsys):
    assert main(_args("3 4 +", operand_type='int32', evaluator='int')) == 0
    assert capsys.readouterr().out == "7\n"


def test_float_division_by_zero(capsys):
    assert main(_args("9 0 /")) == 0
    assert capsys.readouterr().out == "inf\n"


def test_positional_and_named_variables(capsys):
    assert main(_args("3 4 + $0 -", var=['3', '500'])) == 0
    assert capsys.readouterr().out == "4\n"
    assert main(_args("$x $y -", named_var=['x=10', 'y=2.5'])) == 0
    assert capsys.readouterr().out == "7.5\n"


def test_construction_error_exit_code(capsys):
    assert main(_args("4 +")) == 1
    assert "not enough operands" in capsys.readouterr().err


def test_evaluation_error_exit_code(capsys):
    assert main(_args("9 0 /", operand_type='int8', evaluator='int')) == 1
    assert "invalid division" in capsys.readouterr().err


def test_show_plan(capsys):
    assert main(_args("3 4 + 2 *", show_plan=True)) == 0
    out = capsys.readouterr().out
    assert "max_stack=2" in out
    assert out.endswith("14\n")


def test_rejects_int_evaluator_on_floats():
    assert main(_args("1 1 +", evaluator='int')) == 2


def test_custom_operand_and_evaluator():
    assert custom_expression.parse("1 1 +").evaluate() is MyOperand.NUMBER2
    assert custom_expression.parse("2 1 -").evaluate() is MyOperand.NUMBER1
    assert str(custom_expression.parse("1 1 + 1 -")) == "1 1 + 1 -"
    with pytest.raises(CannotAddOperands):
        custom_expression.parse("2 2 +").evaluate()


def test_custom_example_main(capsys):
    assert custom_expression.main(['prog', '1 1 +']) == 0
    assert "gives 2" in capsys.readouterr().out
    assert custom_expression.main(['prog', '1 3 +']) == 1


def test_int_evaluator_defaults_to_int64(capsys):
    assert main(_args("9223372036854775806 1 +", operand_type=None, evaluator='int')) == 0
    assert capsys.readouterr().out == "9223372036854775807\n"


def test_rejects_float_evaluator_on_integers():
    assert main(_args("127 1 +", operand_type='int8')) == 2
