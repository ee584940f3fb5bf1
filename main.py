"""主程序入口 - 命令行解析并求值 RPN 表达式"""
import argparse
import logging
import sys

from config.config import EXPRESSION_CONFIG, LOGGING_CONFIG, SUPPORTED_OPERAND_TYPES, validate_config
from core import Expression, ExpressionError, get_operand_type
from operators import EVALUATORS, get_evaluator
from utils.formatting import format_plan, split_tokens
from variables import IndexVar, NameVar

logger = logging.getLogger(__name__)


def _parse_named_vars(pairs):
    variables = {}
    for pair in pairs:
        name, sep, value = pair.partition('=')
        if not sep or not name:
            raise ValueError(f"--named_var expects name=value, got {pair!r}")
        variables[name] = value
    return variables


def main(args):
    validate_config()

    if args.var and args.named_var:
        logger.error("--var and --named_var cannot be combined")
        return 2

    if args.named_var:
        variable_type = NameVar
        try:
            variables = _parse_named_vars(args.named_var)
        except ValueError as e:
            logger.error(str(e))
            return 2
    else:
        variable_type = IndexVar
        variables = list(args.var or [])

    evaluator_type = get_evaluator(args.evaluator)
    operand_type = get_operand_type(
        args.operand_type or EXPRESSION_CONFIG["family_operand_types"][args.evaluator]
    )
    if not evaluator_type.accepts_operand_type(operand_type):
        logger.error(f"{args.evaluator} evaluator cannot use {operand_type.name} operands")
        return 2

    logger.debug(f"Evaluator: {args.evaluator}, operand type: {operand_type.name}")

    try:
        expression = Expression.from_tokens(
            split_tokens(args.expression), evaluator_type, operand_type, variable_type
        )
    except ExpressionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.show_plan:
        print(format_plan(expression))

    try:
        result = expression.evaluate(variables)
    except ExpressionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(expression.operand_type.to_text(result))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate a Reverse Polish Notation expression")

    parser.add_argument(
        "expression",
        type=str,
        help='RPN expression, tokens separated by spaces, e.g. "3 4 + $0 -"'
    )
    parser.add_argument(
        "--operand_type",
        type=str,
        default=None,
        choices=SUPPORTED_OPERAND_TYPES,
        help="Numeric type of operands (default: float64 for float, int64 for int)"
    )
    parser.add_argument(
        "--evaluator",
        type=str,
        default=EXPRESSION_CONFIG["default_evaluator"],
        choices=sorted(EVALUATORS),
        help="Evaluator family: checked signed integers or IEEE floats"
    )
    parser.add_argument(
        "--var",
        action="append",
        help="Positional variable value, referenced as $0, $1, ... (repeatable)"
    )
    parser.add_argument(
        "--named_var",
        action="append",
        help="Named variable name=value, referenced as $name (repeatable)"
    )
    parser.add_argument(
        "--show_plan",
        action="store_true",
        help="Print token roles, stack depths and max_stack before the result"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level"
    )

    args = parser.parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )

    sys.exit(main(args))
