"""utils/formatting.py - 文本切分与渲染"""
from config.config import EXPRESSION_CONFIG


def split_tokens(text):
    """按空白切分原始文本，得到Token序列"""
    return text.split()


def render(expression, separator=None):
    """
    把表达式渲染回文本：每个Token的规范形式，单个空格分隔，保持原顺序。
    render(parse("3 4 +")) == "3 4 +"
    """
    separator = EXPRESSION_CONFIG['token_separator'] if separator is None else separator
    return separator.join(token.text for token in expression.tokens)


def describe(expression):
    """
    逐Token列出角色和模拟栈深度，用于调试/命令行 --show_plan
    Returns:
        [(text, role, depth_after), ...]
    """
    rows = []
    depth = 0
    for token in expression.tokens:
        if token.is_evaluator:
            depth = depth - token.value.operands_needed() + token.value.operands_generated()
        else:
            depth += 1
        rows.append((token.text, token.type.value, depth))
    return rows


def format_plan(expression):
    rows = describe(expression)
    width = max((len(text) for text, _, _ in rows), default=0)
    lines = [f"{text:<{width}}  {role:<9}  depth={depth}" for text, role, depth in rows]
    lines.append(f"max_stack={expression.max_stack}")
    return '\n'.join(lines)
