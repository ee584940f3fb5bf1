"""工具模块"""
from .formatting import split_tokens, render, describe, format_plan

__all__ = ['split_tokens', 'render', 'describe', 'format_plan']
