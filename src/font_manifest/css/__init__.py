"""CSS parsing helpers built on tinycss2."""

from .tokens import Token, parse_value_groups, split_by_dividers, tokenize_value
from .tree import Declaration, ParseResult, StyleNode, TinycssNode, parse_stylesheet

__all__ = [
    "Declaration",
    "ParseResult",
    "StyleNode",
    "TinycssNode",
    "Token",
    "parse_stylesheet",
    "parse_value_groups",
    "split_by_dividers",
    "tokenize_value",
]
