"""Tokenizing and splitting of CSS declaration values.

A value such as ``url(a.woff2) format("woff2"), url(a.ttf)`` is turned
into a flat list of typed tokens and then split at comma dividers into
one group per alternative.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import tinycss2

T = TypeVar("T")

# Token types produced by tokenize_value
FUNCTION = "function"
WORD = "word"
STRING = "string"
DIV = "div"
SPACE = "space"


@dataclass
class Token:
    """One token of a CSS value.

    Attributes:
        type: One of ``function``, ``word``, ``string``, ``div`` or ``space``
        value: Function name (lower-cased) or the token text
        nodes: Argument tokens of a function, empty otherwise
    """

    type: str
    value: str
    nodes: list["Token"] = field(default_factory=list)


def _convert(node: Any) -> Token | None:
    if node.type == "whitespace":
        return Token(SPACE, " ")
    if node.type == "literal" and node.value == ",":
        return Token(DIV, ",")
    if node.type == "string":
        return Token(STRING, node.value)
    if node.type == "ident":
        return Token(WORD, node.value)
    if node.type == "url":
        # Unquoted url(...) comes out of tinycss2 as a single token
        return Token(FUNCTION, "url", [Token(WORD, node.value)])
    if node.type == "function":
        return Token(FUNCTION, node.lower_name, _convert_all(node.arguments))
    if node.type in ("comment", "error"):
        return None
    return Token(WORD, node.serialize())


def _convert_all(nodes: Iterable[Any]) -> list[Token]:
    tokens = []
    for node in nodes:
        token = _convert(node)
        if token is not None:
            tokens.append(token)
    return tokens


def tokenize_value(value: str) -> list[Token]:
    """Tokenize a raw CSS value into a flat list of top-level tokens.

    Malformed input never raises; unparseable parts are dropped.

    Args:
        value: Raw declaration value

    Returns:
        Ordered list of tokens, function arguments nested in ``nodes``
    """
    return _convert_all(tinycss2.parse_component_value_list(value or ""))


def split_array(items: Iterable[T], predicate: Callable[[T], bool]) -> list[list[T]]:
    """Split a sequence into groups at items matching ``predicate``.

    Matching items are dropped. There is always at least one group.

    Example:
        >>> split_array([1, 0, 2, 3], lambda x: x == 0)
        [[1], [2, 3]]
    """
    groups: list[list[T]] = [[]]
    for item in items:
        if predicate(item):
            groups.append([])
        else:
            groups[-1].append(item)
    return groups


def split_by_dividers(tokens: Iterable[Token]) -> list[list[Token]]:
    """Split tokens into comma-separated groups."""
    return split_array(tokens, lambda token: token.type == DIV)


def parse_value_groups(value: str) -> list[list[Token]]:
    """Tokenize a value and split it into its comma-separated alternatives."""
    return split_by_dividers(tokenize_value(value))
