"""Stylesheet syntax trees.

The extraction code only needs two capabilities from a parsed stylesheet:
walking at-rules by name and walking declarations. ``StyleNode`` names
that interface; ``TinycssNode`` implements it over tinycss2.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import tinycss2


@dataclass
class Declaration:
    """A single ``property: value`` pair.

    Attributes:
        prop: Property name (lower-cased)
        value: Serialized value without surrounding whitespace or ``!important``
        important: Whether the declaration carried ``!important``
    """

    prop: str
    value: str
    important: bool = False


@runtime_checkable
class StyleNode(Protocol):
    """A stylesheet, or a rule inside one, that can be walked."""

    def walk_at_rules(self, name: str, visitor: Callable[["StyleNode"], None]) -> None:
        """Call ``visitor`` for every at-rule named ``name`` below this node."""
        ...

    def walk_declarations(self, visitor: Callable[[Declaration], None]) -> None:
        """Call ``visitor`` for every declaration below this node, in order."""
        ...


class TinycssNode:
    """StyleNode over a list of tinycss2 nodes.

    Block contents are parsed lazily when a rule is walked into.
    """

    def __init__(self, nodes: Sequence[Any], name: str | None = None):
        self.nodes = nodes
        self.name = name

    def __repr__(self) -> str:
        return f"TinycssNode(name={self.name!r}, nodes={len(self.nodes)})"

    @classmethod
    def for_rule(cls, rule: Any) -> "TinycssNode":
        """Wrap the block contents of a tinycss2 at-rule or qualified rule."""
        name = rule.lower_at_keyword if rule.type == "at-rule" else None

        if rule.content is None:
            return cls([], name)

        if rule.type == "at-rule" and name not in DECLARATION_AT_RULES:
            # Conditional group rules (@media, @supports, @layer...) hold rules
            nodes = tinycss2.parse_rule_list(
                rule.content, skip_comments=True, skip_whitespace=True
            )
        else:
            nodes = tinycss2.parse_blocks_contents(
                rule.content, skip_comments=True, skip_whitespace=True
            )
        return cls(nodes, name)

    def walk_at_rules(self, name: str, visitor: Callable[[StyleNode], None]) -> None:
        name = name.lower()
        for node in self.nodes:
            if node.type not in ("at-rule", "qualified-rule"):
                continue
            child = TinycssNode.for_rule(node)
            if node.type == "at-rule" and node.lower_at_keyword == name:
                visitor(child)
            child.walk_at_rules(name, visitor)

    def walk_declarations(self, visitor: Callable[[Declaration], None]) -> None:
        for node in self.nodes:
            if node.type == "declaration":
                visitor(
                    Declaration(
                        prop=node.lower_name,
                        value=tinycss2.serialize(node.value).strip(),
                        important=node.important,
                    )
                )
            elif node.type in ("at-rule", "qualified-rule"):
                TinycssNode.for_rule(node).walk_declarations(visitor)


# At-rules whose block holds declarations rather than rules
DECLARATION_AT_RULES = {
    "font-face",
    "font-palette-values",
    "counter-style",
    "page",
    "property",
    "viewport",
}


@dataclass
class ParseResult:
    """Outcome of parsing a stylesheet: a tree or a diagnostic."""

    tree: StyleNode | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_stylesheet(css: str | bytes) -> ParseResult:
    """Parse stylesheet text into a walkable tree.

    Never raises for malformed CSS. Top-level parse errors reported by
    tinycss2, and at-rules swallowed into a selector, turn into a
    diagnostic and no tree.

    Args:
        css: Stylesheet text, or raw bytes (encoding detected from ``@charset``/BOM)

    Returns:
        ParseResult holding either the tree or the first problem found
    """
    if isinstance(css, bytes):
        rules, _ = tinycss2.parse_stylesheet_bytes(
            css, skip_comments=True, skip_whitespace=True
        )
    else:
        rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)

    for rule in rules:
        if rule.type == "error":
            return ParseResult(
                error=f"{rule.source_line}:{rule.source_column}: {rule.message}"
            )

        if rule.type == "qualified-rule":
            # A stray ";" makes a following at-rule part of a selector
            keyword = next(
                (token for token in rule.prelude if token.type == "at-keyword"), None
            )
            if keyword is not None:
                return ParseResult(
                    error=(
                        f"{keyword.source_line}:{keyword.source_column}: "
                        f"@{keyword.value} inside a selector"
                    )
                )

    return ParseResult(tree=TinycssNode(rules))
