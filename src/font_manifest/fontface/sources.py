"""Resolution of @font-face ``src`` alternatives.

Each comma-separated alternative of a ``src`` value becomes a
FontFaceSource holding the ``url()`` target and the optional
``format()`` hint.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..css.tokens import FUNCTION, STRING, WORD, Token, parse_value_groups


@dataclass
class FontFaceSource:
    """One entry of a ``src`` declaration.

    Attributes:
        url: Bundle-relative reference, None when the entry has no ``url()``
        format: Explicit ``format()`` hint, if any
    """

    url: str | None
    format: str | None = None


def get_function_value(tokens: Sequence[Token], name: str) -> str | None:
    """Return the first word or string argument of the first ``name()`` call.

    Args:
        tokens: Tokens of one alternative
        name: Function name to look for (lower-case)

    Returns:
        The argument text, or None if the function or argument is missing
    """
    function = next(
        (token for token in tokens if token.type == FUNCTION and token.value == name),
        None,
    )
    if function is None:
        return None

    argument = next(
        (token for token in function.nodes if token.type in (WORD, STRING)),
        None,
    )
    return argument.value if argument else None


def resolve_source(tokens: Sequence[Token]) -> FontFaceSource:
    """Resolve one token group into its url and format."""
    return FontFaceSource(
        url=get_function_value(tokens, "url"),
        format=get_function_value(tokens, "format"),
    )


def parse_src_declaration(value: str | None) -> list[FontFaceSource]:
    """Parse a ``src`` value into one FontFaceSource per alternative.

    A missing declaration yields no sources. An empty or unparseable value
    still yields one source per group, with ``url`` set to None.
    """
    if value is None:
        return []
    return [resolve_source(group) for group in parse_value_groups(value)]
