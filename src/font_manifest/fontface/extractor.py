"""Extraction of font descriptors from @font-face rules.

This module turns one parsed @font-face rule into one FontFaceDescriptor
per ``src`` alternative, and holds the extension-based helpers used to
derive formats and MIME types.
"""

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from ..core.types import FontFaceData
from .sources import parse_src_declaration

if TYPE_CHECKING:
    from ..bundle.base import BundleAsset
    from ..css.tree import Declaration, StyleNode

# MIME types keyed by lower-case file extension
FONT_MIME_TYPES = {
    "woff2": "font/woff2",
    "woff": "font/woff",
    "ttf": "font/truetype",
    "otf": "font/opentype",
    "eot": "font/embedded-opentype",
}

FONT_FILE_RE = re.compile(r"\.(woff2?|ttf|otf|eot)$", re.IGNORECASE)
STYLESHEET_RE = re.compile(r"\.css$", re.IGNORECASE)
QUOTES_RE = re.compile(r"['\"]")

DEFAULT_WEIGHT = "normal"
DEFAULT_STYLE = "normal"
DEFAULT_DISPLAY = "auto"

# Manifest spellings accepted as context keys
CONTEXT_KEYS = {"definedIn": "defined_in"}


@dataclass
class FontFaceDescriptor:
    """One resolved font face, one per ``src`` alternative."""

    url: str | None
    format: str | None
    family: str | None
    weight: str = DEFAULT_WEIGHT
    style: str = DEFAULT_STYLE
    display: str = DEFAULT_DISPLAY
    mime: str = "unknown"
    defined_in: list[str | None] = field(default_factory=list)

    def to_font_face(self) -> FontFaceData:
        """Manifest form of the descriptor, without the url."""
        return FontFaceData(
            format=self.format,
            family=self.family,
            weight=self.weight,
            style=self.style,
            display=self.display,
            mime=self.mime,
            definedIn=list(self.defined_in),
        )


def get_extension(filename: str | None) -> str | None:
    """Return the lower-case extension of ``filename`` without the dot.

    Query strings and fragments are ignored, so ``a.woff2?v=1#x`` gives
    ``woff2``. Returns an empty string when there is no extension and
    None when there is no filename.
    """
    if filename is None:
        return None
    path = re.split(r"[?#]", filename, maxsplit=1)[0]
    return PurePosixPath(path).suffix.lower().lstrip(".")


def get_mime_type(filename: str | None) -> str:
    """Return the font MIME type for ``filename``, or ``"unknown"``."""
    return FONT_MIME_TYPES.get(get_extension(filename) or "", "unknown")


def is_stylesheet(asset: "BundleAsset") -> bool:
    """Check whether a bundle entry is an emitted stylesheet."""
    return asset.type == "asset" and bool(asset.file_name) and bool(
        STYLESHEET_RE.search(asset.file_name)
    )


def is_font_file(asset: "BundleAsset") -> bool:
    """Check whether a bundle entry is an emitted font file."""
    return asset.type == "asset" and bool(asset.file_name) and bool(
        FONT_FILE_RE.search(asset.file_name)
    )


def get_all_declarations(rule: "StyleNode") -> dict[str, str]:
    """Collect the declarations of a rule, later ones overriding earlier ones."""
    declarations: dict[str, str] = {}

    def visit(declaration: "Declaration") -> None:
        declarations[declaration.prop] = declaration.value

    rule.walk_declarations(visit)
    return declarations


def extract_font_face_info(
    rule: "StyleNode", data: dict[str, Any] | None = None
) -> list[FontFaceDescriptor]:
    """Extract one descriptor per ``src`` alternative of a @font-face rule.

    Args:
        rule: The @font-face rule
        data: Context fields applied last. Keys are FontFaceDescriptor field
            names (``defined_in``, ``family``, ...) or their manifest spelling
            (``definedIn``), e.g. ``{"defined_in": ["fonts.css"]}``

    Returns:
        Descriptors in ``src`` order, empty when the rule has no ``src``
    """
    declarations = get_all_declarations(rule)
    sources = parse_src_declaration(declarations.get("src"))

    family = declarations.get("font-family")
    if family is not None:
        family = QUOTES_RE.sub("", family)

    descriptors = []
    for source in sources:
        fields = {
            "url": source.url,
            "format": source.format or get_extension(source.url) or None,
            "family": family,
            "weight": declarations.get("font-weight") or DEFAULT_WEIGHT,
            "style": declarations.get("font-style") or DEFAULT_STYLE,
            "display": declarations.get("font-display") or DEFAULT_DISPLAY,
            "mime": get_mime_type(source.url),
        }
        for key, value in (data or {}).items():
            fields[CONTEXT_KEYS.get(key, key)] = value
        descriptors.append(FontFaceDescriptor(**fields))

    return descriptors

