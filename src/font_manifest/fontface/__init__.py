"""@font-face source resolution and descriptor extraction."""

from .extractor import (
    FONT_MIME_TYPES,
    FontFaceDescriptor,
    extract_font_face_info,
    get_extension,
    get_mime_type,
    is_font_file,
    is_stylesheet,
)
from .sources import FontFaceSource, parse_src_declaration, resolve_source

__all__ = [
    "FONT_MIME_TYPES",
    "FontFaceDescriptor",
    "FontFaceSource",
    "extract_font_face_info",
    "get_extension",
    "get_mime_type",
    "is_font_file",
    "is_stylesheet",
    "parse_src_declaration",
    "resolve_source",
]
