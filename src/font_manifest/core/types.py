"""Type definitions for font manifest data.

This module defines TypedDict classes that mirror the JSON structure
written into the build manifest (see schemas/manifest.schema.json).
Keys use the camelCase spelling of the manifest file.
"""

from typing import Any, TypedDict


class FontFaceData(TypedDict):
    """Resolved @font-face metadata for one font file (descriptor without url)."""

    format: str | None  # Explicit format() hint or extension-derived format
    family: str | None  # font-family with quote characters removed
    weight: str  # font-weight, "normal" when absent
    style: str  # font-style, "normal" when absent
    display: str  # font-display, "auto" when absent
    mime: str  # MIME type derived from the file extension
    definedIn: list[str | None]  # Original filename(s) of the declaring stylesheet


class ManifestFontEntry(TypedDict):
    """Data merged into the manifest entry of a font file."""

    fontFace: FontFaceData


class ManifestStylesheetEntry(TypedDict):
    """Data merged into the manifest entry of a stylesheet."""

    fonts: list[str | None]  # Original filenames of the fonts it declares


class FontInfo(TypedDict):
    """Aggregated extraction result for one build."""

    fonts: dict[str | None, ManifestFontEntry]
    stylesheets: dict[str | None, ManifestStylesheetEntry]


# Flat manifest: original filename -> free-form build metadata
Manifest = dict[str, dict[str, Any]]
