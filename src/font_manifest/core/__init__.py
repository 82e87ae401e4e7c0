"""Core utilities for manifest handling.

This package contains the manifest type definitions and schema
validation used by the extraction pipeline and the manifest merger.
"""

from .types import FontFaceData, FontInfo, Manifest, ManifestFontEntry, ManifestStylesheetEntry
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "FontFaceData",
    "FontInfo",
    "Manifest",
    "ManifestFontEntry",
    "ManifestStylesheetEntry",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
