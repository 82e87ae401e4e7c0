"""Font Manifest.

This package inspects the stylesheets of a finished build, extracts
their @font-face metadata, maps the referenced font files back to their
original filenames, and merges the result into the build manifest.
"""

# Build hooks
from .plugin import BuildConfig, BuildContext, FontManifestPlugin

# Extraction pipeline
from .bundle import Bundle, BundleAsset, BundleSource, DirectoryBundleSource
from .bundle.crossref import extract_font_info, get_original_filename, stylesheets_by_font
from .fontface import FontFaceDescriptor, extract_font_face_info, get_mime_type
from .scanner import StylesheetScan, scan_bundle, scan_stylesheet

# Manifest handling
from .core import FontInfo, Manifest, validate_manifest, validate_manifest_with_error_details
from .manifest import merge_manifest, update_manifest_file

__version__ = "0.1.0"

__all__ = [
    # Build hooks
    "BuildConfig",
    "BuildContext",
    "FontManifestPlugin",
    # Extraction pipeline
    "Bundle",
    "BundleAsset",
    "BundleSource",
    "DirectoryBundleSource",
    "FontFaceDescriptor",
    "StylesheetScan",
    "extract_font_face_info",
    "extract_font_info",
    "get_mime_type",
    "get_original_filename",
    "scan_bundle",
    "scan_stylesheet",
    "stylesheets_by_font",
    # Manifest handling
    "FontInfo",
    "Manifest",
    "merge_manifest",
    "update_manifest_file",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
