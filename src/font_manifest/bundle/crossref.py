"""Cross-referencing of CSS urls with bundle outputs.

Urls inside emitted stylesheets point at hashed output files. This module
maps them back to the original filenames the manifest is keyed by, and
aggregates scan results into the data merged into the manifest.
"""

from collections.abc import Iterable, Mapping
from typing import TypeVar

from ..core.types import FontInfo, ManifestFontEntry, ManifestStylesheetEntry
from ..scanner import scan_bundle
from .base import Bundle

K = TypeVar("K")
V = TypeVar("V")


def get_original_filename(bundle: Bundle, url: str | None) -> str | None:
    """Resolve a bundle-relative url to the original filename of its asset.

    The first asset whose output file name is a suffix of ``url`` wins,
    which tolerates relative prefixes such as ``./`` or ``../``.

    Example:
        >>> bundle = {"assets/a-x1.woff2": BundleAsset("assets/a-x1.woff2", "src/a.woff2")}
        >>> get_original_filename(bundle, "./assets/a-x1.woff2")
        'src/a.woff2'

    Args:
        bundle: Output bundle keyed by file name
        url: Url found in a stylesheet

    Returns:
        Original filename, or None when nothing matches
    """
    if not url:
        return None

    for asset in bundle.values():
        if asset.file_name and url.endswith(asset.file_name):
            return asset.original_file_name or None

    return None


def extract_font_info(bundle: Bundle) -> FontInfo:
    """Extract font information from every stylesheet in a bundle.

    Fonts resolving to the same original filename overwrite each other,
    the last stylesheet in bundle order winning. Unresolved fonts are
    collected under the ``None`` key.

    Args:
        bundle: Output bundle keyed by file name

    Returns:
        FontInfo with ``fonts`` keyed by font original filename and
        ``stylesheets`` keyed by stylesheet original filename
    """

    def name(url: str | None) -> str | None:
        return get_original_filename(bundle, url)

    info = {scan.stylesheet: scan.fonts for scan in scan_bundle(bundle)}

    fonts: dict[str | None, ManifestFontEntry] = {}
    for descriptors in info.values():
        for descriptor in descriptors:
            fonts[name(descriptor.url)] = ManifestFontEntry(fontFace=descriptor.to_font_face())

    stylesheets = {
        key: ManifestStylesheetEntry(fonts=[name(descriptor.url) for descriptor in descriptors])
        for key, descriptors in info.items()
    }

    return FontInfo(fonts=fonts, stylesheets=stylesheets)


def reverse_relation(mapping: Mapping[K, Iterable[V]]) -> dict[V, list[K]]:
    """Invert a one-to-many mapping.

    Example:
        >>> reverse_relation({"a.css": ["x.woff2", "y.woff2"], "b.css": ["x.woff2"]})
        {'x.woff2': ['a.css', 'b.css'], 'y.woff2': ['a.css']}
    """
    reversed_mapping: dict[V, list[K]] = {}
    for key, values in mapping.items():
        for value in values:
            reversed_mapping.setdefault(value, []).append(key)
    return reversed_mapping


def stylesheets_by_font(info: FontInfo) -> dict[str | None, list[str | None]]:
    """Map each font original filename to the stylesheets that declare it."""
    return reverse_relation(
        {stylesheet: entry["fonts"] for stylesheet, entry in info["stylesheets"].items()}
    )
