"""Stylesheet scanning.

This module parses stylesheet assets of a bundle and extracts the
descriptors of every @font-face rule they contain, nested ones included.
"""

import sys
from dataclasses import dataclass, field

from .bundle.base import Bundle, BundleAsset
from .css.tree import StyleNode, parse_stylesheet
from .fontface.extractor import FontFaceDescriptor, extract_font_face_info, is_stylesheet


@dataclass
class StylesheetScan:
    """Result of scanning one stylesheet.

    Attributes:
        stylesheet: Original filename of the stylesheet
        fonts: Descriptors in document order
        error: Diagnostic when the stylesheet could not be parsed
    """

    stylesheet: str | None
    fonts: list[FontFaceDescriptor] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_all_at_rules(root: StyleNode, name: str) -> list[StyleNode]:
    """Collect every at-rule named ``name`` anywhere in the tree."""
    rules: list[StyleNode] = []
    root.walk_at_rules(name, rules.append)
    return rules


def scan_stylesheet(asset: BundleAsset) -> StylesheetScan:
    """Extract font descriptors from a stylesheet asset.

    Args:
        asset: Bundle asset holding the stylesheet source

    Returns:
        StylesheetScan with the descriptors, or with an error and no
        descriptors if the stylesheet could not be parsed
    """
    stylesheet = asset.original_file_name

    if asset.source is None:
        return StylesheetScan(stylesheet, error="stylesheet has no source")

    result = parse_stylesheet(asset.source)
    if not result.ok or result.tree is None:
        return StylesheetScan(stylesheet, error=result.error)

    context = {"defined_in": [stylesheet]}
    fonts = [
        descriptor
        for rule in get_all_at_rules(result.tree, "font-face")
        for descriptor in extract_font_face_info(rule, context)
    ]
    return StylesheetScan(stylesheet, fonts)


def scan_bundle(bundle: Bundle) -> list[StylesheetScan]:
    """Scan every stylesheet asset of a bundle.

    A stylesheet that fails to parse, or whose extraction raises, is
    reported on stderr and skipped; the remaining stylesheets are still
    processed.

    Args:
        bundle: Output bundle keyed by file name

    Returns:
        Successful scans in bundle order
    """
    scans = []
    for asset in bundle.values():
        if not is_stylesheet(asset):
            continue

        try:
            scan = scan_stylesheet(asset)
        except Exception as e:
            print(
                f"Warning: Failed to parse CSS for font info in {asset.file_name}: {e}",
                file=sys.stderr,
            )
            continue

        if not scan.ok:
            print(
                f"Warning: Failed to parse CSS for font info in {asset.file_name}: {scan.error}",
                file=sys.stderr,
            )
            continue

        scans.append(scan)

    return scans
