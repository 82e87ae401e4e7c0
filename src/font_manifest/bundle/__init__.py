"""Bundle model and bundle sources.

Cross-referencing lives in ``font_manifest.bundle.crossref``; it is not
re-exported here because it depends on the stylesheet scanner, which
itself depends on this package.
"""

from .base import Bundle, BundleAsset, BundleSource, bundle_from_mappings
from .directory import DirectoryBundleSource, validate_path_safety

__all__ = [
    "Bundle",
    "BundleAsset",
    "BundleSource",
    "DirectoryBundleSource",
    "bundle_from_mappings",
    "validate_path_safety",
]
