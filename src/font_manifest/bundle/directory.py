"""Bundle source for a build output directory.

This module rebuilds a bundle from an output directory on disk and the
build manifest written into it, so fonts can be annotated after the
build process has exited.
"""

import json
import re
import sys
from pathlib import Path

from ..core.types import Manifest
from ..core.validator import validate_manifest_with_error_details
from ..fontface.extractor import is_stylesheet
from .base import Bundle, BundleAsset, BundleSource

DEFAULT_MANIFEST_FILE_NAME = "manifest.json"

# Output files that are code chunks rather than static assets
CHUNK_RE = re.compile(r"\.m?js$", re.IGNORECASE)


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents manifest entries from pointing outside the output directory.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class DirectoryBundleSource(BundleSource):
    """Bundle source backed by a build output directory.

    Every manifest entry with a ``file`` becomes a bundle asset whose
    original filename is the entry's ``src`` (or its key). Files listed
    only under ``css``/``assets`` of an entry are added without an
    original filename. Stylesheet contents are read from disk.

    Example:
        >>> source = DirectoryBundleSource(Path('dist'))
        >>> bundle = source.load_bundle()
    """

    def __init__(self, path: Path, manifest_file_name: str = DEFAULT_MANIFEST_FILE_NAME):
        """Initialize directory source.

        Args:
            path: Build output directory
            manifest_file_name: Manifest path relative to ``path``

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.path = path.resolve()

        if not self.path.exists():
            raise ValueError(f"Path does not exist: {self.path}")

        if not self.path.is_dir():
            raise ValueError(f"Path is not a directory: {self.path}")

        self.manifest_path = self.path / manifest_file_name

    def load_manifest(self) -> Manifest:
        """Read and validate the build manifest.

        Raises:
            OSError: If the manifest cannot be read
            json.JSONDecodeError: If the manifest is not JSON
            ValueError: If the manifest doesn't match the schema
        """
        with self.manifest_path.open("r", encoding="utf-8") as f:
            manifest = json.load(f)

        is_valid, error_msg = validate_manifest_with_error_details(manifest)
        if not is_valid:
            raise ValueError(f"Invalid manifest {self.manifest_path}: {error_msg}")

        return manifest  # type: ignore[no-any-return]

    def load_bundle(self) -> Bundle:
        """Build the bundle described by the manifest.

        Returns:
            Bundle keyed by output file name, in manifest order

        Raises:
            ValueError: If an entry points outside the output directory
        """
        manifest = self.load_manifest()
        bundle: Bundle = {}

        for key, entry in manifest.items():
            file_name = entry.get("file")
            if isinstance(file_name, str) and file_name not in bundle:
                bundle[file_name] = self._create_asset(file_name, entry.get("src") or key)

        for entry in manifest.values():
            for file_name in [*entry.get("css", []), *entry.get("assets", [])]:
                if isinstance(file_name, str) and file_name not in bundle:
                    bundle[file_name] = self._create_asset(file_name, None)

        return bundle

    def _create_asset(self, file_name: str, original_file_name: str | None) -> BundleAsset:
        output_path = self.path / file_name
        validate_path_safety(output_path, self.path)

        asset = BundleAsset(
            file_name=file_name,
            original_file_name=original_file_name,
            type="chunk" if CHUNK_RE.search(file_name) else "asset",
        )

        if is_stylesheet(asset):
            try:
                asset.source = output_path.read_bytes()
            except OSError as e:
                # Left without source; the scanner reports and skips it
                print(f"Warning: Failed to read {output_path}: {e}", file=sys.stderr)

        return asset
