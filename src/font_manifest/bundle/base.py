"""Base abstractions for build bundles.

This module defines the bundle asset record handed over by the host
build, and the interface for anything that can produce a bundle.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class BundleAsset:
    """One output file of a build.

    Attributes:
        file_name: Output-relative path (e.g. ``assets/inter-x1.woff2``)
        original_file_name: Source-relative path, if the host tracked one
        source: Raw content for static assets
        type: ``"asset"`` for static files, ``"chunk"`` for emitted code
    """

    file_name: str
    original_file_name: str | None = None
    source: str | bytes | None = None
    type: str = "asset"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BundleAsset":
        """Build an asset from a host-shaped dict (camelCase keys).

        Example:
            >>> BundleAsset.from_mapping({"fileName": "a.css", "originalFileName": "src/a.css"})
            BundleAsset(file_name='a.css', original_file_name='src/a.css', source=None, type='asset')
        """
        return cls(
            file_name=data.get("fileName", ""),
            original_file_name=data.get("originalFileName"),
            source=data.get("source"),
            type=data.get("type", "asset"),
        )


# Output bundle keyed by output file name, in emission order
Bundle = dict[str, BundleAsset]


def bundle_from_mappings(entries: Mapping[str, "BundleAsset | Mapping[str, Any]"]) -> Bundle:
    """Convert a host bundle of plain dicts into BundleAsset records.

    Entries that already are BundleAsset records are kept as they are.
    """
    return {
        key: entry if isinstance(entry, BundleAsset) else BundleAsset.from_mapping(entry)
        for key, entry in entries.items()
    }


class BundleSource(ABC):
    """Abstract base class for bundle providers.

    Implementations rebuild the in-memory bundle the build hooks consume,
    e.g. from an output directory on disk.
    """

    @abstractmethod
    def load_bundle(self) -> Bundle:
        """Load every output asset of the build.

        Returns:
            Bundle keyed by output file name

        Raises:
            Exception: If the bundle cannot be assembled
        """
        pass
