"""Merging of font information into the build manifest.

The manifest is owned by the host build: only entries that already exist
are updated, nothing is added.
"""

import json
import sys
from pathlib import Path

from .core.types import FontInfo, Manifest
from .core.validator import validate_manifest_with_error_details


def merge_manifest(manifest: Manifest, info: FontInfo) -> Manifest:
    """Shallow-merge font and stylesheet data into existing manifest entries.

    Font data is applied after stylesheet data. Keys missing from the
    manifest (including the ``None`` key of unresolved fonts) are dropped.

    Args:
        manifest: Parsed manifest, left unmodified
        info: Aggregated font information

    Returns:
        A new manifest with the merged entries
    """
    updated = dict(manifest)
    for filename, data in [*info["stylesheets"].items(), *info["fonts"].items()]:
        if filename in updated:
            updated[filename] = {**updated[filename], **data}  # type: ignore[index]
    return updated


def update_manifest_file(manifest_path: Path, info: FontInfo) -> bool:
    """Merge font information into the manifest file on disk.

    Nothing is read or written when no fonts were found. Read, parse,
    validation and write failures are reported on stderr and never raised.

    Args:
        manifest_path: Path of the manifest JSON file
        info: Aggregated font information

    Returns:
        True if the manifest was rewritten
    """
    if not info["fonts"]:
        return False

    try:
        with manifest_path.open("r", encoding="utf-8") as f:
            manifest = json.load(f)

        is_valid, error_msg = validate_manifest_with_error_details(manifest)
        if not is_valid:
            raise ValueError(f"invalid manifest: {error_msg}")

        updated = merge_manifest(manifest, info)

        with manifest_path.open("w", encoding="utf-8") as f:
            json.dump(updated, f, indent=2, ensure_ascii=False)

    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Warning: Error updating font manifest {manifest_path}: {e}", file=sys.stderr)
        return False

    return True
