"""Command-line interface for font manifest annotation.

This module provides the CLI entry point for annotating the manifest of
an already-built output directory.
"""

import argparse
import json
import sys
from pathlib import Path

from .bundle.crossref import stylesheets_by_font
from .bundle.directory import DEFAULT_MANIFEST_FILE_NAME, DirectoryBundleSource
from .core.types import FontInfo
from .fontface.extractor import is_font_file
from .plugin import BuildConfig, FontManifestPlugin


def annotate_directory(
    out_dir: Path,
    manifest_file_name: str = DEFAULT_MANIFEST_FILE_NAME,
    dry_run: bool = False,
) -> FontInfo:
    """Run the build hooks against a build output directory.

    Args:
        out_dir: Build output directory
        manifest_file_name: Manifest path relative to ``out_dir``
        dry_run: Collect font information without rewriting the manifest

    Returns:
        The collected font information

    Raises:
        ValueError: If the directory or its manifest is invalid
        OSError: If the manifest cannot be read
    """
    print(f"Scanning build output: {out_dir.resolve()}", file=sys.stderr)
    source = DirectoryBundleSource(out_dir, manifest_file_name)
    bundle = source.load_bundle()

    plugin = FontManifestPlugin()
    context = plugin.config_resolved(
        BuildConfig(out_dir=source.path, manifest=manifest_file_name)
    )
    info = plugin.generate_bundle(context, bundle)

    font_files = sum(1 for asset in bundle.values() if is_font_file(asset))
    print(
        f"Found {len(info['fonts'])} fonts in {len(info['stylesheets'])} stylesheets "
        f"({font_files} font files in bundle)",
        file=sys.stderr,
    )
    for font, stylesheets in stylesheets_by_font(info).items():
        print(f"  {font or '<unresolved>'} <- {', '.join(map(str, stylesheets))}", file=sys.stderr)

    if dry_run:
        return info

    if plugin.write_bundle(context, source.path):
        print(f"Updated manifest: {source.manifest_path}", file=sys.stderr)

    return info


def main() -> None:
    """Main entry point for the annotation script."""
    parser = argparse.ArgumentParser(
        description="Add @font-face metadata to a build manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Annotate dist/manifest.json in place
  font-manifest --dir dist

  # Custom manifest location
  font-manifest --dir dist --manifest .vite/manifest.json

  # Print collected font information without touching the manifest
  font-manifest --dir dist --dry-run > fonts.json
        """,
    )

    parser.add_argument("--dir", required=True, help="Build output directory")

    parser.add_argument(
        "--manifest",
        default=DEFAULT_MANIFEST_FILE_NAME,
        help=f"Manifest file relative to --dir (default: {DEFAULT_MANIFEST_FILE_NAME})",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print collected font information as JSON instead of updating the manifest",
    )

    args = parser.parse_args()

    path = Path(args.dir)
    if not path.exists():
        print(f"Error: Path does not exist: {path}", file=sys.stderr)
        sys.exit(1)

    if not path.is_dir():
        print(f"Error: Path is not a directory: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        info = annotate_directory(path, args.manifest, dry_run=args.dry_run)
    except (OSError, ValueError) as e:
        print(f"Error: Failed to annotate manifest: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        json.dump(info, sys.stdout, indent=2)
        print()


if __name__ == "__main__":
    main()
