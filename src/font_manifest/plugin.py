"""Build hooks for font manifest generation.

This module provides the plugin driven by the host build lifecycle.
All per-build state lives in a BuildContext created by the
configuration hook and threaded through the later hooks, so a single
plugin instance can serve any number of builds.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .bundle.base import BundleAsset, bundle_from_mappings
from .bundle.crossref import extract_font_info
from .bundle.directory import DEFAULT_MANIFEST_FILE_NAME
from .core.types import FontInfo
from .manifest import update_manifest_file


@dataclass
class BuildConfig:
    """Build settings the plugin cares about.

    Attributes:
        out_dir: Build output directory
        manifest: Host manifest setting: False when no manifest is
            written, True for the default file name, or a custom file name
    """

    out_dir: Path = Path("dist")
    manifest: bool | str = True

    @property
    def manifest_file_name(self) -> str:
        if isinstance(self.manifest, str) and self.manifest:
            return self.manifest
        return DEFAULT_MANIFEST_FILE_NAME

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BuildConfig":
        """Build a config from a resolved host config (``{"build": {...}}``)."""
        build = data.get("build", {})
        return cls(
            out_dir=Path(build.get("outDir", "dist")),
            manifest=build.get("manifest", True),
        )


@dataclass
class BuildContext:
    """State of one build, from configuration to manifest write.

    Attributes:
        config: Resolved build settings
        info: Font information collected by ``generate_bundle``; reset
            to None once ``write_bundle`` has consumed it
    """

    config: BuildConfig
    info: FontInfo | None = None


class FontManifestPlugin:
    """Annotate the build manifest with @font-face metadata.

    Hooks must be called in build order:

    Example:
        >>> plugin = FontManifestPlugin()
        >>> context = plugin.config_resolved(BuildConfig(out_dir=Path('dist')))
        >>> plugin.generate_bundle(context, bundle)
        >>> plugin.write_bundle(context, Path('dist'))
    """

    name = "font-manifest"

    def config_resolved(self, config: BuildConfig | Mapping[str, Any]) -> BuildContext:
        """Start a build.

        Args:
            config: BuildConfig, or the host's resolved config mapping

        Returns:
            Context to pass to the remaining hooks
        """
        if not isinstance(config, BuildConfig):
            config = BuildConfig.from_mapping(config)
        return BuildContext(config=config)

    def generate_bundle(
        self,
        context: BuildContext,
        bundle: Mapping[str, BundleAsset | Mapping[str, Any]],
    ) -> FontInfo:
        """Extract font information from the generated bundle.

        Args:
            context: Context returned by ``config_resolved``
            bundle: Output assets keyed by file name, as BundleAsset
                records or host-shaped dicts

        Returns:
            The collected FontInfo, also stored on the context
        """
        context.info = extract_font_info(bundle_from_mappings(bundle))
        return context.info

    def write_bundle(self, context: BuildContext, out_dir: Path | str | None = None) -> bool:
        """Merge the collected font information into the manifest on disk.

        Skipped when the build writes no manifest or no fonts were found.

        Args:
            context: Context populated by ``generate_bundle``
            out_dir: Directory the bundle was written to (defaults to
                the configured output directory)

        Returns:
            True if the manifest was rewritten
        """
        info, context.info = context.info, None

        if info is None or context.config.manifest is False:
            return False

        directory = Path(out_dir) if out_dir is not None else context.config.out_dir
        return update_manifest_file(directory / context.config.manifest_file_name, info)
