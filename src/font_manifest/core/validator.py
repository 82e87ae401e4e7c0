"""JSON Schema validation for build manifests.

This module loads the manifest schema shipped with the package and
validates manifests before they are merged and written back.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import Manifest

# font_manifest/core/validator.py -> font_manifest/schemas/
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "manifest.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(manifest: Manifest) -> None:
    """Validate a manifest against the JSON Schema.

    Args:
        manifest: The manifest dictionary to validate

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    jsonschema.validate(instance=manifest, schema=load_schema())


def describe_validation_error(error: ValidationError) -> str:
    """Describe a schema violation in terms of manifest entries.

    Example:
        "Entry 'src/a.woff2', field fontFace: 'format' is a required property"
    """
    path = list(error.path)
    if not path:
        return f"Manifest root: {error.message}"

    filename, fields = path[0], path[1:]
    location = f"Entry {filename!r}"
    if fields:
        location += ", field " + ".".join(str(p) for p in fields)
    return f"{location}: {error.message}"


def validate_manifest_with_error_details(manifest: Manifest) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    Args:
        manifest: The manifest dictionary to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ValidationError as e:
        return False, describe_validation_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
