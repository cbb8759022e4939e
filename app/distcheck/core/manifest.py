"""Package manifest I/O operations.

This module provides loading of package.json files with validation using
the PackageManifest Pydantic model.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from distcheck.models.manifest import PackageManifest


class ManifestError(Exception):
    """Base exception for manifest-related errors."""


class ManifestNotFoundError(ManifestError):
    """Raised when a manifest file is not found."""


class ManifestParseError(ManifestError):
    """Raised when a manifest file is not valid JSON."""


class ManifestValidationError(ManifestError):
    """Raised when manifest content does not match the expected shape."""


def load_package_manifest(path: Path) -> PackageManifest:
    """Load and validate a package manifest from a JSON file.

    Args:
        path: Path to the package.json file.

    Returns:
        Validated PackageManifest object.

    Raises:
        ManifestNotFoundError: If the manifest file doesn't exist.
        ManifestParseError: If the file cannot be read or is not valid JSON.
        ManifestValidationError: If the JSON is not an object or has invalid fields.
    """
    if not path.exists():
        raise ManifestNotFoundError(f"Manifest not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(f"cannot read file: {e}") from e

    if not isinstance(data, dict):
        raise ManifestValidationError(f"expected a JSON object, got {type(data).__name__}")

    try:
        return PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestValidationError(str(e)) from e


def manifest_exists(path: Path) -> bool:
    """Check if a manifest file exists.

    Args:
        path: Path to check.

    Returns:
        True if anything exists at the path. A non-file is left for
        load_package_manifest() to reject.
    """
    return path.exists()
