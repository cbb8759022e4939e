"""Workspace package discovery.

Enumerates the immediate sub-directories of the package-list directory,
loads each one's manifest, and keeps the publishable ones.
"""

import logging
from pathlib import Path

from distcheck.core.config import VerifierConfig
from distcheck.core.manifest import ManifestError, load_package_manifest, manifest_exists
from distcheck.models.finding import CheckName, Finding, failure
from distcheck.models.package import PackageDescriptor

logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """Base exception for discovery errors."""


class PackagesDirNotFoundError(DiscoveryError):
    """Raised when the package-list directory is missing."""

    def __init__(self, packages_dir: str) -> None:
        self.packages_dir = packages_dir
        super().__init__(f"{packages_dir}/ not found")


def discover_package_dirs(root: Path, packages_dir: str = "packages") -> list[Path]:
    """List candidate package directories relative to the workspace root.

    Args:
        root: Workspace root directory.
        packages_dir: Name of the package-list directory under the root.

    Returns:
        Relative paths (e.g. ``packages/core``), sorted by name.

    Raises:
        PackagesDirNotFoundError: If the package-list directory is absent.
    """
    base = root / packages_dir
    try:
        entries = list(base.iterdir())
    except OSError as e:
        raise PackagesDirNotFoundError(packages_dir) from e

    return sorted(
        (Path(packages_dir) / entry.name for entry in entries if entry.is_dir()),
        key=lambda p: p.name,
    )


def load_descriptors(
    root: Path,
    config: VerifierConfig,
) -> tuple[list[PackageDescriptor], list[Finding]]:
    """Discover the publishable packages of a workspace.

    Candidates without a manifest and private packages are skipped silently.
    A manifest that cannot be parsed is reported as a failure and its package
    is excluded from the remaining checks.

    Args:
        root: Workspace root directory.
        config: Verifier configuration.

    Returns:
        Tuple of (publishable descriptors, manifest failures).

    Raises:
        PackagesDirNotFoundError: If the package-list directory is absent.
    """
    descriptors: list[PackageDescriptor] = []
    findings: list[Finding] = []

    for relative in discover_package_dirs(root, config.packages_dir):
        manifest_path = root / relative / config.manifest_name
        label = relative.as_posix()

        if not manifest_exists(manifest_path):
            logger.debug("Skipping %s: no %s", label, config.manifest_name)
            continue

        try:
            manifest = load_package_manifest(manifest_path)
        except ManifestError as e:
            findings.append(
                failure(
                    f"{label}/{config.manifest_name}",
                    CheckName.MANIFEST,
                    f"cannot parse JSON ({e})",
                )
            )
            continue

        if manifest.private:
            logger.debug("Skipping %s: private package", label)
            continue

        descriptors.append(PackageDescriptor(root=root, relative=relative, manifest=manifest))

    return descriptors, findings
