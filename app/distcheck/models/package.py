"""Package descriptor model."""

from dataclasses import dataclass
from pathlib import Path

from distcheck.models.manifest import PackageManifest


@dataclass(frozen=True, slots=True)
class PackageDescriptor:
    """A discovered, publishable workspace package.

    Attributes:
        root: Workspace root directory.
        relative: Package directory relative to the workspace root.
        manifest: Parsed package manifest.
    """

    root: Path
    relative: Path
    manifest: PackageManifest

    @property
    def path(self) -> Path:
        """Package directory on disk."""
        return self.root / self.relative

    @property
    def label(self) -> str:
        """Display name used as the prefix of every message (e.g. ``packages/core``)."""
        return self.relative.as_posix()

    def build_path(self, build_dir: str) -> Path:
        """Return the build-output directory of this package."""
        return self.path / build_dir
