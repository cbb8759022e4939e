"""Abstract base class for package runners.

This module defines the PackageRunner interface that isolates the two
process-boundary operations of the verifier: loading an entry point in a
fresh interpreter and simulating the packaging step.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from distcheck.models.results import LoadResult, PackResult


class PackageRunner(ABC):
    """Abstract base class for all package runners.

    Implementations never raise for a failing package: every error is
    reported through the returned result.

    Example:
        >>> runner = NodeRunner()
        >>> result = runner.attempt_load(Path("packages/core/dist/index.js"), is_module=False)
        >>> if result.failed:
        ...     print(result.error)
    """

    @abstractmethod
    def attempt_load(self, entry_path: Path, is_module: bool) -> LoadResult:
        """Load an entry point in an isolated child process.

        Args:
            entry_path: Path to the entry file.
            is_module: True for dynamic ES module import, False for a
                synchronous CommonJS require.

        Returns:
            LoadResult describing whether the entry point loaded.
        """

    @abstractmethod
    def simulate_pack(self, package_dir: Path) -> PackResult:
        """Run the packaging step as a dry run and list what it would ship.

        Args:
            package_dir: Package directory to pack.

        Returns:
            PackResult with the listed file paths on success.
        """
