"""Node.js / npm package runner.

Loads entry points with ``node -e`` and lists publish contents with
``npm pack --dry-run --json``.
"""

import json
import logging
import subprocess
from pathlib import Path

from distcheck.models.results import LoadResult, PackResult
from distcheck.runners.base import PackageRunner
from distcheck.utils.shell import run_command, run_interactive

logger = logging.getLogger(__name__)


def build_import_script(entry_path: Path) -> str:
    """Build a ``node -e`` script that dynamically imports an ES module.

    Args:
        entry_path: Path to the module file.

    Returns:
        JavaScript source that exits 1 if the import rejects.
    """
    url = json.dumps(entry_path.resolve().as_uri())
    return f"import({url}).then(()=>{{}}).catch(e=>{{console.error(e);process.exit(1)}})"


def build_require_script(entry_path: Path) -> str:
    """Build a ``node -e`` script that requires a CommonJS entry.

    Args:
        entry_path: Path to the entry file.

    Returns:
        JavaScript source that throws (exit 1) if the require fails.
    """
    return f"require({json.dumps(entry_path.resolve().as_posix())})"


def parse_pack_output(stdout: str) -> tuple[str, ...]:
    """Extract file paths from ``npm pack --dry-run --json`` output.

    The output is a JSON array with one object per packed package, each
    holding a ``files`` list of ``{"path": ...}`` objects. Only the first
    package is considered; any missing level yields an empty listing.

    Args:
        stdout: Raw standard output of the command.

    Returns:
        Tuple of file paths, possibly empty.

    Raises:
        ValueError: If the output is not valid JSON.
    """
    data = json.loads(stdout)

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        return ()
    files = data[0].get("files")
    if not isinstance(files, list):
        return ()
    return tuple(
        entry["path"]
        for entry in files
        if isinstance(entry, dict) and isinstance(entry.get("path"), str)
    )


class NodeRunner(PackageRunner):
    """Runner backed by the ``node`` and ``npm`` executables.

    Attributes:
        node_command: Node.js executable name or path.
        npm_command: npm executable name or path.
        timeout: Timeout in seconds for the packaging dry run.
    """

    def __init__(
        self,
        node_command: str = "node",
        npm_command: str = "npm",
        timeout: float = 120.0,
    ) -> None:
        self.node_command = node_command
        self.npm_command = npm_command
        self.timeout = timeout

    def attempt_load(self, entry_path: Path, is_module: bool) -> LoadResult:
        """Load an entry point with ``node -e``, inheriting console streams."""
        if is_module:
            script = build_import_script(entry_path)
        else:
            script = build_require_script(entry_path)

        logger.debug("Loading %s (module=%s)", entry_path, is_module)
        try:
            returncode = run_interactive([self.node_command, "-e", script])
        except OSError as e:
            return LoadResult(success=False, error=f"cannot run {self.node_command}: {e}")

        if returncode != 0:
            return LoadResult(success=False, error=f"{self.node_command} exited with {returncode}")
        return LoadResult(success=True)

    def simulate_pack(self, package_dir: Path) -> PackResult:
        """Run ``npm pack --dry-run --json`` in the package directory."""
        args = [self.npm_command, "pack", "--dry-run", "--json"]
        logger.debug("Running %s in %s", " ".join(args), package_dir)

        try:
            result = run_command(args, timeout=self.timeout, cwd=package_dir)
        except subprocess.TimeoutExpired:
            return PackResult(success=False, error=f"timed out after {self.timeout:g}s")
        except OSError as e:
            return PackResult(success=False, error=f"cannot run {self.npm_command}: {e}")

        if not result.success:
            error = result.stderr.strip() or "npm pack failed"
            return PackResult(success=False, error=error)

        try:
            files = parse_pack_output(result.stdout)
        except ValueError as e:
            return PackResult(success=False, error=f"unparseable output: {e}")

        return PackResult(success=True, files=files)
