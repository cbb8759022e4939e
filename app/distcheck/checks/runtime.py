"""Runtime load check."""

import logging

from distcheck.models.finding import CheckName, Finding, failure
from distcheck.models.package import PackageDescriptor
from distcheck.runners.base import PackageRunner

logger = logging.getLogger(__name__)


def check_runtime(descriptor: PackageDescriptor, runner: PackageRunner) -> list[Finding]:
    """Load the package's main entry point in a child process.

    Packages without a "main" field have nothing to load and pass.

    Args:
        descriptor: Package to check.
        runner: Runner performing the isolated load.

    Returns:
        A failure if the load did not succeed, otherwise an empty list.
    """
    manifest = descriptor.manifest
    if not manifest.main:
        logger.debug("Skipping runtime load for %s: no main entry", descriptor.label)
        return []

    result = runner.attempt_load(descriptor.path / manifest.main, manifest.is_module)
    if result.success:
        return []

    logger.debug("Runtime load failed for %s: %s", descriptor.label, result.error)
    return [failure(descriptor.label, CheckName.RUNTIME, "runtime import/require failed")]
