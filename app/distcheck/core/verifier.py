"""Build verification orchestration.

Runs every check against every publishable package and accumulates the
findings into a VerificationReport. Checks are independent: a failing
check never prevents the next one from running.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from distcheck.checks import (
    check_artifacts,
    check_entries,
    check_files,
    check_pack,
    check_runtime,
)
from distcheck.core.config import VerifierConfig
from distcheck.core.discovery import load_descriptors
from distcheck.models.finding import Finding, VerificationReport
from distcheck.models.package import PackageDescriptor
from distcheck.runners.base import PackageRunner
from distcheck.runners.node import NodeRunner

logger = logging.getLogger(__name__)

# Callback invoked with each finding as soon as it is produced
FindingCallback = Callable[[Finding], None]


class BuildVerifier:
    """Evaluates the build checklist for a workspace.

    Attributes:
        config: Verifier configuration.
        runner: Runner used for the runtime load and pack checks.

    Example:
        >>> verifier = BuildVerifier(VerifierConfig())
        >>> report = verifier.verify(Path("."))
        >>> sys.exit(report.exit_code)
    """

    def __init__(
        self,
        config: VerifierConfig | None = None,
        runner: PackageRunner | None = None,
    ) -> None:
        self.config = config or VerifierConfig()
        self.runner = runner or NodeRunner(
            node_command=self.config.node_command,
            npm_command=self.config.npm_command,
            timeout=float(self.config.timeout_seconds),
        )

    def _run_checks(self, descriptor: PackageDescriptor) -> Iterator[list[Finding]]:
        """Yield the findings of each check in turn, running them lazily."""
        config = self.config
        yield check_artifacts(descriptor, config)
        yield check_entries(descriptor)
        yield check_files(descriptor, config.build_dir)
        if config.runtime_check:
            yield check_runtime(descriptor, self.runner)
        if config.pack_check:
            yield check_pack(descriptor, self.runner, config.build_dir)

    def verify(self, root: Path, on_finding: FindingCallback | None = None) -> VerificationReport:
        """Verify every publishable package of a workspace.

        Args:
            root: Workspace root directory.
            on_finding: Optional callback receiving each finding as it is
                produced, so output interleaves with child-process output.

        Returns:
            VerificationReport with all findings.

        Raises:
            PackagesDirNotFoundError: If the package-list directory is absent.
        """
        report = VerificationReport()

        def record(findings: list[Finding]) -> None:
            for finding in findings:
                report.findings.append(finding)
                if on_finding is not None:
                    on_finding(finding)

        descriptors, manifest_findings = load_descriptors(root, self.config)
        record(manifest_findings)

        for descriptor in descriptors:
            logger.debug("Checking %s", descriptor.label)
            report.packages.append(descriptor.label)
            # Findings must be emitted before the next check spawns a subprocess
            for findings in self._run_checks(descriptor):
                record(findings)

        logger.debug(
            "Checked %d package(s): %d failure(s), %d advisory(ies)",
            len(report.packages),
            len(report.failures),
            len(report.advisories),
        )
        return report
