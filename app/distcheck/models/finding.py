"""Check findings and the aggregated verification report.

A finding is either a hard failure, which makes the run exit non-zero, or
an advisory, which is printed but never affects the exit status.
"""

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """How a finding affects the outcome of the run."""

    FAILURE = "failure"
    ADVISORY = "advisory"


class CheckName(Enum):
    """Checks that can produce findings, in evaluation order."""

    MANIFEST = "manifest"
    ARTIFACTS = "artifacts"
    ENTRIES = "entries"
    FILES = "files"
    RUNTIME = "runtime"
    PACK = "pack"


@dataclass(frozen=True, slots=True)
class Finding:
    """A single message produced by a check.

    Attributes:
        package: Label of the package the finding is about.
        check: Check that produced the finding.
        severity: Failure or advisory.
        message: Human-readable description, without the package prefix.
    """

    package: str
    check: CheckName
    severity: Severity
    message: str

    @property
    def is_failure(self) -> bool:
        """Check if this finding fails the run."""
        return self.severity == Severity.FAILURE

    @property
    def is_advisory(self) -> bool:
        """Check if this finding is advisory only."""
        return self.severity == Severity.ADVISORY

    def render(self) -> str:
        """Format the finding as ``<package>: <message>``."""
        if not self.package:
            return self.message
        return f"{self.package}: {self.message}"


def failure(package: str, check: CheckName, message: str) -> Finding:
    """Create a failure finding."""
    return Finding(package=package, check=check, severity=Severity.FAILURE, message=message)


def advisory(package: str, check: CheckName, message: str) -> Finding:
    """Create an advisory finding."""
    return Finding(package=package, check=check, severity=Severity.ADVISORY, message=message)


@dataclass(slots=True)
class VerificationReport:
    """Accumulated outcome of a verification run.

    Attributes:
        packages: Labels of the publishable packages that were checked.
        findings: Every finding, in the order it was produced.
    """

    packages: list[str] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    @property
    def failures(self) -> list[Finding]:
        """Findings that fail the run."""
        return [f for f in self.findings if f.is_failure]

    @property
    def advisories(self) -> list[Finding]:
        """Findings that are advisory only."""
        return [f for f in self.findings if f.is_advisory]

    @property
    def passed(self) -> bool:
        """True when no failure was recorded."""
        return not self.failures

    @property
    def exit_code(self) -> int:
        """Process exit status derived from the failures."""
        return 0 if self.passed else 1
