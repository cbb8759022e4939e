"""Unit tests for findings and the verification report."""

from distcheck.models.finding import (
    CheckName,
    Severity,
    VerificationReport,
    advisory,
    failure,
)


class TestFinding:
    """Tests for Finding dataclass."""

    def test_failure_helper(self) -> None:
        """failure() creates a failing finding."""
        finding = failure("packages/core", CheckName.PACK, "boom")

        assert finding.severity == Severity.FAILURE
        assert finding.is_failure is True
        assert finding.is_advisory is False

    def test_advisory_helper(self) -> None:
        """advisory() creates a non-failing finding."""
        finding = advisory("packages/core", CheckName.FILES, "consider it")

        assert finding.is_advisory is True
        assert finding.is_failure is False

    def test_render_prefixes_package(self) -> None:
        """render() prefixes the package label."""
        finding = failure("packages/core", CheckName.ENTRIES, "missing")

        assert finding.render() == "packages/core: missing"

    def test_render_without_package(self) -> None:
        """render() returns the bare message when there is no label."""
        assert failure("", CheckName.MANIFEST, "oops").render() == "oops"


class TestVerificationReport:
    """Tests for VerificationReport dataclass."""

    def test_empty_report_passes(self) -> None:
        """No findings means success."""
        report = VerificationReport()

        assert report.passed is True
        assert report.exit_code == 0

    def test_advisories_do_not_fail(self) -> None:
        """Advisories never change the exit code."""
        report = VerificationReport(findings=[advisory("a", CheckName.FILES, "hint")])

        assert report.passed is True
        assert report.advisories == report.findings
        assert report.failures == []

    def test_failure_sets_exit_code(self) -> None:
        """A single failure makes the run exit 1."""
        report = VerificationReport(
            findings=[
                advisory("a", CheckName.FILES, "hint"),
                failure("b", CheckName.RUNTIME, "runtime import/require failed"),
            ]
        )

        assert report.passed is False
        assert report.exit_code == 1
        assert len(report.failures) == 1
