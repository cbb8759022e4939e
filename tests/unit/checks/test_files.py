"""Unit tests for the publish-files allowlist check."""

from pathlib import Path
from typing import Any

import pytest
from distcheck.checks.files import check_files, includes_build_dir
from distcheck.models.manifest import PackageManifest
from distcheck.models.package import PackageDescriptor


def _descriptor(manifest: dict[str, Any]) -> PackageDescriptor:
    return PackageDescriptor(
        root=Path("/repo"),
        relative=Path("packages/core"),
        manifest=PackageManifest.model_validate(manifest),
    )


class TestIncludesBuildDir:
    """Tests for includes_build_dir function."""

    @pytest.mark.parametrize(
        "files",
        [["dist"], ["dist/"], ["dist/index.js"], ["./dist"], ["README.md", "dist/**/*.js"]],
    )
    def test_included(self, files: list[str]) -> None:
        """Entries equal to or under dist are accepted."""
        assert includes_build_dir(files, "dist") is True

    @pytest.mark.parametrize("files", [None, [], ["src"], ["distribution"], ["lib/dist"]])
    def test_not_included(self, files: list[str] | None) -> None:
        """Absent lists and unrelated entries are rejected."""
        assert includes_build_dir(files, "dist") is False


class TestCheckFiles:
    """Tests for check_files function."""

    def test_no_files_field_is_advisory(self) -> None:
        """A missing files field yields an advisory, never a failure."""
        findings = check_files(_descriptor({}), "dist")

        assert len(findings) == 1
        assert findings[0].is_advisory
        assert 'does not include "dist"' in findings[0].message

    def test_files_not_a_list_is_advisory(self) -> None:
        """A files string is treated like a missing field."""
        assert len(check_files(_descriptor({"files": "dist"}), "dist")) == 1

    def test_dist_listed(self) -> None:
        """No findings when dist is published."""
        assert check_files(_descriptor({"files": ["dist"]}), "dist") == []
