"""Unit tests for the declared entry point check."""

from pathlib import Path
from typing import Any

from distcheck.checks.entries import check_entries, find_twin
from distcheck.models.finding import CheckName
from distcheck.models.manifest import PackageManifest
from distcheck.models.package import PackageDescriptor


def _descriptor(root: Path, manifest: dict[str, Any], files: list[str]) -> PackageDescriptor:
    package_dir = root / "packages" / "core"
    package_dir.mkdir(parents=True)
    for rel in files:
        path = package_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("export {};\n")
    return PackageDescriptor(
        root=root,
        relative=Path("packages/core"),
        manifest=PackageManifest.model_validate(manifest),
    )


class TestFindTwin:
    """Tests for find_twin function."""

    def test_mjs_to_js(self, tmp_path: Path) -> None:
        """A .js sibling is found for a missing .mjs entry."""
        (tmp_path / "dist").mkdir()
        (tmp_path / "dist" / "index.js").write_text("")

        assert find_twin(tmp_path, "./dist/index.mjs") == "./dist/index.js"

    def test_cjs_to_js(self, tmp_path: Path) -> None:
        """A .js sibling is found for a missing .cjs entry."""
        (tmp_path / "dist").mkdir()
        (tmp_path / "dist" / "index.js").write_text("")

        assert find_twin(tmp_path, "dist/index.cjs") == "dist/index.js"

    def test_no_twin(self, tmp_path: Path) -> None:
        """Nothing is returned when the sibling does not exist."""
        assert find_twin(tmp_path, "./dist/index.mjs") is None

    def test_js_has_no_twin(self, tmp_path: Path) -> None:
        """Plain .js entries are never recovered."""
        (tmp_path / "dist").mkdir()
        (tmp_path / "dist" / "index.mjs").write_text("")

        assert find_twin(tmp_path, "./dist/index.js") is None


class TestCheckEntries:
    """Tests for check_entries function."""

    def test_all_present(self, tmp_path: Path) -> None:
        """No findings when every declared entry exists."""
        descriptor = _descriptor(
            tmp_path,
            {
                "main": "./dist/index.cjs",
                "module": "./dist/index.mjs",
                "types": "./dist/index.d.ts",
                "exports": {".": {"import": "./dist/index.mjs", "require": "./dist/index.cjs"}},
            },
            ["dist/index.cjs", "dist/index.mjs", "dist/index.d.ts"],
        )

        assert check_entries(descriptor) == []

    def test_missing_entry_fails(self, tmp_path: Path) -> None:
        """A missing declared entry is a hard failure."""
        descriptor = _descriptor(tmp_path, {"main": "./dist/index.js"}, [])

        findings = check_entries(descriptor)

        assert len(findings) == 1
        assert findings[0].is_failure
        assert findings[0].check == CheckName.ENTRIES
        assert findings[0].render() == (
            'packages/core: declared entry "./dist/index.js" does not exist'
        )

    def test_mjs_mismatch_is_advisory(self, tmp_path: Path) -> None:
        """A missing .mjs with an existing .js yields an advisory only."""
        descriptor = _descriptor(
            tmp_path,
            {"main": "./dist/index.js", "module": "./dist/index.mjs"},
            ["dist/index.js"],
        )

        findings = check_entries(descriptor)

        assert len(findings) == 1
        assert findings[0].is_advisory
        assert '"./dist/index.mjs" not found but "./dist/index.js" exists' in findings[0].message

    def test_exports_only_entries_are_checked(self, tmp_path: Path) -> None:
        """Entries declared only through exports are verified too."""
        descriptor = _descriptor(
            tmp_path,
            {"exports": {"default": "./dist/index.js", "types": "./dist/index.d.ts"}},
            ["dist/index.js"],
        )

        findings = check_entries(descriptor)

        assert [f.message for f in findings] == [
            'declared entry "./dist/index.d.ts" does not exist'
        ]

    def test_each_missing_entry_reported_once(self, tmp_path: Path) -> None:
        """Duplicate declarations produce a single finding."""
        descriptor = _descriptor(
            tmp_path,
            {"main": "./dist/index.js", "exports": "./dist/index.js"},
            [],
        )

        assert len(check_entries(descriptor)) == 1
