"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from distcheck.models.results import LoadResult, PackResult
from distcheck.runners.base import PackageRunner

# Builds packages/<name> with a package.json and optional files, returns its dir
PackageFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def fake_runner() -> MagicMock:
    """Runner whose loads and packs succeed unless told otherwise."""
    runner = MagicMock(spec=PackageRunner)
    runner.attempt_load.return_value = LoadResult(success=True)
    runner.simulate_pack.return_value = PackResult(
        success=True, files=("package.json", "dist/index.js")
    )
    return runner


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace root with a packages/ directory."""
    (tmp_path / "packages").mkdir()
    return tmp_path


@pytest.fixture
def make_package(workspace: Path) -> PackageFactory:
    """Factory creating a package under packages/ in the workspace.

    Usage: make_package("core", {"main": "./dist/index.js"}, {"dist/index.js": "..."})
    """

    def _make(
        name: str,
        manifest: dict[str, Any] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        package_dir = workspace / "packages" / name
        package_dir.mkdir(parents=True)
        if manifest is not None:
            (package_dir / "package.json").write_text(json.dumps(manifest))
        for rel, content in (files or {}).items():
            path = package_dir / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return package_dir

    return _make


@pytest.fixture
def good_manifest() -> dict[str, Any]:
    """Manifest of a well-formed CommonJS package."""
    return {
        "name": "@acme/core",
        "version": "1.0.0",
        "main": "./dist/index.js",
        "types": "./dist/index.d.ts",
        "files": ["dist"],
    }


@pytest.fixture
def good_files() -> dict[str, str]:
    """Build output matching good_manifest."""
    return {
        "dist/index.js": "module.exports = { answer: 42 };\n" * 8,
        "dist/index.d.ts": "export declare const answer: number;\n" * 4,
    }
