"""Build artifact presence check.

Two policies are supported:

- ``non-empty``: the build-output directory exists and has any entry.
- ``strict``: among non-hidden files there is at least one compiled-code
  file and one type-declaration file, and their total size reaches a
  minimum byte threshold.
"""

from collections.abc import Iterator
from pathlib import Path

from distcheck.core.config import VerifierConfig
from distcheck.models.finding import CheckName, Finding, failure
from distcheck.models.package import PackageDescriptor


def _iter_visible_files(directory: Path) -> Iterator[Path]:
    """Yield files under a directory, skipping hidden entries and directory symlinks."""
    for entry in sorted(directory.iterdir()):
        if entry.name.startswith("."):
            continue
        if entry.is_symlink() and entry.is_dir():
            continue
        if entry.is_dir():
            yield from _iter_visible_files(entry)
        elif entry.is_file():
            yield entry


def _has_suffix(path: Path, suffixes: list[str]) -> bool:
    return any(path.name.endswith(suffix) for suffix in suffixes)


def _is_declaration(path: Path, config: VerifierConfig) -> bool:
    return _has_suffix(path, config.declaration_extensions)


def _is_code(path: Path, config: VerifierConfig) -> bool:
    return _has_suffix(path, config.code_extensions) and not _is_declaration(path, config)


def check_non_empty(descriptor: PackageDescriptor, config: VerifierConfig) -> list[Finding]:
    """Check that the build-output directory exists and is non-empty."""
    build_path = descriptor.build_path(config.build_dir)
    try:
        has_entries = any(build_path.iterdir())
    except OSError:
        has_entries = False

    if has_entries:
        return []
    return [
        failure(
            descriptor.label,
            CheckName.ARTIFACTS,
            f'missing or empty {config.build_dir}/ (did you run "npm -ws run build"?)',
        )
    ]


def check_strict(descriptor: PackageDescriptor, config: VerifierConfig) -> list[Finding]:
    """Check for compiled code, type declarations, and a minimum total size."""
    build_path = descriptor.build_path(config.build_dir)
    missing = failure(
        descriptor.label,
        CheckName.ARTIFACTS,
        f"missing expected build artifacts in {config.build_dir}/",
    )

    try:
        files = list(_iter_visible_files(build_path))
        total_bytes = sum(f.stat().st_size for f in files)
    except OSError:
        return [missing]

    has_code = any(_is_code(f, config) for f in files)
    has_declarations = any(_is_declaration(f, config) for f in files)
    if not (has_code and has_declarations):
        return [missing]

    if total_bytes < config.min_artifact_bytes:
        return [
            failure(
                descriptor.label,
                CheckName.ARTIFACTS,
                f"{config.build_dir}/ looks suspiciously small ({total_bytes} bytes)",
            )
        ]
    return []


def check_artifacts(descriptor: PackageDescriptor, config: VerifierConfig) -> list[Finding]:
    """Run the build artifact check under the configured policy.

    Args:
        descriptor: Package to check.
        config: Verifier configuration selecting the policy.

    Returns:
        List of findings, empty when the build output is acceptable.
    """
    if config.is_strict:
        return check_strict(descriptor, config)
    return check_non_empty(descriptor, config)
