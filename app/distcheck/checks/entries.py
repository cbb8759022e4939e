"""Declared entry point check.

Every path the manifest declares must exist after the build. A missing
``.mjs``/``.cjs`` entry whose ``.js`` twin exists is a common mismatch
between manifest and bundler output, so it is downgraded to an advisory.
"""

from pathlib import Path

from distcheck.models.finding import CheckName, Finding, advisory, failure
from distcheck.models.manifest import resolve_declared_entries
from distcheck.models.package import PackageDescriptor

# Missing extension -> sibling extension that makes the entry recoverable
TWIN_EXTENSIONS: dict[str, str] = {
    ".mjs": ".js",
    ".cjs": ".js",
}


def find_twin(package_dir: Path, rel: str) -> str | None:
    """Find an existing sibling of a missing entry with a different extension.

    Args:
        package_dir: Package directory.
        rel: Declared relative path that does not exist.

    Returns:
        The sibling's relative path, or None if there is no such file.
    """
    for missing_ext, twin_ext in TWIN_EXTENSIONS.items():
        if rel.endswith(missing_ext):
            twin = rel[: -len(missing_ext)] + twin_ext
            if (package_dir / twin).exists():
                return twin
    return None


def check_entries(descriptor: PackageDescriptor) -> list[Finding]:
    """Check that every declared entry point exists.

    Args:
        descriptor: Package to check.

    Returns:
        One failure per missing entry, or an advisory when a twin exists.
    """
    findings: list[Finding] = []

    for rel in sorted(resolve_declared_entries(descriptor.manifest)):
        if (descriptor.path / rel).exists():
            continue

        twin = find_twin(descriptor.path, rel)
        if twin is not None:
            findings.append(
                advisory(
                    descriptor.label,
                    CheckName.ENTRIES,
                    f'"{rel}" not found but "{twin}" exists. Consider either building '
                    f"an {Path(rel).suffix} output or updating package.json to point "
                    f"to {Path(twin).suffix}",
                )
            )
            continue

        findings.append(
            failure(descriptor.label, CheckName.ENTRIES, f'declared entry "{rel}" does not exist')
        )

    return findings
