"""Publish-files allowlist check (advisory only)."""

from distcheck.models.finding import CheckName, Finding, advisory
from distcheck.models.package import PackageDescriptor


def includes_build_dir(files: list[str] | None, build_dir: str) -> bool:
    """Check whether an allowlist publishes the build-output directory.

    Args:
        files: The manifest's "files" list, or None if absent.
        build_dir: Build-output directory name.

    Returns:
        True if an item equals the directory name or starts with ``<dir>/``.
    """
    if files is None:
        return False
    for item in files:
        name = item.removeprefix("./")
        if name == build_dir or name.startswith(f"{build_dir}/"):
            return True
    return False


def check_files(descriptor: PackageDescriptor, build_dir: str) -> list[Finding]:
    """Recommend listing the build output in the manifest's "files" field."""
    if includes_build_dir(descriptor.manifest.files, build_dir):
        return []
    return [
        advisory(
            descriptor.label,
            CheckName.FILES,
            f'package.json "files" does not include "{build_dir}" - not fatal, but recommended',
        )
    ]
