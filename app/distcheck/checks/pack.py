"""Publish-contents check.

Earlier checks can all pass while an ``.npmignore`` or a "files" entry
still drops the build output from the published tarball, so the packaging
step is simulated and its listing inspected.
"""

from distcheck.models.finding import CheckName, Finding, failure
from distcheck.models.package import PackageDescriptor
from distcheck.runners.base import PackageRunner


def check_pack(
    descriptor: PackageDescriptor,
    runner: PackageRunner,
    build_dir: str,
) -> list[Finding]:
    """Check that the packaging dry run would publish the build output.

    Args:
        descriptor: Package to check.
        runner: Runner performing the dry run.
        build_dir: Build-output directory name.

    Returns:
        A failure if the dry run fails or lists nothing under the build output.
    """
    result = runner.simulate_pack(descriptor.path)
    if result.failed:
        return [
            failure(
                descriptor.label,
                CheckName.PACK,
                f"npm pack --dry-run check failed: {result.error or 'unknown error'}",
            )
        ]

    prefix = f"{build_dir}/"
    if not any(path.startswith(prefix) for path in result.files):
        return [
            failure(descriptor.label, CheckName.PACK, f"npm pack did not include {build_dir}/")
        ]
    return []
