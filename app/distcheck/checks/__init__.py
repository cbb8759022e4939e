"""Per-package build checks.

This module exports one function per check, in evaluation order.
"""

from distcheck.checks.artifacts import check_artifacts
from distcheck.checks.entries import check_entries
from distcheck.checks.files import check_files
from distcheck.checks.pack import check_pack
from distcheck.checks.runtime import check_runtime

__all__ = [
    "check_artifacts",
    "check_entries",
    "check_files",
    "check_pack",
    "check_runtime",
]
