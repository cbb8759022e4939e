"""Data models for distcheck.

This module exports the core data structures used throughout the application.
"""

from distcheck.models.finding import (
    CheckName,
    Finding,
    Severity,
    VerificationReport,
    advisory,
    failure,
)
from distcheck.models.manifest import (
    ConditionalExports,
    MissingExports,
    PackageManifest,
    PathExport,
    decode_exports,
    resolve_declared_entries,
)
from distcheck.models.package import PackageDescriptor
from distcheck.models.results import LoadResult, PackResult

__all__ = [
    "CheckName",
    "ConditionalExports",
    "Finding",
    "LoadResult",
    "MissingExports",
    "PackResult",
    "PackageDescriptor",
    "PackageManifest",
    "PathExport",
    "Severity",
    "VerificationReport",
    "advisory",
    "decode_exports",
    "failure",
    "resolve_declared_entries",
]
