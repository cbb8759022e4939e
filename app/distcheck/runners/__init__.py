"""Package runners for the process-boundary checks.

This module exports the runner interface and its Node.js implementation.
"""

from distcheck.runners.base import PackageRunner
from distcheck.runners.node import NodeRunner

__all__ = ["NodeRunner", "PackageRunner"]
