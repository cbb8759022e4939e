"""Utility modules for distcheck.

This module exports commonly used utility functions.
"""

from distcheck.utils.formatting import (
    console,
    err_console,
    print_advisory,
    print_failure,
    print_success,
)
from distcheck.utils.shell import CommandResult, run_command, run_interactive

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_advisory",
    "print_failure",
    "print_success",
    "run_command",
    "run_interactive",
]
