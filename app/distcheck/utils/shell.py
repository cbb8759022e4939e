"""Shell execution utilities.

Provides subprocess execution for the node and npm invocations made by
the runtime load and pack checks.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    cwd: str | Path | None = None,
) -> CommandResult:
    """Execute a command and capture its output.

    Output that is not valid UTF-8 is decoded with replacement characters
    rather than raising.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_interactive(args: list[str], *, cwd: str | Path | None = None) -> int:
    """Execute a command that inherits the console streams.

    Unlike run_command(), this does NOT capture stdout/stderr, so whatever
    the child prints (a stack trace from a failed import, for instance)
    shows up directly in the verifier's output.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    result = subprocess.run(args, check=False, cwd=cwd)
    return result.returncode
