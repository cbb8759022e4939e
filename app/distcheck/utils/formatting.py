"""Rich console formatting utilities.

Failures and advisories go to stderr, prefixed with a glyph; the final
success line goes to stdout.
"""

import sys

from rich.console import Console
from rich.markup import escape

from distcheck.core.theme import get_theme

FAILURE_GLYPH = "\u2716"  # Heavy multiplication x
ADVISORY_GLYPH = "!"
SUCCESS_GLYPH = "\u2713"  # Check mark


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import). Emoji codes stay
# off: messages carry file paths such as "dist/:star:.js".
console = Console(theme=get_theme(), color_system=_detect_color_system(), emoji=False)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_detect_color_system(), emoji=False
)


def print_failure(message: str) -> None:
    """Print a hard failure."""
    err_console.print(f"[error]{FAILURE_GLYPH}[/] {escape(message)}", soft_wrap=True)


def print_advisory(message: str) -> None:
    """Print an advisory that does not affect the exit status."""
    err_console.print(f"[warning]{ADVISORY_GLYPH}[/] {escape(message)}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print the success confirmation."""
    console.print(f"[success]{SUCCESS_GLYPH}[/] {escape(message)}", soft_wrap=True)
