"""Main CLI application entry point.

Defines the Typer application. Running ``distcheck`` without arguments
verifies the workspace in the current directory; the options only adjust
where it looks and which checks run.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from distcheck import __version__
from distcheck.core.config import VerifierConfigError, resolve_config
from distcheck.core.discovery import PackagesDirNotFoundError
from distcheck.core.verifier import BuildVerifier
from distcheck.models.finding import Finding
from distcheck.utils.formatting import print_advisory, print_failure, print_success

SUCCESS_MESSAGE = "verify-build passed for all publishable packages"

app = typer.Typer(
    name="distcheck",
    help="Verify the build output of every publishable package in a workspace.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class PolicyChoice(str, Enum):
    """Build-output policies selectable from the command line."""

    NON_EMPTY = "non-empty"
    STRICT = "strict"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"distcheck version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _print_finding(finding: Finding) -> None:
    if finding.is_failure:
        print_failure(finding.render())
    else:
        print_advisory(finding.render())


@app.command()
def verify(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Workspace root containing the package-list directory.",
            file_okay=False,
        ),
    ] = Path("."),
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: distcheck.toml in the root, then user config).",
            dir_okay=False,
        ),
    ] = None,
    policy: Annotated[
        PolicyChoice | None,
        typer.Option(
            "--policy",
            "-p",
            help="Build-output policy: non-empty or strict.",
            case_sensitive=False,
        ),
    ] = None,
    no_runtime: Annotated[
        bool,
        typer.Option("--no-runtime", help="Skip the runtime load check."),
    ] = False,
    no_pack: Annotated[
        bool,
        typer.Option("--no-pack", help="Skip the npm pack dry-run check."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Check build output, declared entries, runtime loading and publish contents.

    Exits 0 when every publishable package passes, 1 otherwise.

    Examples:
        distcheck                       # Verify ./packages/*
        distcheck --policy strict       # Require code, declarations and a size floor
        distcheck --no-pack             # Skip npm pack --dry-run
        distcheck -r ../monorepo        # Verify another workspace
    """
    _configure_logging(verbose)

    try:
        config = resolve_config(root, config_path)
    except VerifierConfigError as e:
        print_failure(str(e))
        raise typer.Exit(code=1) from e

    overrides: dict[str, object] = {}
    if policy is not None:
        overrides["artifact_policy"] = policy.value
    if no_runtime:
        overrides["runtime_check"] = False
    if no_pack:
        overrides["pack_check"] = False
    if overrides:
        config = config.model_copy(update=overrides)

    verifier = BuildVerifier(config)
    try:
        report = verifier.verify(root, on_finding=_print_finding)
    except PackagesDirNotFoundError as e:
        print_failure(str(e))
        raise typer.Exit(code=1) from e

    if not report.passed:
        raise typer.Exit(code=1)
    print_success(SUCCESS_MESSAGE)


if __name__ == "__main__":
    app()
