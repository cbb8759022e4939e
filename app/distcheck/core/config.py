"""Verifier configuration.

Settings are read from TOML. The first file found wins:

1. An explicit path (``--config``)
2. ``distcheck.toml`` in the workspace root
3. ``~/.config/distcheck/config.toml``

With no file at all the built-in defaults apply, which reproduce the
plain non-emptiness artifact policy.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from distcheck.core.paths import get_project_config_path, get_user_config_path

logger = logging.getLogger(__name__)

# Build-output policy names
ArtifactPolicy = Literal["non-empty", "strict"]


class VerifierConfig(BaseModel):
    """Configuration for a verification run.

    Attributes:
        packages_dir: Directory, relative to the root, whose children are packages.
        manifest_name: Manifest file name inside each package.
        build_dir: Build-output directory name inside each package.
        artifact_policy: "non-empty" or "strict" build-output rule.
        min_artifact_bytes: Strict policy: minimum total size of the build output.
        code_extensions: Strict policy: suffixes of compiled-code files.
        declaration_extensions: Strict policy: suffixes of type-declaration files.
        runtime_check: Load each package's main entry in a child process.
        pack_check: Run the packaging dry run for each package.
        node_command: Interpreter used for the runtime load check.
        npm_command: Package manager used for the packaging dry run.
        timeout_seconds: Timeout for the packaging dry run.
    """

    model_config = ConfigDict(extra="forbid")

    packages_dir: Annotated[str, Field(min_length=1, description="Package-list directory")] = (
        "packages"
    )
    manifest_name: Annotated[str, Field(min_length=1, description="Manifest file name")] = (
        "package.json"
    )
    build_dir: Annotated[str, Field(min_length=1, description="Build-output directory")] = "dist"
    artifact_policy: Annotated[
        ArtifactPolicy,
        Field(description="Build-output rule"),
    ] = "non-empty"
    min_artifact_bytes: Annotated[
        int,
        Field(ge=0, description="Minimum total build-output size (strict policy)"),
    ] = 200
    code_extensions: Annotated[
        list[str],
        Field(min_length=1, description="Compiled-code file suffixes (strict policy)"),
    ] = [".js", ".mjs", ".cjs"]
    declaration_extensions: Annotated[
        list[str],
        Field(min_length=1, description="Type-declaration file suffixes (strict policy)"),
    ] = [".d.ts", ".d.mts", ".d.cts"]
    runtime_check: Annotated[bool, Field(description="Run the runtime load check")] = True
    pack_check: Annotated[bool, Field(description="Run the packaging dry run")] = True
    node_command: Annotated[str, Field(min_length=1, description="Node.js executable")] = "node"
    npm_command: Annotated[str, Field(min_length=1, description="npm executable")] = "npm"
    timeout_seconds: Annotated[
        int,
        Field(ge=1, le=3600, description="Packaging dry-run timeout in seconds (1-3600)"),
    ] = 120

    @property
    def is_strict(self) -> bool:
        """Check if the strict artifact policy is selected."""
        return self.artifact_policy == "strict"


class VerifierConfigError(Exception):
    """Base exception for verifier configuration errors."""


class VerifierConfigNotFoundError(VerifierConfigError):
    """Raised when an explicitly requested config file is not found."""


class VerifierConfigParseError(VerifierConfigError):
    """Raised when a config file cannot be parsed."""


def load_verifier_config(path: Path) -> VerifierConfig:
    """Load verifier configuration from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Validated VerifierConfig object.

    Raises:
        VerifierConfigNotFoundError: If the config file doesn't exist.
        VerifierConfigParseError: If the TOML syntax is invalid.
        VerifierConfigError: If the content doesn't match the schema.
    """
    if not path.exists():
        raise VerifierConfigNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise VerifierConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise VerifierConfigError(f"Failed to read config {path}: {e}") from e

    try:
        return VerifierConfig.model_validate(data)
    except ValidationError as e:
        raise VerifierConfigError(f"Invalid config content in {path}: {e}") from e


def resolve_config(root: Path, path: Path | None = None) -> VerifierConfig:
    """Find and load the configuration that applies to a workspace.

    Args:
        root: Workspace root directory.
        path: Explicit config file. When given it must exist.

    Returns:
        The loaded configuration, or the defaults when no file is found.

    Raises:
        VerifierConfigError: If a config file exists but is invalid, or the
            explicit path is missing.
    """
    if path is not None:
        return load_verifier_config(path)

    for candidate in (get_project_config_path(root), get_user_config_path()):
        if candidate.is_file():
            logger.debug("Using config file %s", candidate)
            return load_verifier_config(candidate)

    logger.debug("No config file found, using defaults")
    return VerifierConfig()
