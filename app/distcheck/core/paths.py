"""XDG-compliant path management for distcheck.

User-level configuration lives under the XDG config directory, while
project-level configuration sits next to the workspace's package.json.

XDG default:
- Config: ~/.config/distcheck/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "distcheck"

# Project-level config file, looked up in the workspace root
PROJECT_CONFIG_NAME = "distcheck.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/distcheck/ (or XDG_CONFIG_HOME/distcheck/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_user_config_path() -> Path:
    """Get the user-level verifier configuration path.

    Returns:
        Path to ~/.config/distcheck/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/distcheck/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_project_config_path(root: Path) -> Path:
    """Get the project-level configuration path for a workspace.

    Args:
        root: Workspace root directory.

    Returns:
        Path to <root>/distcheck.toml.
    """
    return root / PROJECT_CONFIG_NAME
