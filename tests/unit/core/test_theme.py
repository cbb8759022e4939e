"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import distcheck.core.theme as theme_module
import pytest
from distcheck.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.success == "#03b971"
        assert colors.warning == "#f5b332"
        assert colors.error == "#f53263"

    def test_accepts_short_hex(self) -> None:
        """ThemeColors accepts #RGB codes."""
        assert ThemeColors(error="#f00").error == "#f00"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without #."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(error="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors of the wrong length."""
        with pytest.raises(ValueError, match="#RGB or #RRGGBB"):
            ThemeColors(error="#ffff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(error="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown color names."""
        with pytest.raises(ValueError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Reads string values from the colors section."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nerror = "#ff0000"\nbogus = 3\n')

        assert _load_toml_colors(path) == {"error": "#ff0000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Missing file yields None."""
        assert _load_toml_colors(tmp_path / "missing.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML yields None."""
        path = tmp_path / "theme.toml"
        path.write_text("[colors\n")

        assert _load_toml_colors(path) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """A colors key that is not a table yields None."""
        path = tmp_path / "theme.toml"
        path.write_text('colors = "red"\n')

        assert _load_toml_colors(path) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_defaults_without_user_theme(self, tmp_path: Path) -> None:
        """No user theme yields the defaults."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_overrides(self, tmp_path: Path) -> None:
        """User colors override the defaults they name."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nerror = "#ff0000"\n')

        colors = load_theme(path)

        assert colors.error == "#ff0000"
        assert colors.success == ThemeColors().success

    def test_graceful_fallback_on_invalid_user_theme(self, tmp_path: Path) -> None:
        """Invalid user colors fall back to the defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nerror = "red"\n')

        assert load_theme(path) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_returns_rich_theme(self) -> None:
        """get_rich_theme returns a Rich Theme."""
        assert isinstance(get_rich_theme(ThemeColors()), Theme)

    def test_includes_output_styles(self) -> None:
        """The styles used for output are defined."""
        theme = get_rich_theme(ThemeColors())

        for name in ("success", "warning", "error"):
            assert name in theme.styles


class TestGetTheme:
    """Tests for get_theme caching."""

    def test_caches_theme(self) -> None:
        """get_theme loads once and reuses the result."""
        with (
            patch.object(theme_module, "_cached_theme", None),
            patch.object(theme_module, "get_rich_theme", return_value=Theme({})) as mock_get,
        ):
            first = get_theme()
            second = get_theme()

        assert first is second
        mock_get.assert_called_once()
