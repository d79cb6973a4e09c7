"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from packstack.core.theme import ThemeColors, _load_toml_colors, get_rich_theme, load_theme
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.available == "#69B9A1"
        assert colors.unavailable == "#636e72"

    def test_short_hex(self) -> None:
        """Three-digit hex codes are accepted."""
        assert ThemeColors(muted="#abc").muted == "#abc"

    def test_invalid_format(self) -> None:
        """Colors without # or with the wrong length are rejected."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="ffffff")
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from a valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\n')
        assert _load_toml_colors(theme_file) == {"text": "#000000"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Returns None when the file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")
        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_loads_bundled_theme(self, tmp_path: Path) -> None:
        """Without a user theme, bundled colors are used."""
        colors = load_theme(tmp_path / "none.toml")
        assert colors.header == "#69B9A1"
        assert colors.error == "#f53263"

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "#ff0000"\n')

        with patch("packstack.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.header == "#ff0000"
        assert colors.success == "#03b971"

    def test_invalid_user_color_falls_back(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "red"\n')
        assert load_theme(user_theme) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_styles(self) -> None:
        """The Rich theme defines every style the CLI uses."""
        theme = get_rich_theme(ThemeColors())
        assert isinstance(theme, Theme)
        for name in ("text", "muted", "header", "border", "success", "warning", "error"):
            assert name in theme.styles
        assert "available" in theme.styles
        assert "unavailable" in theme.styles
        assert "bold_header" in theme.styles
