"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from rich.theme import Theme
from slate.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(note_name="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nheader = "#aabbcc"\n')

        assert _load_toml_colors(theme_file) == {"text": "#000000", "header": "#aabbcc"}

    def test_missing_file(self, tmp_path: Path) -> None:
        assert _load_toml_colors(tmp_path / "nope.toml") is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\n")

        assert _load_toml_colors(theme_file) is None

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None

    def test_non_string_values_dropped(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nmuted = 5\n')

        assert _load_toml_colors(theme_file) == {"text": "#000000"}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_defaults_without_user_file(self, tmp_path: Path) -> None:
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_overrides_applied(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nnote_path = "#123456"\n')

        colors = load_theme(theme_file)

        assert colors.note_path == "#123456"
        assert colors.text == ThemeColors().text

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "white"\n')

        assert load_theme(theme_file) == ThemeColors()

    def test_default_location(self, isolated_config: Path) -> None:
        isolated_config.mkdir(parents=True)
        (isolated_config / "theme.toml").write_text('[colors]\ninfo = "#010203"\n')

        assert load_theme().info == "#010203"


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_contains_expected_styles(self) -> None:
        theme = get_rich_theme(ThemeColors())

        for name in ("text", "error", "bold_header", "note_name", "note_path", "dim"):
            assert name in theme.styles

    def test_get_theme_is_cached(self) -> None:
        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first
