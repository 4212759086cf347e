"""Unit tests for the theme catalog."""

import pytest

from resumeforge.contexts.rendering.exceptions import ThemeConfigError
from resumeforge.contexts.rendering.themes import (
    DEFAULT_THEME_ID,
    Theme,
    ThemeCatalog,
    get_theme,
    hex_to_rgb,
    load_theme_catalog,
    rgb_to_hex,
)

BUNDLED_IDS = (
    "modern-blue",
    "minimal-black",
    "creative-gradient",
    "classic-serif",
    "tech-green",
    "corporate-navy",
)

CUSTOM_THEMES_YAML = """\
default: plain
themes:
  plain:
    name: Plain
    description: Black on white
    primary_color: "#000000"
    secondary_color: "#ffffff"
    accent_color: "#333333"
    font_family: times
"""


def write_themes(tmp_path, content):
    path = tmp_path / "themes.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
class TestHexColors:
    @pytest.mark.parametrize(
        "value, rgb", [("#2563eb", (37, 99, 235)), ("000000", (0, 0, 0)), ("#FFFFFF", (255, 255, 255))]
    )
    def test_hex_to_rgb(self, value, rgb):
        assert hex_to_rgb(value) == rgb

    @pytest.mark.parametrize("value", ["#fff", "blue", "#12345g", ""])
    def test_invalid_hex(self, value):
        with pytest.raises(ValueError):
            hex_to_rgb(value)

    def test_rgb_to_hex_inverts(self):
        assert rgb_to_hex(hex_to_rgb("#1e3a8a")) == "#1e3a8a"


@pytest.mark.unit
class TestBundledCatalog:
    def test_all_themes_present(self):
        catalog = load_theme_catalog()
        assert catalog.ids == BUNDLED_IDS
        assert len(catalog) == 6
        assert all(isinstance(theme, Theme) for theme in catalog)

    def test_default_theme(self):
        catalog = load_theme_catalog()
        assert catalog.default_id == DEFAULT_THEME_ID
        assert catalog.default.name == "Modern Blue"
        assert catalog.default.primary_color == (37, 99, 235)

    def test_unknown_theme_falls_back_to_default(self):
        assert get_theme("nonexistent-theme") == get_theme(DEFAULT_THEME_ID)

    def test_classic_serif_uses_times(self):
        assert get_theme("classic-serif").font_family == "times"

    def test_contains(self):
        catalog = load_theme_catalog()
        assert "tech-green" in catalog
        assert "neon-pink" not in catalog

    def test_loaded_once(self):
        assert load_theme_catalog() is load_theme_catalog()

    @pytest.mark.parametrize(
        "theme_id, filename",
        [
            ("tech-green", "resume_tech_green.pdf"),
            ("minimal-black", "resume_minimal_black_&_white.pdf"),
        ],
    )
    def test_download_filename(self, theme_id, filename):
        assert get_theme(theme_id).download_filename(".pdf") == filename


@pytest.mark.unit
class TestThemeCatalogFromYaml:
    def test_custom_file(self, tmp_path):
        catalog = ThemeCatalog.from_yaml(write_themes(tmp_path, CUSTOM_THEMES_YAML))

        assert catalog.ids == ("plain",)
        assert catalog.get("modern-blue").id == "plain"
        assert catalog.default.font_family == "times"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeConfigError, match="not found"):
            ThemeCatalog.from_yaml(tmp_path / "absent.yaml")

    def test_missing_themes_mapping(self, tmp_path):
        with pytest.raises(ThemeConfigError, match="'themes' mapping"):
            ThemeCatalog.from_yaml(write_themes(tmp_path, "default: plain\n"))

    def test_missing_fields(self, tmp_path):
        content = "default: plain\nthemes:\n  plain:\n    name: Plain\n"
        with pytest.raises(ThemeConfigError, match="missing fields") as exc_info:
            ThemeCatalog.from_yaml(write_themes(tmp_path, content))
        assert exc_info.value.theme_id == "plain"

    def test_unsupported_font(self, tmp_path):
        content = CUSTOM_THEMES_YAML.replace("font_family: times", "font_family: comic-sans")
        with pytest.raises(ThemeConfigError, match="Unsupported font_family"):
            ThemeCatalog.from_yaml(write_themes(tmp_path, content))

    def test_bad_color(self, tmp_path):
        content = CUSTOM_THEMES_YAML.replace('"#000000"', '"black"')
        with pytest.raises(ThemeConfigError, match="Invalid hex color"):
            ThemeCatalog.from_yaml(write_themes(tmp_path, content))

    def test_undefined_default(self, tmp_path):
        content = CUSTOM_THEMES_YAML.replace("default: plain", "default: fancy")
        with pytest.raises(ThemeConfigError, match="Default theme 'fancy'"):
            ThemeCatalog.from_yaml(write_themes(tmp_path, content))
