"""
Theme catalog for rendered resumes.

Themes are data, not code: each entry in themes.yaml names a primary color
(name line, section titles, job titles), an accent color (rules, subtitle),
a secondary background tint and a font family. The layout engine reads these
fields and never branches on a theme id.

The bundled table can be replaced by pointing THEMES_PATH at another YAML file
with the same shape.
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumeforge.contexts.rendering.exceptions import ThemeConfigError
from resumeforge.contexts.rendering.logger import _log_debug, _log_warning

load_dotenv()

BUNDLED_THEMES_PATH = Path(__file__).parent / "themes.yaml"
THEMES_PATH = Path(os.getenv("THEMES_PATH", str(BUNDLED_THEMES_PATH)))

DEFAULT_THEME_ID = "modern-blue"

SUPPORTED_FONT_FAMILIES = ("helvetica", "times")

HEX_COLOR_PATTERN = r"^#?([0-9a-fA-F]{6})$"

REQUIRED_THEME_FIELDS = (
    "name",
    "description",
    "primary_color",
    "secondary_color",
    "accent_color",
    "font_family",
)

RGB = Tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    """
    Convert "#rrggbb" (leading # optional) to an RGB tuple.

    Example:
        >>> hex_to_rgb("#2563eb")
        (37, 99, 235)

    Raises:
        ValueError: If value is not a six-digit hex color
    """
    match = re.match(HEX_COLOR_PATTERN, str(value).strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGB) -> str:
    """Inverse of hex_to_rgb, lower-case with a leading #."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass(frozen=True)
class Theme:
    """
    Named color and font parameters for a rendered resume.

    Attributes:
        id: Stable identifier (e.g., "modern-blue")
        name: Display name
        description: One-line description for theme pickers
        primary_color: RGB for the name line, section titles and job titles
        secondary_color: RGB background tint
        accent_color: RGB for rules and the subtitle line
        font_family: "helvetica" or "times"
    """

    id: str
    name: str
    description: str
    primary_color: RGB
    secondary_color: RGB
    accent_color: RGB
    font_family: str = "helvetica"

    def download_filename(self, extension: str) -> str:
        """
        File name for a document rendered with this theme.

        Example:
            >>> get_theme("tech-green").download_filename("pdf")
            'resume_tech_green.pdf'
        """
        slug = re.sub(r"\s+", "_", self.name.lower())
        return f"resume_{slug}.{extension.lstrip('.')}"


def _theme_from_config(theme_id: str, entry: Mapping, config_path: Path) -> Theme:
    if not isinstance(entry, Mapping):
        raise ThemeConfigError("Theme entry must be a mapping", config_path, theme_id)

    missing = [field for field in REQUIRED_THEME_FIELDS if field not in entry]
    if missing:
        raise ThemeConfigError(
            f"Theme entry is missing fields: {', '.join(missing)}", config_path, theme_id
        )

    font_family = str(entry["font_family"]).lower()
    if font_family not in SUPPORTED_FONT_FAMILIES:
        raise ThemeConfigError(
            f"Unsupported font_family '{font_family}' "
            f"(supported: {', '.join(SUPPORTED_FONT_FAMILIES)})",
            config_path,
            theme_id,
        )

    try:
        return Theme(
            id=theme_id,
            name=str(entry["name"]),
            description=str(entry["description"]),
            primary_color=hex_to_rgb(entry["primary_color"]),
            secondary_color=hex_to_rgb(entry["secondary_color"]),
            accent_color=hex_to_rgb(entry["accent_color"]),
            font_family=font_family,
        )
    except ValueError as e:
        raise ThemeConfigError(str(e), config_path, theme_id) from e


class ThemeCatalog:
    """
    Immutable table of themes keyed by id, with a default for unknown ids.

    Example:
        >>> catalog = ThemeCatalog.from_yaml()
        >>> catalog.get("classic-serif").font_family
        'times'
        >>> catalog.get("no-such-theme").id
        'modern-blue'
    """

    def __init__(self, themes: Mapping[str, Theme], default_id: str = DEFAULT_THEME_ID):
        if default_id not in themes:
            raise ThemeConfigError(f"Default theme '{default_id}' is not defined")
        self._themes = MappingProxyType(dict(themes))
        self.default_id = default_id

    @classmethod
    def from_yaml(cls, config_path: Path = None) -> "ThemeCatalog":
        """
        Load a catalog from a themes YAML file.

        Args:
            config_path: Theme file (defaults to THEMES_PATH)

        Raises:
            ThemeConfigError: File missing or malformed, or an entry is invalid
        """
        if config_path is None:
            config_path = THEMES_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            raise ThemeConfigError("Theme file not found", config_path)

        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

        if not isinstance(data, dict) or not isinstance(data.get("themes"), dict):
            raise ThemeConfigError("Theme file must contain a 'themes' mapping", config_path)

        themes = {
            str(theme_id): _theme_from_config(str(theme_id), entry, config_path)
            for theme_id, entry in data["themes"].items()
        }
        default_id = str(data.get("default", DEFAULT_THEME_ID))
        _log_debug(f"Loaded {len(themes)} themes from {config_path}")
        return cls(themes, default_id=default_id)

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._themes)

    @property
    def default(self) -> Theme:
        return self._themes[self.default_id]

    def __contains__(self, theme_id: str) -> bool:
        return theme_id in self._themes

    def __iter__(self):
        return iter(self._themes.values())

    def __len__(self) -> int:
        return len(self._themes)

    def get(self, theme_id: str) -> Theme:
        """
        Look up a theme, falling back to the default on an unknown id.

        Never raises; an unknown id is logged as a warning.
        """
        theme = self._themes.get(theme_id)
        if theme is None:
            _log_warning(f"Unknown theme '{theme_id}', using default '{self.default_id}'")
            return self.default
        return theme


@lru_cache(maxsize=None)
def _load_catalog(config_path: Path) -> ThemeCatalog:
    return ThemeCatalog.from_yaml(config_path)


def load_theme_catalog(config_path: Path = None) -> ThemeCatalog:
    """Load (once per path) and return the theme catalog."""
    return _load_catalog(Path(config_path) if config_path else THEMES_PATH)


def get_theme(theme_id: str) -> Theme:
    """Look up a theme in the configured catalog; unknown ids get the default theme."""
    return load_theme_catalog().get(theme_id)
