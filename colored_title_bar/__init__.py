"""Deterministic, readable title bar colors for editor workspaces."""

from .constants import APP_VERSION as __version__
from .palette import (
    TitleBarColors,
    generate_title_bar_colors,
    generate_title_bar_colors_from_hue,
    generate_title_bar_colors_from_seed,
    title_bar_colors_from_hsl,
)
from .theme import ThemeKind

__all__ = [
    "ThemeKind",
    "TitleBarColors",
    "generate_title_bar_colors",
    "generate_title_bar_colors_from_hue",
    "generate_title_bar_colors_from_seed",
    "title_bar_colors_from_hsl",
]
