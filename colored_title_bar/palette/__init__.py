from .assembler import (
    TitleBarColors,
    generate_title_bar_colors,
    generate_title_bar_colors_from_hue,
    generate_title_bar_colors_from_seed,
    title_bar_colors_from_hsl,
)
from .loader import load_colors_from_json
from .presets import HUE_PRESETS, find_preset, parse_hue

__all__ = [
    "TitleBarColors",
    "generate_title_bar_colors",
    "generate_title_bar_colors_from_hue",
    "generate_title_bar_colors_from_seed",
    "title_bar_colors_from_hsl",
    "load_colors_from_json",
    "HUE_PRESETS",
    "find_preset",
    "parse_hue",
]
