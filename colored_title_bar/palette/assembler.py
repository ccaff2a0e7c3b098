import logging
from collections import namedtuple

from ..color import hsl_to_hex
from ..constants import TITLE_BAR_KEYS
from ..contrast import choose_foreground
from .derive import derive_border_hsl, derive_inactive_foreground, derive_inactive_hsl
from .generator import generate_appealing_hsl, hsl_from_hue, hsl_from_seed

logger = logging.getLogger("colored_title_bar.palette")

_FIELDS = [
    "active_background",
    "active_foreground",
    "inactive_background",
    "inactive_foreground",
    "border",
]


class TitleBarColors(namedtuple("TitleBarColors", _FIELDS)):
    """Complete set of title bar color overrides, as hex strings."""

    __slots__ = ()

    def to_settings(self):
        """Map the colors onto their titleBar.* customization keys."""
        return dict(zip(TITLE_BAR_KEYS, self))

    @classmethod
    def from_settings(cls, data):
        """Build from a titleBar.* mapping. Raises KeyError on a missing key."""
        return cls(*(data[key] for key in TITLE_BAR_KEYS))


def title_bar_colors_from_hsl(hsl, theme):
    """Build a complete TitleBarColors set from a base HSL and theme."""
    active_background = hsl_to_hex(*hsl)
    active_foreground = choose_foreground(active_background)
    inactive_background = hsl_to_hex(*derive_inactive_hsl(hsl, theme))
    inactive_foreground = derive_inactive_foreground(active_foreground)
    border = hsl_to_hex(*derive_border_hsl(hsl, theme))

    logger.debug(
        "Base HSL (%.1f, %.1f%%, %.1f%%) for %s theme -> %s",
        hsl[0],
        hsl[1],
        hsl[2],
        theme.value,
        active_background,
    )
    return TitleBarColors(
        active_background,
        active_foreground,
        inactive_background,
        inactive_foreground,
        border,
    )


def generate_title_bar_colors(theme, random_source=None):
    """Generate a random title bar color set appropriate for theme"""
    return title_bar_colors_from_hsl(generate_appealing_hsl(theme, random_source), theme)


def generate_title_bar_colors_from_hue(hue, theme):
    """Generate a title bar color set anchored to a specific hue"""
    return title_bar_colors_from_hsl(hsl_from_hue(hue, theme), theme)


def generate_title_bar_colors_from_seed(seed, theme):
    """
    Generate a deterministic title bar color set from a seed string
    (typically the workspace folder URI). The same seed always gives the
    same colors, so every workspace gets its own stable color.
    """
    return title_bar_colors_from_hsl(hsl_from_seed(seed, theme), theme)
