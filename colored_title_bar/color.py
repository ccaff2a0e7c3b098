import colorsys
import math
import re
from collections import namedtuple

from .error_handler import InvalidColorError

HSL = namedtuple("HSL", ["h", "s", "l"])
RGB = namedtuple("RGB", ["r", "g", "b"])

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


def clamp(value, low, high):
    """Clamp value to the inclusive range [low, high]"""
    return max(low, min(high, value))


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h, s, l):
    """Convert HSL (degrees, percent, percent) to an RGB namedtuple.

    The hue wraps into [0, 360) first, so -60 and 300 give the same color.
    Channels are rounded half up and clamped to [0, 255].
    """
    h = h % 360
    s = clamp(s, 0, 100)
    l = clamp(l, 0, 100)
    r, g, b = colorsys.hls_to_rgb(h / 360, l / 100, s / 100)
    return RGB(
        clamp(_round_half_up(r * 255), 0, 255),
        clamp(_round_half_up(g * 255), 0, 255),
        clamp(_round_half_up(b * 255), 0, 255),
    )


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse ``#rrggbb``, ``rrggbb`` or an 8-digit ``#rrggbbaa`` into RGB.

    The alpha pair of an 8-digit color is ignored.

    Raises:
        InvalidColorError: if the string is not a 6 or 8 digit hex color
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}")
    match = _HEX_PATTERN.match(hex_color.strip())
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    return RGB(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def rgb_to_hsl(r, g, b):
    """Convert 0-255 RGB channels to an HSL namedtuple."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(h * 360, s * 100, l * 100)
