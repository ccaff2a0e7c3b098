"""WCAG 2.0 luminance and contrast helpers."""

from .color import RGB, hex_to_rgb

# WCAG AA for normal text
MIN_TEXT_CONTRAST = 4.5

WHITE_HEX = "#ffffff"
BLACK_HEX = "#000000"

_WHITE = RGB(255, 255, 255)
_BLACK = RGB(0, 0, 0)


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(rgb_a, rgb_b):
    """Calculate the contrast ratio (1-21) between two RGB colors"""
    lum_a = relative_luminance(*rgb_a)
    lum_b = relative_luminance(*rgb_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def choose_foreground(background_hex):
    """Pick white or black text, whichever contrasts more with the background.

    Equal ratios resolve to white.
    """
    bg = hex_to_rgb(background_hex)
    if contrast_ratio(bg, _WHITE) >= contrast_ratio(bg, _BLACK):
        return WHITE_HEX
    return BLACK_HEX
