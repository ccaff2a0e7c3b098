from ..color import HSL, clamp
from ..opacity import opacity_to_hex
from ..theme import ThemeKind

INACTIVE_SATURATION_FACTOR = 0.65
BORDER_SATURATION_FACTOR = 0.6
INACTIVE_FOREGROUND_OPACITY = 0.8

# Lightness offsets applied to the active color
INACTIVE_LIGHTNESS_OFFSET = {
    ThemeKind.DARK: -3,
    ThemeKind.LIGHT: 5,
    ThemeKind.HIGH_CONTRAST: -3,
}
BORDER_LIGHTNESS_OFFSET = {
    ThemeKind.DARK: -6,
    ThemeKind.LIGHT: -12,
    ThemeKind.HIGH_CONTRAST: -6,
}


def derive_inactive_hsl(hsl, theme):
    """Derive a muted inactive-background HSL from the active color"""
    h, s, l = hsl
    return HSL(
        h,
        clamp(s * INACTIVE_SATURATION_FACTOR, 0, 100),
        clamp(l + INACTIVE_LIGHTNESS_OFFSET[theme], 0, 100),
    )


def derive_inactive_foreground(active_foreground):
    """Append the inactive alpha (cc, 80% opacity) to a #rrggbb foreground"""
    return active_foreground + opacity_to_hex(INACTIVE_FOREGROUND_OPACITY)


def derive_border_hsl(hsl, theme):
    """Derive a border HSL that reads darker than the active background"""
    h, s, l = hsl
    return HSL(
        h,
        clamp(s * BORDER_SATURATION_FACTOR, 0, 100),
        clamp(l + BORDER_LIGHTNESS_OFFSET[theme], 0, 100),
    )
