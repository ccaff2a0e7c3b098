"""Theme classification and the per-theme tuning tables."""

import re
from collections import namedtuple
from enum import Enum


class ThemeKind(Enum):
    """Simplified theme classification used for color generation."""

    DARK = "dark"
    LIGHT = "light"
    HIGH_CONTRAST = "highContrast"


Range = namedtuple("Range", ["low", "high"])
ThemeRanges = namedtuple("ThemeRanges", ["saturation", "lightness"])
HueWave = namedtuple("HueWave", ["base_s", "span_s", "base_l", "span_l"])

# Saturation / lightness windows for random and seeded generation
THEME_RANGES = {
    ThemeKind.DARK: ThemeRanges(Range(20, 85), Range(12, 40)),
    ThemeKind.LIGHT: ThemeRanges(Range(25, 85), Range(65, 90)),
    ThemeKind.HIGH_CONTRAST: ThemeRanges(Range(40, 90), Range(10, 28)),
}

# Centre and half-span of the sinusoidal variation used for hue-anchored colors
HUE_WAVES = {
    ThemeKind.DARK: HueWave(base_s=40, span_s=20, base_l=22, span_l=8),
    ThemeKind.LIGHT: HueWave(base_s=50, span_s=20, base_l=78, span_l=8),
    ThemeKind.HIGH_CONTRAST: HueWave(base_s=65, span_s=15, base_l=18, span_l=6),
}

# Host theme kinds, normalized to lowercase alphanumerics. The numbers are
# the editor's ColorThemeKind values (1 light, 2 dark, 3 hc, 4 hc light).
_HOST_LIGHT_KINDS = {"1", "4", "light", "vs", "highcontrastlight", "hclight"}
_HOST_HIGH_CONTRAST_KINDS = {"3", "highcontrast", "highcontrastdark", "hc", "hcblack", "hcdark"}


def _normalize_kind(kind):
    if isinstance(kind, Enum):
        kind = kind.value
    return re.sub(r"[^a-z0-9]", "", str(kind).lower())


def theme_kind_from_host(kind):
    """Map the host's richer theme kind to a ThemeKind.

    Light and high-contrast-light variants map to LIGHT, high-contrast (dark)
    maps to HIGH_CONTRAST, and everything else, including unknown values,
    maps to DARK.

    Args:
        kind: ThemeKind, host ColorThemeKind number, or a kind name such as
            "light", "high-contrast-light", "hc-black"

    Returns:
        ThemeKind
    """
    if isinstance(kind, ThemeKind):
        return kind
    if kind is None:
        return ThemeKind.DARK

    normalized = _normalize_kind(kind)
    if normalized in _HOST_LIGHT_KINDS:
        return ThemeKind.LIGHT
    if normalized in _HOST_HIGH_CONTRAST_KINDS:
        return ThemeKind.HIGH_CONTRAST
    return ThemeKind.DARK


def theme_kind_from_theme_name(name):
    """Classify a color theme label, e.g. "Default Light Modern"."""
    if not name:
        return ThemeKind.DARK

    words = re.findall(r"[a-z]+", name.lower())
    high_contrast = "hc" in words or any(
        first == "high" and second == "contrast" for first, second in zip(words, words[1:])
    )
    if "light" in words:
        return ThemeKind.LIGHT
    if high_contrast:
        return ThemeKind.HIGH_CONTRAST
    return ThemeKind.DARK
