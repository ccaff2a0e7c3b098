import math

import numpy as np

from ..color import HSL, clamp
from ..hashing import hash_string_to_float, hash_string_to_hue
from ..theme import HUE_WAVES, THEME_RANGES

# Seed offsets for the two hash draws of seeded generation
SATURATION_SEED_OFFSET = 101
LIGHTNESS_SEED_OFFSET = 211


def default_random_source():
    """Return a "next float in [0, 1)" provider backed by a fresh numpy Generator"""
    return np.random.default_rng().random


def _lerp(value_range, t):
    low, high = value_range
    return low + (high - low) * t


def generate_appealing_hsl(theme, random_source=None):
    """Generate a random, visually appealing HSL color tuned for theme.

    Hue is uniform over the wheel; saturation and lightness are uniform
    within THEME_RANGES[theme].

    Args:
        theme: ThemeKind
        random_source: Zero-argument callable returning floats in [0, 1).
            Defaults to an unseeded numpy Generator.

    Returns:
        HSL namedtuple
    """
    if random_source is None:
        random_source = default_random_source()
    ranges = THEME_RANGES[theme]

    h = random_source() * 360
    s = _lerp(ranges.saturation, random_source())
    l = _lerp(ranges.lightness, random_source())
    return HSL(h % 360, clamp(s, 0, 100), clamp(l, 0, 100))


def hsl_from_hue(hue, theme):
    """Create a pleasant HSL anchored to a specific hue for the given theme.

    Saturation and lightness follow one sine period around the wheel, so
    neighbouring hues get neighbouring tunings.
    """
    h = hue % 360
    wave = math.sin(2 * math.pi * h / 360)
    tuning = HUE_WAVES[theme]

    s = tuning.base_s + wave * tuning.span_s
    l = tuning.base_l + wave * tuning.span_l
    return HSL(h, clamp(s, 0, 100), clamp(l, 0, 100))


def hsl_from_seed(seed, theme):
    """Derive a stable HSL from a seed string (e.g. a workspace URI)."""
    ranges = THEME_RANGES[theme]

    h = hash_string_to_hue(seed)
    s = _lerp(ranges.saturation, hash_string_to_float(seed, SATURATION_SEED_OFFSET))
    l = _lerp(ranges.lightness, hash_string_to_float(seed, LIGHTNESS_SEED_OFFSET))
    return HSL(h, clamp(s, 0, 100), clamp(l, 0, 100))
