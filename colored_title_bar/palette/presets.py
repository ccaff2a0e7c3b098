import math
from collections import namedtuple

HuePreset = namedtuple("HuePreset", ["label", "description", "hue"])

# Color families offered by the pick-hue command
HUE_PRESETS = [
    HuePreset("Red", "Warm, bold red", 0),
    HuePreset("Orange", "Warm orange", 30),
    HuePreset("Amber", "Gold and amber", 45),
    HuePreset("Yellow", "Bright yellow", 55),
    HuePreset("Lime", "Fresh lime", 80),
    HuePreset("Green", "Natural green", 120),
    HuePreset("Teal", "Cool teal", 175),
    HuePreset("Cyan", "Bright cyan", 190),
    HuePreset("Blue", "Classic blue", 220),
    HuePreset("Indigo", "Deep indigo", 245),
    HuePreset("Purple", "Rich purple", 275),
    HuePreset("Magenta", "Vibrant magenta", 300),
    HuePreset("Pink", "Soft pink", 330),
    HuePreset("Rose", "Warm rose", 350),
]


def find_preset(name):
    """Look up a preset by label, ignoring case. Returns None if unknown."""
    wanted = name.strip().lower()
    for preset in HUE_PRESETS:
        if preset.label.lower() == wanted:
            return preset
    return None


def parse_hue(value):
    """Resolve a preset name or a number of degrees to a hue.

    Raises:
        ValueError: if value is neither a preset label nor a number
    """
    preset = find_preset(value)
    if preset is not None:
        return preset.hue
    try:
        hue = float(value)
    except ValueError:
        hue = math.nan
    if not math.isfinite(hue):
        labels = ", ".join(p.label for p in HUE_PRESETS)
        raise ValueError(f"Unknown hue {value!r}; use degrees or one of: {labels}")
    return hue
