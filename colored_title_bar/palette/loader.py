import json

from ..color import hex_to_rgb
from ..constants import TITLE_BAR_KEYS
from ..error_handler import SettingsError
from ..theme import ThemeKind
from .assembler import TitleBarColors


def load_colors_from_json(json_path):
    """Load a title bar color set from JSON.

    Accepts files written by export_json as well as a bare
    workbench.colorCustomizations map.

    Args:
        json_path: Path to the JSON file

    Returns:
        tuple: (TitleBarColors, ThemeKind or None from _theme metadata)

    Raises:
        SettingsError: if the file cannot be read or a key is missing
        InvalidColorError: if a color is not a valid hex string
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsError(f"Cannot read color file {json_path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Color file {json_path} does not hold a JSON object")

    missing = [key for key in TITLE_BAR_KEYS if key not in data]
    if missing:
        raise SettingsError(f"Color file {json_path} is missing: {', '.join(missing)}")

    for key in TITLE_BAR_KEYS:
        hex_to_rgb(data[key])

    theme = None
    if "_theme" in data:
        try:
            theme = ThemeKind(data["_theme"])
        except ValueError:
            theme = None

    return TitleBarColors.from_settings(data), theme
