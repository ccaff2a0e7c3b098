"""Reading and writing the JSON files of a workspace."""

import json
import logging

from ..error_handler import SettingsError

logger = logging.getLogger("colored_title_bar.vscode")


def load_json_object(path):
    """Load a JSON object from path.

    A missing or blank file reads as an empty dict.

    Raises:
        SettingsError: if the file exists but is not a JSON object. The file
            is left alone so a hand-edited settings file is never clobbered.
    """
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        raise SettingsError(f"Cannot read {path}: {e}") from e

    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Corrupt JSON file %s: %s", path, e)
        raise SettingsError(f"{path} is not valid JSON ({e}); fix or remove it first") from e
    if not isinstance(data, dict):
        raise SettingsError(f"{path} does not hold a JSON object")
    return data


def save_json_object(path, data):
    """Write data to path atomically (temp file + replace)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(json.dumps(data, indent=4, ensure_ascii=False) + "\n", encoding="utf-8")
        tmp.replace(path)
    except OSError as e:
        raise SettingsError(f"Cannot write {path}: {e}") from e
    finally:
        tmp.unlink(missing_ok=True)
    logger.debug("Wrote %s", path)
