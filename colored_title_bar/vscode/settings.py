import logging
from pathlib import Path

from ..constants import (
    COLOR_CUSTOMIZATIONS_KEY,
    COLOR_ON_STARTUP_KEY,
    COLOR_THEME_KEY,
    SETTINGS_PATH,
    TITLE_BAR_KEYS,
)
from .json_store import load_json_object, save_json_object

logger = logging.getLogger("colored_title_bar.vscode")


class WorkspaceSettings:
    """Workspace-scoped editor settings (``<workspace>/.vscode/settings.json``).

    Only ``workbench.colorCustomizations`` is ever written; every other
    setting, and every unrelated color customization, is kept as is.
    """

    def __init__(self, workspace_dir):
        self.workspace_dir = Path(workspace_dir)
        self.path = self.workspace_dir / SETTINGS_PATH

    def load(self):
        return load_json_object(self.path)

    def save(self, data):
        save_json_object(self.path, data)

    @property
    def color_customizations(self):
        value = self.load().get(COLOR_CUSTOMIZATIONS_KEY)
        return dict(value) if isinstance(value, dict) else {}

    @property
    def color_theme(self):
        value = self.load().get(COLOR_THEME_KEY)
        return value if isinstance(value, str) else None

    @property
    def color_on_startup(self):
        return bool(self.load().get(COLOR_ON_STARTUP_KEY, False))

    def apply_title_bar_colors(self, colors):
        """Merge the five titleBar.* colors into workbench.colorCustomizations."""
        data = self.load()
        current = data.get(COLOR_CUSTOMIZATIONS_KEY)
        updated = dict(current) if isinstance(current, dict) else {}
        updated.update(colors.to_settings())

        data[COLOR_CUSTOMIZATIONS_KEY] = updated
        self.save(data)
        logger.info("Applied title bar colors %s to %s", colors.active_background, self.path)

    def reset_title_bar_colors(self):
        """Remove only the titleBar.* keys; drop the map entirely if it empties."""
        if not self.path.exists():
            return
        data = self.load()
        current = data.get(COLOR_CUSTOMIZATIONS_KEY)
        if not isinstance(current, dict):
            return

        updated = {k: v for k, v in current.items() if k not in TITLE_BAR_KEYS}
        if updated:
            data[COLOR_CUSTOMIZATIONS_KEY] = updated
        else:
            del data[COLOR_CUSTOMIZATIONS_KEY]
        self.save(data)
        logger.info("Removed title bar colors from %s", self.path)
