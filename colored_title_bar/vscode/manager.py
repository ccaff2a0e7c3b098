import logging
from pathlib import Path

from ..constants import STATE_KEY, STATE_PATH
from ..palette import TitleBarColors
from ..theme import theme_kind_from_host, theme_kind_from_theme_name
from .settings import WorkspaceSettings
from .state import WorkspaceState

logger = logging.getLogger("colored_title_bar.vscode")


class TitleBarManager:
    """Reads and writes title bar color overrides for one workspace.

    All writes are scoped to the workspace settings file, so every project
    folder keeps its own title bar color.
    """

    def __init__(self, workspace_dir, state=None, settings=None):
        self.workspace_dir = Path(workspace_dir)
        self.settings = settings or WorkspaceSettings(self.workspace_dir)
        self.state = state or WorkspaceState(self.workspace_dir / STATE_PATH)

    # ---------- Theme detection -------------------------------------------

    def get_theme_kind(self, override=None):
        """Return the ThemeKind to generate for.

        An explicit override (any host theme kind) wins; otherwise the
        workspace's workbench.colorTheme name is classified. Defaults to DARK.
        """
        if override is not None:
            return theme_kind_from_host(override)
        if not self.has_workspace():
            return theme_kind_from_host(None)
        return theme_kind_from_theme_name(self.settings.color_theme)

    # ---------- Workspace detection ---------------------------------------

    def has_workspace(self):
        return self.workspace_dir.is_dir()

    def get_workspace_seed(self):
        """Return the workspace folder URI, or None when there is no folder."""
        if not self.has_workspace():
            return None
        return self.workspace_dir.resolve().as_uri()

    # ---------- Color application ----------------------------------------

    def apply_colors(self, colors):
        """Write colors to the workspace settings and remember them.

        Returns False (with a warning) if the workspace folder does not exist.
        """
        if not self.has_workspace():
            logger.warning("No workspace folder at %s; per-window colors need one", self.workspace_dir)
            return False

        self.settings.apply_title_bar_colors(colors)
        self.state.update(STATE_KEY, colors._asdict())
        return True

    def reset_colors(self):
        """Remove the title bar keys from the settings and forget saved colors."""
        if not self.has_workspace():
            return
        self.settings.reset_title_bar_colors()
        self.state.update(STATE_KEY, None)

    def has_saved_colors(self):
        return self.state.get(STATE_KEY) is not None

    def get_saved_colors(self):
        """Return the previously applied TitleBarColors, or None."""
        saved = self.state.get(STATE_KEY)
        if saved is None:
            return None
        try:
            return TitleBarColors(**saved)
        except TypeError:
            logger.error("Ignoring malformed saved colors in %s", self.state.path)
            return None
