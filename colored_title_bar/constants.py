"""Application constants and setting keys."""

from pathlib import Path

APP_NAME = "colored-title-bar"
APP_VERSION = "1.0.0"

# Workspace-relative locations
SETTINGS_DIR = Path(".vscode")
SETTINGS_PATH = SETTINGS_DIR / "settings.json"
STATE_PATH = SETTINGS_DIR / "colored-title-bar.json"

# Settings keys
COLOR_CUSTOMIZATIONS_KEY = "workbench.colorCustomizations"
COLOR_THEME_KEY = "workbench.colorTheme"
COLOR_ON_STARTUP_KEY = "coloredTitleBar.colorOnStartup"

# Workspace state key for the last applied color set
STATE_KEY = "coloredTitleBar.currentColors"

# Keys written to workbench.colorCustomizations, in TitleBarColors field order
TITLE_BAR_KEYS = (
    "titleBar.activeBackground",
    "titleBar.activeForeground",
    "titleBar.inactiveBackground",
    "titleBar.inactiveForeground",
    "titleBar.border",
)
