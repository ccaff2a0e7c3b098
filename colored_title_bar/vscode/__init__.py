from .manager import TitleBarManager
from .settings import WorkspaceSettings
from .startup import color_on_startup
from .state import WorkspaceState

__all__ = ["TitleBarManager", "WorkspaceSettings", "WorkspaceState", "color_on_startup"]
