import logging

from ..palette import generate_title_bar_colors, generate_title_bar_colors_from_seed

logger = logging.getLogger("colored_title_bar.vscode")


def color_on_startup(manager, theme=None, random_source=None):
    """Decide whether opening the workspace should color its title bar.

    With colorOnStartup set, every start gets a fresh random color. Otherwise
    a workspace opened for the first time gets a deterministic color seeded
    from its folder URI, and one that was already colored is left alone.

    Returns:
        The TitleBarColors applied, or None if nothing was applied
    """
    if not manager.has_workspace():
        return None

    theme_kind = manager.get_theme_kind(theme)

    if manager.settings.color_on_startup:
        colors = generate_title_bar_colors(theme_kind, random_source)
        logger.debug("colorOnStartup is set; applying random colors")
    elif not manager.has_saved_colors():
        seed = manager.get_workspace_seed()
        if not seed:
            return None
        colors = generate_title_bar_colors_from_seed(seed, theme_kind)
        logger.debug("First start for %s; applying seeded colors", seed)
    else:
        return None

    return colors if manager.apply_colors(colors) else None
