import json
import logging

logger = logging.getLogger("colored_title_bar.export")


def export_json(colors, filepath, theme=None, source=None):
    """Export a title bar color set as JSON keyed by the titleBar.* settings.

    Args:
        colors: TitleBarColors to export
        filepath: Output file path
        theme: Optional ThemeKind the colors were tuned for
        source: Optional description of where the colors came from
            (seed, hue, "random")
    """
    data = colors.to_settings()

    if theme is not None:
        data["_theme"] = theme.value
    if source:
        data["_source"] = source

    data["_note"] = (
        "Merge the titleBar.* keys into workbench.colorCustomizations; "
        "inactiveForeground carries an alpha suffix"
    )

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.debug("Wrote color set to %s", filepath)
