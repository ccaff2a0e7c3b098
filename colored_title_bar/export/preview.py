import logging
from html import escape

import numpy as np
from PIL import Image, ImageDraw

from ..color import hex_to_rgb
from ..contrast import choose_foreground, contrast_ratio
from .report import effective_rgb

logger = logging.getLogger("colored_title_bar.export")

BORDER_WIDTH = 2
BAR_GAP = 12
CANVAS_RGB = (128, 128, 128)


def create_html_preview(colors, output_path, theme=None, title="Workspace"):
    """Create an HTML page showing the active and inactive title bars"""
    html = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Title Bar Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: #808080;
            color: #ffffff;
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        .theme-badge {
            display: inline-block;
            padding: 4px 12px;
            border-radius: 4px;
            font-size: 12px;
            margin-bottom: 30px;
            background: {active_bg};
            color: {active_fg};
        }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
        }
        .title-bar {
            height: 36px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 13px;
            border-bottom: 2px solid {border};
            margin-bottom: 15px;
        }
        .active { background: {active_bg}; color: {active_fg}; }
        .inactive { background: {inactive_bg}; color: {inactive_fg}; }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
        }
        .color-card {
            width: 180px;
            border-radius: 8px;
            overflow: hidden;
            background: #2b2b2b;
        }
        .color-swatch {
            height: 80px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 14px;
            font-weight: 500;
        }
        .color-info {
            padding: 12px;
            font-size: 11px;
        }
        .color-name {
            font-weight: 600;
            margin-bottom: 4px;
        }
        .color-hex {
            opacity: 0.7;
        }
    </style>
</head>
<body>
    <h1>Title Bar Preview</h1>
    <div class="theme-badge">{theme_type} Theme</div>

    <h2>Focused Window</h2>
    <div class="title-bar active">{title} (contrast {active_contrast}:1)</div>

    <h2>Unfocused Window</h2>
    <div class="title-bar inactive">{title} (contrast {inactive_contrast}:1)</div>

    <h2>Colors</h2>
    <div class="palette-section">
        {color_cards}
    </div>
</body>
</html>"""

    def make_card(name, hex_color):
        text_color = choose_foreground(hex_color)
        return f"""<div class="color-card">
            <div class="color-swatch" style="background: {hex_color}; color: {text_color}">Aa</div>
            <div class="color-info">
                <div class="color-name">{name}</div>
                <div class="color-hex">{hex_color}</div>
            </div>
        </div>"""

    active_bg = hex_to_rgb(colors.active_background)
    inactive_bg = hex_to_rgb(colors.inactive_background)
    active_contrast = contrast_ratio(hex_to_rgb(colors.active_foreground), active_bg)
    inactive_contrast = contrast_ratio(effective_rgb(colors.inactive_foreground, inactive_bg), inactive_bg)

    replacements = {
        "{active_bg}": colors.active_background,
        "{active_fg}": colors.active_foreground,
        "{inactive_bg}": colors.inactive_background,
        "{inactive_fg}": colors.inactive_foreground,
        "{border}": colors.border,
        "{theme_type}": theme.name.replace("_", " ").title() if theme is not None else "Any",
        "{title}": escape(title),
        "{active_contrast}": f"{active_contrast:.1f}",
        "{inactive_contrast}": f"{inactive_contrast:.1f}",
    }
    for old, new in replacements.items():
        html = html.replace(old, new)

    html = html.replace(
        "{color_cards}",
        "\n".join(make_card(key, hex_color) for key, hex_color in colors.to_settings().items()),
    )

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.debug("Wrote HTML preview to %s", output_path)


def render_title_bars(colors, width=640, bar_height=36, title="Workspace"):
    """Render the active bar above the inactive bar as a PIL image.

    Each bar carries the border color along its bottom edge.
    """
    height = 2 * bar_height + BAR_GAP
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = CANVAS_RGB

    border = hex_to_rgb(colors.border)
    bars = [
        (0, hex_to_rgb(colors.active_background), hex_to_rgb(colors.active_foreground)),
        (bar_height + BAR_GAP, hex_to_rgb(colors.inactive_background), None),
    ]
    for top, bg, _ in bars:
        pixels[top : top + bar_height, :] = bg
        pixels[top + bar_height - BORDER_WIDTH : top + bar_height, :] = border

    image = Image.fromarray(pixels)
    draw = ImageDraw.Draw(image)
    _, text_top, _, text_bottom = draw.textbbox((0, 0), title)
    for top, bg, fg in bars:
        if fg is None:
            fg = effective_rgb(colors.inactive_foreground, bg)
        y = top + (bar_height - BORDER_WIDTH - (text_bottom - text_top)) // 2 - text_top
        draw.text((12, y), title, fill=tuple(fg))
    return image


def create_png_preview(colors, output_path, width=640, bar_height=36, title="Workspace"):
    """Save a PNG mock-up of the active and inactive title bars"""
    image = render_title_bars(colors, width=width, bar_height=bar_height, title=title)
    image.save(output_path, format="PNG")
    logger.debug("Wrote PNG preview to %s", output_path)
