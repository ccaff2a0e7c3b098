from .color import RGB, clamp


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{int(clamped * 255):02x}"


def hex_to_opacity(alpha_hex):
    """Convert a two digit alpha (00-ff) back to a 0.0-1.0 opacity."""
    return int(alpha_hex, 16) / 255


def blend_rgb_with_opacity(fg_rgb, bg_rgb, opacity):
    """
    Calculate the color seen when fg_rgb is drawn at the given opacity over bg_rgb.
    Returns a new RGB.
    """
    opacity = clamp(opacity, 0.0, 1.0)
    fg_r, fg_g, fg_b = fg_rgb
    bg_r, bg_g, bg_b = bg_rgb

    blended_r = int(fg_r * opacity + bg_r * (1 - opacity))
    blended_g = int(fg_g * opacity + bg_g * (1 - opacity))
    blended_b = int(fg_b * opacity + bg_b * (1 - opacity))

    return RGB(blended_r, blended_g, blended_b)
