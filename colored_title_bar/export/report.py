from ..color import hex_to_rgb, rgb_to_hex, rgb_to_hsl
from ..contrast import MIN_TEXT_CONTRAST, contrast_ratio
from ..opacity import blend_rgb_with_opacity, hex_to_opacity

# Dimmed text of an unfocused window (WCAG AA, large text)
MIN_INACTIVE_CONTRAST = 3.0
# Border only has to be told apart from the bar, not read
MIN_BORDER_CONTRAST = 1.0


def effective_rgb(hex_color, bg_rgb):
    """RGB actually seen for a possibly translucent #rrggbbaa over bg_rgb"""
    rgb = hex_to_rgb(hex_color)
    digits = hex_color.lstrip("#")
    if len(digits) == 8:
        return blend_rgb_with_opacity(rgb, bg_rgb, hex_to_opacity(digits[6:8]))
    return rgb


def _describe(hex_color):
    h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
    return f"{hex_color} (H: {h:.0f}, S: {s:.1f}%, L: {l:.1f}%)"


def generate_readability_report(colors):
    """Generate a readability report for a title bar color set.

    Returns:
        tuple: (report text, list of (name, foreground, achieved, required))
    """
    active_bg = hex_to_rgb(colors.active_background)
    inactive_bg = hex_to_rgb(colors.inactive_background)
    inactive_fg = effective_rgb(colors.inactive_foreground, inactive_bg)

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Active background:   {_describe(colors.active_background)}")
    report.append(f"Inactive background: {_describe(colors.inactive_background)}")
    report.append(f"Border:              {_describe(colors.border)}")
    report.append("")

    checks = [
        ("active text", colors.active_foreground, hex_to_rgb(colors.active_foreground), active_bg, MIN_TEXT_CONTRAST),
        ("inactive text", colors.inactive_foreground, inactive_fg, inactive_bg, MIN_INACTIVE_CONTRAST),
        ("border", colors.border, hex_to_rgb(colors.border), active_bg, MIN_BORDER_CONTRAST),
    ]

    issues = []
    for name, hex_color, fg_rgb, bg_rgb, min_contrast in checks:
        ratio = contrast_ratio(fg_rgb, bg_rgb)
        status = "✓" if ratio >= min_contrast else "✗ FAIL"
        if ratio < min_contrast:
            issues.append((name, hex_color, ratio, min_contrast))
        report.append(
            f"  {name:14} {hex_color:10} on {rgb_to_hex(*bg_rgb)}: {ratio:4.1f}:1 (min {min_contrast}:1)  {status}"
        )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for name, hex_color, achieved, required in issues:
            report.append(f"  - {name}: {hex_color} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_color_set(colors, theme=None):
    """Print a title bar color set"""
    heading = "TITLE BAR COLORS"
    if theme is not None:
        heading += f" ({theme.value.upper()} THEME)"

    print("\n" + "=" * 60)
    print(heading)
    print("=" * 60)
    for key, hex_color in colors.to_settings().items():
        print(f"  {key:28} {hex_color}")
