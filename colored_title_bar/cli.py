import argparse
import os
import sys

import numpy as np

from .color import hex_to_rgb
from .constants import APP_VERSION
from .contrast import MIN_TEXT_CONTRAST, choose_foreground, contrast_ratio
from .error_handler import ColoredTitleBarError, setup_logging
from .export import (
    create_html_preview,
    create_png_preview,
    export_json,
    generate_readability_report,
    print_color_set,
)
from .palette import (
    HUE_PRESETS,
    find_preset,
    generate_title_bar_colors,
    generate_title_bar_colors_from_hue,
    generate_title_bar_colors_from_seed,
    load_colors_from_json,
    parse_hue,
)
from .vscode import TitleBarManager, WorkspaceState, color_on_startup

NO_WORKSPACE_MESSAGE = "Colored Title Bar: open a folder first, per-window colors require a workspace."


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        return args.func(args)
    except ColoredTitleBarError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    generation = argparse.ArgumentParser(add_help=False)
    generation.add_argument(
        "--theme",
        default=None,
        help="Theme kind: dark, light, high-contrast, high-contrast-light or 1-4. "
        "If not set, derived from the workspace's workbench.colorTheme.",
    )
    generation.add_argument(
        "--random-seed",
        type=int,
        default=None,
        help="Seed the random generator for reproducible random colors",
    )

    workspace = argparse.ArgumentParser(add_help=False)
    workspace.add_argument(
        "workspace",
        nargs="?",
        default=".",
        help="Workspace folder (default: current directory)",
    )
    workspace.add_argument(
        "--state-file",
        metavar="JSON",
        default=None,
        help="Where to remember applied colors (default: .vscode/colored-title-bar.json)",
    )

    parser = argparse.ArgumentParser(
        prog="colored-title-bar",
        description="Give every editor workspace its own readable title bar color",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.set_defaults(verbose=False)
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser(
        "randomize", parents=[common, generation, workspace], help="Apply a random title bar color"
    )
    cmd.set_defaults(func=_run_randomize)

    cmd = commands.add_parser(
        "pick-hue", parents=[common, generation, workspace], help="Apply a color family"
    )
    cmd.add_argument(
        "--hue",
        default=None,
        help="Preset name (e.g. Teal) or hue in degrees. Lists the presets if omitted.",
    )
    cmd.set_defaults(func=_run_pick_hue)

    cmd = commands.add_parser(
        "seed", parents=[common, generation, workspace], help="Apply the workspace's stable color"
    )
    cmd.add_argument(
        "--seed",
        default=None,
        help="Seed string (default: the workspace folder URI)",
    )
    cmd.set_defaults(func=_run_seed)

    cmd = commands.add_parser(
        "startup", parents=[common, generation, workspace], help="Color the workspace the way editor startup does"
    )
    cmd.set_defaults(func=_run_startup)

    cmd = commands.add_parser(
        "reset", parents=[common, workspace], help="Remove the title bar colors"
    )
    cmd.set_defaults(func=_run_reset)

    cmd = commands.add_parser(
        "show", parents=[common, workspace], help="Show the applied colors and their readability"
    )
    cmd.set_defaults(func=_run_show)

    cmd = commands.add_parser(
        "preview", parents=[common, generation], help="Generate colors and write previews without applying"
    )
    source = cmd.add_mutually_exclusive_group()
    source.add_argument("--hue", default=None, help="Preset name or hue in degrees")
    source.add_argument("--seed", default=None, help="Seed string")
    source.add_argument("--from-json", metavar="JSON", default=None, help="Load colors from a JSON file")
    cmd.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    cmd.add_argument("--name", default="title-bar", help="Base name of the exported files")
    cmd.set_defaults(func=_run_preview)

    cmd = commands.add_parser(
        "contrast", parents=[common], help="Check the contrast of a background (and foreground)"
    )
    cmd.add_argument("background", help="Background hex color")
    cmd.add_argument("foreground", nargs="?", default=None, help="Foreground hex color (default: best of white/black)")
    cmd.set_defaults(func=_run_contrast)

    return parser


def _manager(args):
    state = WorkspaceState(args.state_file) if args.state_file else None
    return TitleBarManager(args.workspace, state=state)


def _random_source(args):
    if args.random_seed is None:
        return None
    return np.random.default_rng(args.random_seed).random


def _apply(manager, colors, message):
    if not manager.apply_colors(colors):
        print(NO_WORKSPACE_MESSAGE)
        return 1
    print(message)
    return 0


def _run_randomize(args):
    manager = _manager(args)
    theme = manager.get_theme_kind(args.theme)
    colors = generate_title_bar_colors(theme, _random_source(args))
    return _apply(manager, colors, f"Title bar color updated to {colors.active_background}")


def _run_pick_hue(args):
    if args.hue is None:
        print("Color families:")
        for preset in HUE_PRESETS:
            print(f"  {preset.label:10} {preset.hue:3}°  {preset.description}")
        return 0

    try:
        hue = parse_hue(args.hue)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    preset = find_preset(args.hue)
    label = preset.label if preset else f"{hue:g}°"

    manager = _manager(args)
    theme = manager.get_theme_kind(args.theme)
    colors = generate_title_bar_colors_from_hue(hue, theme)
    return _apply(manager, colors, f"Title bar color set to {label} ({colors.active_background})")


def _run_seed(args):
    manager = _manager(args)
    seed = args.seed or manager.get_workspace_seed()
    if not seed:
        print(NO_WORKSPACE_MESSAGE)
        return 1

    theme = manager.get_theme_kind(args.theme)
    colors = generate_title_bar_colors_from_seed(seed, theme)
    return _apply(manager, colors, f"Title bar color for {seed} is {colors.active_background}")


def _run_startup(args):
    manager = _manager(args)
    if not manager.has_workspace():
        print(NO_WORKSPACE_MESSAGE)
        return 1

    colors = color_on_startup(manager, theme=args.theme, random_source=_random_source(args))
    if colors is None:
        print("Title bar already colored; nothing to do.")
    else:
        print(f"Title bar color set to {colors.active_background}")
    return 0


def _run_reset(args):
    manager = _manager(args)
    manager.reset_colors()
    print("Title bar colors reset to default.")
    return 0


def _run_show(args):
    manager = _manager(args)
    colors = manager.get_saved_colors()
    if colors is None:
        print(f"No title bar colors applied in {args.workspace}")
        return 1

    print_color_set(colors)
    report, _ = generate_readability_report(colors)
    print("\n" + report)
    return 0


def _run_preview(args):
    """Generate a color set and export it without touching any workspace."""
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    manager = TitleBarManager(os.getcwd())
    theme = manager.get_theme_kind(args.theme)

    if args.from_json:
        colors, json_theme = load_colors_from_json(args.from_json)
        theme = json_theme or theme
        source = os.path.basename(args.from_json)
    elif args.hue is not None:
        try:
            hue = parse_hue(args.hue)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        colors = generate_title_bar_colors_from_hue(hue, theme)
        source = f"hue:{hue:g}"
    elif args.seed is not None:
        colors = generate_title_bar_colors_from_seed(args.seed, theme)
        source = f"seed:{args.seed}"
    else:
        colors = generate_title_bar_colors(theme, _random_source(args))
        source = "random"

    print_color_set(colors, theme)
    report, _ = generate_readability_report(colors)
    print("\n" + report)

    json_path = os.path.join(output_dir, f"{args.name}.json")
    report_path = os.path.join(output_dir, f"{args.name}-report.txt")
    html_path = os.path.join(output_dir, f"{args.name}.html")
    png_path = os.path.join(output_dir, f"{args.name}.png")

    export_json(colors, json_path, theme=theme, source=source)
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(report)
    create_html_preview(colors, html_path, theme)
    create_png_preview(colors, png_path)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {json_path}")
    print(f"  - {report_path}")
    print(f"  - {html_path}")
    print(f"  - {png_path}")
    print("=" * 60)
    return 0


def _run_contrast(args):
    background = hex_to_rgb(args.background)
    foreground_hex = args.foreground or choose_foreground(args.background)
    ratio = contrast_ratio(background, hex_to_rgb(foreground_hex))

    status = "passes" if ratio >= MIN_TEXT_CONTRAST else "fails"
    print(f"{foreground_hex} on {args.background}: {ratio:.2f}:1 ({status} WCAG AA {MIN_TEXT_CONTRAST}:1)")
    if args.foreground is None:
        print(f"Best foreground: {foreground_hex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
