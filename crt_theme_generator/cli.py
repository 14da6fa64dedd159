import argparse
import json
import logging
import re
import sys

from .errors import ThemeError
from .export import (
    export_theme,
    print_named_colors,
    print_terminal_swatch,
    render_ramp_preview,
)
from .opacity import build_ramp, derive_named_colors
from .palette import Palette, find_palette, load_palettes
from .palette.loader import DEFAULT_PREFIX
from .vscode import build_theme, load_role_template

_HEX_BYTE = re.compile(r"[0-9a-fA-F]{2}")


def _parse_opacity(value):
    """CLI opacity: a hex byte ("7f"), a 0.0-1.0 float, or "-" for the default."""
    if value == "-":
        return None
    if _HEX_BYTE.fullmatch(value):
        return value
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid opacity {value!r}: use a hex byte, a 0.0-1.0 float or '-'"
        ) from None


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="crt-theme-generator",
        description="Generate CRT-style VS Code color themes from a foreground/background pair",
    )
    parser.add_argument(
        "theme",
        nargs="?",
        default=None,
        help="Theme name from --config (with or without the prefix, e.g. 'Green')",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="JSON",
        help="Palette configuration with a 'themes' or 'config.themes' object",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Generate every theme in --config into --output",
    )
    parser.add_argument("--name", help="Theme name for an ad-hoc palette")
    parser.add_argument("--fg", help="Foreground color for an ad-hoc palette")
    parser.add_argument("--bg", help="Background color for an ad-hoc palette")
    parser.add_argument(
        "--type",
        default=None,
        help="Theme type for an ad-hoc palette: dark, light, hc (default: dark)",
    )
    parser.add_argument(
        "--opacity",
        action="append",
        type=_parse_opacity,
        metavar="LEVEL",
        help="Override the next opacity level (repeatable; '-' keeps the default)",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"Name prefix tried when looking up THEME (default: {DEFAULT_PREFIX!r})",
    )
    parser.add_argument(
        "--template",
        metavar="JSON",
        default=None,
        help="Role template JSON (default: bundled CRT template)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Write <theme>.json files here instead of printing to stdout",
    )
    parser.add_argument(
        "--show-ramp",
        action="store_true",
        help="Print the tint/shade ramp with 24-bit color swatches",
    )
    parser.add_argument(
        "--preview",
        metavar="PNG",
        default=None,
        help="Save a PNG preview of the tint/shade ramp",
    )
    parser.add_argument(
        "--terminal-test",
        action="store_true",
        help="Print the 16 ANSI colors on the 16 ANSI backgrounds",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    adhoc = args.fg is not None or args.bg is not None

    if args.terminal_test and not (args.all or args.theme or adhoc):
        print_terminal_swatch()
        return

    # Validate arguments
    if args.all:
        if args.theme or adhoc:
            parser.error("--all cannot be combined with THEME or --fg/--bg")
        ignored = [
            option
            for option, value in (
                ("--name", args.name),
                ("--type", args.type),
                ("--opacity", args.opacity),
                ("--show-ramp", args.show_ramp),
                ("--preview", args.preview),
            )
            if value
        ]
        if ignored:
            parser.error(f"--all cannot be combined with {', '.join(ignored)}")
        if not args.config:
            parser.error("--all requires --config")
        if not args.output:
            parser.error("--all requires --output")
    elif adhoc:
        if args.theme:
            parser.error("Cannot use both THEME and --fg/--bg")
        if args.fg is None or args.bg is None or not args.name:
            parser.error("--fg, --bg and --name are required for an ad-hoc palette")
    elif args.theme:
        if not args.config:
            parser.error("--config is required when selecting THEME")
    else:
        parser.error("Either THEME, --all or --fg/--bg is required")

    if args.terminal_test:
        # Keep stdout clean for the JSON document unless writing files
        print_terminal_swatch(file=sys.stdout if args.output else sys.stderr)

    try:
        if args.all:
            _run_all(args)
        elif adhoc:
            palette = Palette(args.name, args.type or "dark", args.fg, args.bg, args.opacity)
            _run_palette(palette, args)
        else:
            palettes = load_palettes(args.config)
            palette = find_palette(palettes, args.theme, prefix=args.prefix)
            if args.opacity:
                palette = palette._replace(opacities=args.opacity)
            _run_palette(palette, args)
    except ThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run_palette(palette, args):
    """Generate one theme, to stdout or into --output."""
    template = load_role_template(args.template)
    theme = build_theme(
        palette.name,
        palette.kind,
        palette.fg,
        palette.bg,
        opacities=palette.opacities,
        template=template,
    )

    # Keep stdout clean for the JSON document unless writing files
    info = sys.stdout if args.output else sys.stderr
    _show_extras(palette, args, info)

    if args.output:
        path = export_theme(theme, args.output)
        print(f"Exported: {path} (contains '{theme.name}', {theme.kind})")
    else:
        print(json.dumps(theme.as_dict(), indent=2))


def _run_all(args):
    """Generate every configured theme into --output."""
    palettes = load_palettes(args.config)
    template = load_role_template(args.template)

    print(f"Found {len(palettes)} themes in {args.config}")

    exported = []
    for palette in palettes.values():
        theme = build_theme(
            palette.name,
            palette.kind,
            palette.fg,
            palette.bg,
            opacities=palette.opacities,
            template=template,
        )
        exported.append(export_theme(theme, args.output))

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)


def _show_extras(palette, args, file):
    if not (args.show_ramp or args.preview):
        return

    named_colors = derive_named_colors(palette.fg, palette.bg, build_ramp(palette.opacities))
    if args.show_ramp:
        print_named_colors(named_colors, palette.fg, palette.bg, file=file)
    if args.preview:
        render_ramp_preview(named_colors, palette.bg, args.preview)
        print(f"Preview: {args.preview}", file=file)


if __name__ == "__main__":
    main()
