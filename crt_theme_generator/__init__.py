"""Generate CRT-style editor color themes from a foreground/background pair."""

from .color import Color, composite, composite_hex, format_hex, parse_hex
from .errors import MalformedColor, ThemeConfigError, ThemeError, UnknownColorRole
from .opacity import build_ramp, derive_named_colors
from .vscode import Theme, build_theme, expand, generate_vscode_theme

__all__ = [
    "Color",
    "MalformedColor",
    "Theme",
    "ThemeConfigError",
    "ThemeError",
    "UnknownColorRole",
    "build_ramp",
    "build_theme",
    "composite",
    "composite_hex",
    "derive_named_colors",
    "expand",
    "format_hex",
    "generate_vscode_theme",
    "parse_hex",
]
