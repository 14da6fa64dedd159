from .json_export import export_theme, theme_filename
from .preview import ramp_preview_array, render_ramp_preview
from .terminal import print_named_colors, print_terminal_swatch, terminal_swatch_lines

__all__ = [
    "export_theme",
    "print_named_colors",
    "print_terminal_swatch",
    "ramp_preview_array",
    "render_ramp_preview",
    "terminal_swatch_lines",
    "theme_filename",
]
