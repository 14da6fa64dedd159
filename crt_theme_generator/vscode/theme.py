import json
import logging
from dataclasses import dataclass, field

from ..opacity import build_ramp, derive_named_colors
from .template import (
    color_bindings,
    expand_colors,
    expand_token_colors,
    load_role_template,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """A VS Code color theme ready for serialization."""

    name: str
    kind: str
    colors: dict = field(default_factory=dict)
    token_colors: list = field(default_factory=list)
    semantic_highlighting: bool = False

    def as_dict(self):
        return {
            "name": self.name,
            "type": self.kind,
            "colors": dict(self.colors),
            "semanticHighlighting": self.semantic_highlighting,
            "tokenColors": [
                {"scope": list(rule["scope"]), "settings": dict(rule["settings"])}
                for rule in self.token_colors
            ],
        }


def expand(name, kind, template, named_colors, fg, bg):
    """Substitute literal colors into a role template.

    Every entry is resolved independently, so the result does not depend on
    template order. The first unresolvable role aborts the expansion.

    Args:
        name: Theme name
        kind: Theme type understood by the host (dark, light, hc, ...)
        template: RoleTemplate
        named_colors: Tints and shades from derive_named_colors()
        fg: Literal foreground hex color
        bg: Literal background hex color

    Returns:
        Theme
    """
    bindings = color_bindings(named_colors, fg, bg)
    return Theme(
        name=name,
        kind=kind,
        colors=expand_colors(template.colors, bindings),
        token_colors=expand_token_colors(template.token_colors, bindings),
    )


def build_theme(name, kind, fg, bg, opacities=None, template=None):
    """Build a theme from a foreground/background pair.

    Args:
        name: Theme name
        kind: Theme type (dark, light, hc, ...)
        fg: Foreground hex color
        bg: Background hex color
        opacities: Optional opacity overrides, see build_ramp()
        template: Optional RoleTemplate. Defaults to the bundled CRT template.

    Returns:
        Theme
    """
    if template is None:
        template = load_role_template()

    ramp = build_ramp(opacities)
    named_colors = derive_named_colors(fg, bg, ramp)
    LOGGER.debug("Opacity ramp for %s: %s", name, " ".join(ramp))

    theme = expand(name, kind, template, named_colors, fg, bg)
    LOGGER.info("Built theme %s (%s, %d colors)", name, kind, len(theme.colors))
    return theme


def generate_vscode_theme(name, kind, fg, bg, opacities=None, template=None):
    """Generate a VS Code theme as a JSON string."""
    theme = build_theme(name, kind, fg, bg, opacities=opacities, template=template)
    return json.dumps(theme.as_dict(), indent=2)
