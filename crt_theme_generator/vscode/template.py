import json
import logging
import re
from collections import namedtuple
from pathlib import Path

from ..color import normalize_hex
from ..errors import MalformedColor, ThemeConfigError, UnknownColorRole

LOGGER = logging.getLogger(__name__)

BUNDLED_TEMPLATE = Path(__file__).with_name("roles.json")

DEFAULT_SENTINEL = "default"

# Token style settings that carry a role reference; everything else is copied.
COLOR_SETTINGS = ("foreground", "background")

RoleTemplate = namedtuple("RoleTemplate", ["colors", "token_colors"])

_NAMED_ROLE = re.compile(r"[ts]\d+")


def load_role_template(path=None):
    """Load a UI slot role template from JSON.

    The document holds a ``colors`` object (UI slot -> role reference) and a
    ``tokenColors`` list of ``{"scope": [...], "settings": {...}}`` rules.
    Keys starting with ``_`` are metadata and skipped.

    Args:
        path: Template JSON path. Defaults to the bundled CRT template.

    Returns:
        RoleTemplate
    """
    path = Path(path) if path is not None else BUNDLED_TEMPLATE
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise ThemeConfigError(f"cannot read role template {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ThemeConfigError(f"invalid JSON in role template {path}: {e}") from e

    if not isinstance(data, dict):
        raise ThemeConfigError(f"role template {path} must be a JSON object")

    colors = data.get("colors", {})
    token_colors = data.get("tokenColors", [])
    if not isinstance(colors, dict):
        raise ThemeConfigError(f"'colors' in {path} must be an object")
    if not isinstance(token_colors, list):
        raise ThemeConfigError(f"'tokenColors' in {path} must be a list of objects")
    for index, rule in enumerate(token_colors):
        _check_token_rule(rule, index, path)

    colors = {k: v for k, v in colors.items() if not k.startswith("_")}
    LOGGER.debug(
        "Loaded role template %s (%d slots, %d token rules)",
        path,
        len(colors),
        len(token_colors),
    )
    return RoleTemplate(colors=colors, token_colors=token_colors)


def _check_token_rule(rule, index, path):
    where = f"tokenColors[{index}] in {path}"
    if not isinstance(rule, dict):
        raise ThemeConfigError(f"{where} must be an object")

    scope = rule.get("scope", [])
    if isinstance(scope, str):
        scope = [scope]
    if not isinstance(scope, list) or not all(isinstance(s, str) for s in scope):
        raise ThemeConfigError(f"{where}: 'scope' must be a string or a list of strings")

    if not isinstance(rule.get("settings", {}), dict):
        raise ThemeConfigError(f"{where}: 'settings' must be an object")


def color_bindings(named_colors, fg, bg):
    """All symbolic names a role reference may use, bound to literal colors."""
    fg = normalize_hex(fg)
    bg = normalize_hex(bg)
    bindings = dict(named_colors)
    bindings.update({"fg": fg, "foreground": fg, "bg": bg, "background": bg})
    return bindings


def resolve_role(key, role, bindings):
    """Resolve one role reference to a literal color or the default sentinel.

    Args:
        key: The UI slot or token scope being resolved (for error messages)
        role: "fg"/"bg", "t<i>"/"s<i>", a literal "#hex" color or "default"
        bindings: See color_bindings()

    Raises:
        UnknownColorRole: If the role names nothing in bindings
        MalformedColor: If a literal color is not a valid hex color
    """
    if role == DEFAULT_SENTINEL:
        return DEFAULT_SENTINEL
    if isinstance(role, str) and role.startswith("#"):
        try:
            return normalize_hex(role)
        except MalformedColor as e:
            raise MalformedColor(role, f"{e.reason} for key {key!r}") from e
    if isinstance(role, str) and role in bindings:
        return bindings[role]
    if isinstance(role, str) and _NAMED_ROLE.fullmatch(role):
        LOGGER.debug("Role %s for %s is outside the opacity ramp", role, key)
    raise UnknownColorRole(key, role)


def expand_colors(colors, bindings):
    return {key: resolve_role(key, role, bindings) for key, role in colors.items()}


def expand_token_colors(token_colors, bindings):
    """Resolve the color settings of each token style rule."""
    rules = []
    for rule in token_colors:
        scope = rule.get("scope", [])
        if isinstance(scope, str):
            scope = [scope]
        label = ",".join(scope)

        settings = {}
        for name, value in rule.get("settings", {}).items():
            if name in COLOR_SETTINGS:
                settings[name] = resolve_role(f"{label}.{name}", value, bindings)
            else:
                settings[name] = value
        rules.append({"scope": list(scope), "settings": settings})
    return rules
