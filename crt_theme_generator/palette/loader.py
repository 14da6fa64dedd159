import json
import logging
from collections import namedtuple

from ..color import parse_hex
from ..errors import ThemeConfigError

LOGGER = logging.getLogger(__name__)

Palette = namedtuple("Palette", ["name", "kind", "fg", "bg", "opacities"])

DEFAULT_PREFIX = "CRT "


def _themes_section(data, json_path):
    if isinstance(data.get("themes"), dict):
        return data["themes"]
    config = data.get("config")
    if isinstance(config, dict) and isinstance(config.get("themes"), dict):
        return config["themes"]
    raise ThemeConfigError(
        f"{json_path}: expected a 'themes' or 'config.themes' object"
    )


def load_palettes(json_path):
    """Load theme palettes from a JSON configuration file.

    Themes live under ``themes`` or, as in an extension's package.json,
    under ``config.themes``. Each entry maps a theme name to
    ``{"type", "fg", "bg", "opacities"}``.

    Args:
        json_path: Path to the configuration file

    Returns:
        dict: theme name -> Palette, in file order
    """
    try:
        with open(json_path) as f:
            data = json.load(f)
    except OSError as e:
        raise ThemeConfigError(f"cannot read palette config {json_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ThemeConfigError(f"invalid JSON in {json_path}: {e}") from e

    if not isinstance(data, dict):
        raise ThemeConfigError(f"{json_path}: expected a JSON object")

    palettes = {}
    for name, entry in _themes_section(data, json_path).items():
        # Skip metadata keys
        if name.startswith("_"):
            continue
        palettes[name] = palette_from_dict(name, entry)

    LOGGER.debug("Loaded %d palettes from %s", len(palettes), json_path)
    return palettes


def palette_from_dict(name, entry):
    """Validate one configuration entry and turn it into a Palette."""
    if not isinstance(entry, dict):
        raise ThemeConfigError(f"theme {name!r}: expected an object")

    missing = [key for key in ("fg", "bg") if key not in entry]
    if missing:
        raise ThemeConfigError(f"theme {name!r}: missing {', '.join(missing)}")

    # Fail early on bad colors rather than halfway through a theme
    parse_hex(entry["fg"])
    parse_hex(entry["bg"])

    opacities = entry.get("opacities")
    if opacities is not None and not isinstance(opacities, list):
        raise ThemeConfigError(f"theme {name!r}: 'opacities' must be a list")

    return Palette(
        name=name,
        kind=entry.get("type", "dark"),
        fg=entry["fg"],
        bg=entry["bg"],
        opacities=opacities,
    )


def find_palette(palettes, name, prefix=DEFAULT_PREFIX):
    """Look up a palette by full name or by name without the prefix."""
    for candidate in (name, f"{prefix}{name}"):
        if candidate in palettes:
            return palettes[candidate]
    available = ", ".join(palettes) or "none"
    raise ThemeConfigError(f"unknown theme {name!r} (available: {available})")
