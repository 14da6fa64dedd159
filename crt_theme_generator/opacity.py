import re

from .color import composite_hex, rgb_hex, round_half_up
from .errors import MalformedColor

RAMP_SIZE = 16

_BYTE = re.compile(r"[0-9a-fA-F]{2}")


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{round_half_up(clamped * 0xFF):02x}"


def default_ramp():
    """Linear opacity levels from fully opaque (ff) down to transparent (00)."""
    return [
        f"{round_half_up(0xFF - (i * 0xFF) / (RAMP_SIZE - 1)):02x}"
        for i in range(RAMP_SIZE)
    ]


def _override_to_hex(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not 0 <= value <= 1:
            raise MalformedColor(value, "numeric opacity override must be within 0.0-1.0")
        return opacity_to_hex(value)
    if not isinstance(value, str) or not _BYTE.fullmatch(value):
        raise MalformedColor(value, "opacity override must be a hex byte")
    return value.lower()


def build_ramp(overrides=None):
    """Build the 16 opacity levels used for tints and shades.

    Args:
        overrides: Optional sequence of hex byte strings ("00"-"ff") or
            0.0-1.0 numbers. ``overrides[i]`` replaces level ``i``; a None
            entry keeps the default and entries past the last level are
            ignored.

    Returns:
        list: 16 two-digit lowercase hex strings
    """
    ramp = default_ramp()
    if overrides:
        for i, value in enumerate(overrides[:RAMP_SIZE]):
            if value is not None:
                ramp[i] = _override_to_hex(value)
    return ramp


def derive_named_colors(fg, bg, ramp):
    """Derive tints ``t0..t15`` and shades ``s0..s15`` from a palette.

    A tint is the foreground with the ramp level as alpha. Its shade is the
    opaque color it produces over the background.

    Args:
        fg: Foreground hex color (any accepted form)
        bg: Background hex color
        ramp: 16 hex byte strings, see build_ramp()

    Returns:
        dict: name -> ``#rrggbbaa``
    """
    if len(ramp) != RAMP_SIZE:
        raise ValueError(f"opacity ramp must have {RAMP_SIZE} levels, got {len(ramp)}")

    base = rgb_hex(fg)
    named = {}
    for i, level in enumerate(ramp):
        tint = base + level
        named[f"t{i}"] = tint
        named[f"s{i}"] = composite_hex(tint, bg)
    return named
