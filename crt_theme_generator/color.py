import math
import re
from collections import namedtuple

from .errors import MalformedColor

Color = namedtuple("Color", ["r", "g", "b", "a"])

_HEX_DIGITS = re.compile(r"#[0-9a-fA-F]+")


def round_half_up(value):
    """Round .5 away from zero for positive values (``round`` rounds to even)."""
    return int(math.floor(value + 0.5))


def _clamp_byte(value):
    return max(0, min(255, round_half_up(value)))


def parse_hex(hex_color):
    """Parse a ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` string.

    Short forms duplicate each nibble. Alpha is normalized to 0.0-1.0 and
    defaults to 1 when the string carries none.

    Args:
        hex_color: The hex string, case-insensitive

    Returns:
        Color: The parsed color

    Raises:
        MalformedColor: For any other length or non-hex characters
    """
    if not isinstance(hex_color, str) or not _HEX_DIGITS.fullmatch(hex_color):
        raise MalformedColor(hex_color)

    digits = hex_color[1:]
    if len(digits) in (3, 4):
        channels = [int(c + c, 16) for c in digits]
    elif len(digits) in (6, 8):
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        raise MalformedColor(hex_color, "unsupported hex color length")

    alpha = channels[3] / 0xFF if len(channels) == 4 else 1
    return Color(channels[0], channels[1], channels[2], alpha)


def format_hex(color):
    """Serialize a Color as ``#rrggbbaa``, clamping every channel into range."""
    r, g, b, a = color
    alpha = max(0.0, min(1.0, a))
    return "#" + "".join(
        f"{channel:02x}"
        for channel in (
            _clamp_byte(r),
            _clamp_byte(g),
            _clamp_byte(b),
            round_half_up(alpha * 0xFF),
        )
    )


def rgb_hex(color):
    """The opaque ``#rrggbb`` part of a color (or hex string)."""
    if isinstance(color, str):
        color = parse_hex(color)
    return format_hex(color)[:7]


def normalize_hex(hex_color):
    return format_hex(parse_hex(hex_color))


def composite(fg, bg):
    """Flatten a translucent foreground over a solid background.

    Color = Color * alpha + Background * (1 - alpha). The background's own
    alpha is ignored and the result is always fully opaque, so hosts that
    cannot render translucency still show the same visual color.

    Args:
        fg: Foreground Color with alpha
        bg: Background Color (treated as solid)

    Returns:
        Color: Opaque equivalent of fg over bg
    """
    alpha = fg.a
    channels = [
        round_half_up(fg[i] * alpha + bg[i] * (1 - alpha)) for i in range(3)
    ]
    return Color(channels[0], channels[1], channels[2], 1)


def composite_hex(fg_hex, bg_hex):
    """Opaque hex equivalent of ``fg_hex`` (with alpha) over solid ``bg_hex``."""
    return format_hex(composite(parse_hex(fg_hex), parse_hex(bg_hex)))
