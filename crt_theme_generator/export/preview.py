import logging

import numpy as np
from PIL import Image

from ..color import parse_hex
from ..opacity import RAMP_SIZE

LOGGER = logging.getLogger(__name__)

CHECKER_LIGHT = (204, 204, 204)
CHECKER_DARK = (102, 102, 102)


def _checkerboard(height, width, square):
    ys, xs = np.indices((height, width))
    mask = ((ys // square + xs // square) % 2).astype(bool)
    board = np.empty((height, width, 3), dtype=float)
    board[mask] = CHECKER_DARK
    board[~mask] = CHECKER_LIGHT
    return board


def ramp_preview_array(named_colors, bg, cell=32):
    """Build an RGB pixel array previewing the opacity ramp.

    Row 0 draws each tint over a checkerboard so its transparency shows,
    row 1 draws each tint over the background, row 2 the opaque shades.
    Rows 1 and 2 look identical when compositing is correct.

    Returns:
        numpy.ndarray: uint8 array of shape (3 * cell, 16 * cell, 3)
    """
    width = RAMP_SIZE * cell
    canvas = np.zeros((3 * cell, width, 3), dtype=float)

    background = np.array(parse_hex(bg)[:3], dtype=float)
    canvas[0:cell] = _checkerboard(cell, width, max(1, cell // 4))
    canvas[cell : 2 * cell] = background

    for i in range(RAMP_SIZE):
        x0, x1 = i * cell, (i + 1) * cell
        r, g, b, a = parse_hex(named_colors[f"t{i}"])
        tint = np.array((r, g, b), dtype=float)
        for row in (0, 1):
            y0, y1 = row * cell, (row + 1) * cell
            canvas[y0:y1, x0:x1] = tint * a + canvas[y0:y1, x0:x1] * (1 - a)

        shade = parse_hex(named_colors[f"s{i}"])
        canvas[2 * cell : 3 * cell, x0:x1] = shade[:3]

    return np.clip(np.floor(canvas + 0.5), 0, 255).astype(np.uint8)


def render_ramp_preview(named_colors, bg, output_path, cell=32):
    """Save a PNG preview of the tints and shades.

    Args:
        named_colors: Tints and shades from derive_named_colors()
        bg: Background hex color
        output_path: PNG file to write
        cell: Size of each swatch in pixels
    """
    pixels = ramp_preview_array(named_colors, bg, cell=cell)
    Image.fromarray(pixels).save(output_path)
    LOGGER.info("Wrote ramp preview %s", output_path)
    return output_path
