import sys

from ..color import parse_hex
from ..opacity import RAMP_SIZE

ANSI_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

RESET = "\033[m"


def _ansi_attr(base, index):
    # Indices 8-15 are the bright variants: same color with the bold attribute
    return f"\033[{base}{index % 8}{';1' if index >= 8 else ''}m"


def terminal_swatch_lines():
    """Lines showing the 16 ANSI foregrounds on default and on each ANSI background."""
    labels = [f"{name:<8}" for name in ANSI_NAMES]

    row = "".join(_ansi_attr(3, fg) + labels[fg % 8] + RESET for fg in range(16))
    lines = [f"default : {row}"]

    for bg in range(16):
        row = _ansi_attr(4, bg)
        row += "".join(_ansi_attr(3, fg) + labels[fg % 8] for fg in range(16))
        lines.append(f"{labels[bg % 8]}: {row}{RESET}")
    return lines


def print_terminal_swatch(file=None):
    """Print the ANSI test grid so a theme's terminal colors can be eyeballed."""
    file = file or sys.stdout
    for line in terminal_swatch_lines():
        print(line, file=file)


def _block(hex_color, width=6):
    r, g, b, _ = parse_hex(hex_color)
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{RESET}"


def print_named_colors(named_colors, fg, bg, file=None):
    """Print each tint/shade pair with a 24-bit color block."""
    file = file or sys.stdout

    print("\n" + "=" * 60, file=file)
    print(f"OPACITY RAMP (fg {fg}, bg {bg})", file=file)
    print("=" * 60, file=file)
    for i in range(RAMP_SIZE):
        tint = named_colors[f"t{i}"]
        shade = named_colors[f"s{i}"]
        print(
            f"  t{i:<3} {tint}  s{i:<3} {shade}  {_block(shade)}",
            file=file,
        )
