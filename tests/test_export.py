"""Tests for crt_theme_generator.export — JSON files, terminal printers and PNG preview."""

import io
import json

import numpy as np
from PIL import Image

from crt_theme_generator.export import (
    export_theme,
    print_named_colors,
    print_terminal_swatch,
    ramp_preview_array,
    render_ramp_preview,
    terminal_swatch_lines,
    theme_filename,
)
from crt_theme_generator.opacity import build_ramp, derive_named_colors
from crt_theme_generator.vscode import Theme

FG = "#33ff66"
BG = "#0c1a10"


def _named():
    return derive_named_colors(FG, BG, build_ramp())


class TestJsonExport:
    def test_filename(self):
        assert theme_filename("CRT High Contrast") == "crt-high-contrast.json"
        assert theme_filename("Green") == "green.json"
        assert theme_filename("A/B") == "a-b.json"

    def test_writes_theme(self, tmp_path):
        theme = Theme(name="CRT Green", kind="dark", colors={"foreground": "#33ff66ff"})
        path = export_theme(theme, tmp_path / "out" / "themes")
        with open(path) as f:
            assert json.load(f) == theme.as_dict()
        assert path.endswith("crt-green.json")

    def test_slash_in_name_stays_in_directory(self, tmp_path):
        theme = Theme(name="A/B", kind="dark", colors={})
        path = export_theme(theme, tmp_path)
        assert (tmp_path / "a-b.json").is_file()
        assert path == str(tmp_path / "a-b.json")


class TestTerminal:
    def test_swatch_grid(self):
        lines = terminal_swatch_lines()
        assert len(lines) == 17
        assert lines[0].startswith("default : ")
        assert lines[1].startswith("black   : \033[40m")
        assert lines[9].startswith("black   : \033[40;1m")
        assert all(line.endswith("\033[m") for line in lines)

    def test_print_swatch(self, capsys):
        print_terminal_swatch()
        assert capsys.readouterr().out.count("\n") == 17

    def test_print_named_colors(self):
        buf = io.StringIO()
        print_named_colors(_named(), FG, BG, file=buf)
        out = buf.getvalue()
        assert "t7   #33ff6688" in out
        assert "s15  #0c1a10ff" in out
        assert "\033[48;2;51;255;102m" in out


class TestPreview:
    def test_array_layout(self):
        pixels = ramp_preview_array(_named(), BG, cell=8)
        assert pixels.shape == (24, 128, 3)
        assert pixels.dtype == np.uint8
        # s0 is the foreground, s15 the background
        assert tuple(pixels[16, 0]) == (51, 255, 102)
        assert tuple(pixels[23, 127]) == (12, 26, 16)

    def test_tints_over_background_match_shades(self):
        pixels = ramp_preview_array(_named(), BG, cell=8).astype(int)
        assert np.abs(pixels[8:16] - pixels[16:24]).max() <= 1

    def test_render_png(self, tmp_path):
        path = tmp_path / "ramp.png"
        render_ramp_preview(_named(), BG, path, cell=4)
        with Image.open(path) as img:
            assert img.size == (64, 12)
            assert img.mode == "RGB"
