from .loader import Palette, find_palette, load_palettes, palette_from_dict

__all__ = ["Palette", "find_palette", "load_palettes", "palette_from_dict"]
