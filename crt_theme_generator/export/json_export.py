import json
import logging
import os

LOGGER = logging.getLogger(__name__)


def theme_filename(theme_name):
    """File name for a theme: "CRT Green" -> "crt-green.json"."""
    slug = "-".join(theme_name.lower().split())
    for sep in {"/", os.sep, os.altsep} - {None}:
        slug = slug.replace(sep, "-")
    return slug + ".json"


def export_theme(theme, output_dir):
    """Write a theme as VS Code theme JSON into output_dir.

    Args:
        theme: The Theme to write
        output_dir: Output directory, created if missing

    Returns:
        str: Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    filepath = os.path.join(output_dir, theme_filename(theme.name))

    with open(filepath, "w") as f:
        json.dump(theme.as_dict(), f, indent=2)
        f.write("\n")

    LOGGER.info("Wrote %s", filepath)
    return filepath
