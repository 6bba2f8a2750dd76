# Export: text formats and PNG swatches

from .formats import EXPORT_FORMATS, export_palette, to_css, to_scss, to_json, to_hex_list, to_svg
from .image import render_swatches, save_png

__all__ = [
    "EXPORT_FORMATS",
    "export_palette",
    "to_css",
    "to_scss",
    "to_json",
    "to_hex_list",
    "to_svg",
    "render_swatches",
    "save_png",
]
