"""
Raster export: palette → RGB frame (numpy) → PNG (Pillow).
"""
from pathlib import Path

import numpy as np
from PIL import Image

from ..color.convert import hex_to_rgb
from ..color.schema import Color


def render_swatches(colors: list[Color], width: int = 500, height: int = 100) -> np.ndarray:
    """(height, width, 3) uint8 frame with one vertical band per color, left to right."""
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    if not colors:
        return frame
    edges = np.linspace(0, width, len(colors) + 1).round().astype(int)
    for i, c in enumerate(colors):
        frame[:, edges[i]:edges[i + 1]] = hex_to_rgb(c.hex)
    return frame


def save_png(colors: list[Color], path: Path, width: int = 500, height: int = 100) -> Path:
    """Write the swatch strip as PNG. Creates parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(render_swatches(colors, width, height)).save(path, format="PNG")
    return path
