# Palette: text + locks → five harmonized colors

from .generator import (
    PALETTE_SIZE,
    generate_palette_from_emotion,
    generate_harmonizing_color,
    find_best_base_color,
    find_adjacent_colors,
)

__all__ = [
    "PALETTE_SIZE",
    "generate_palette_from_emotion",
    "generate_harmonizing_color",
    "find_best_base_color",
    "find_adjacent_colors",
]
