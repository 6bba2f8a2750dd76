# Harmony: related color sets from a mapping

from .engine import generate_smart_color, generate_color_harmony, generate_harmonious_palette, smart_color_for
from .selection import determine_harmony_type, HARMONY_KEYWORDS

__all__ = [
    "generate_smart_color",
    "generate_color_harmony",
    "generate_harmonious_palette",
    "smart_color_for",
    "determine_harmony_type",
    "HARMONY_KEYWORDS",
]
