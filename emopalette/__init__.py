# emopalette: words and emotions → harmonized 5-color palettes

from .color import Color, ColorRange, EmotionMapping, palette_record
from .mapping import find_emotion_mapping
from .harmony import generate_color_harmony, generate_harmonious_palette, determine_harmony_type
from .palette import PALETTE_SIZE, generate_palette_from_emotion

__all__ = [
    "Color",
    "ColorRange",
    "EmotionMapping",
    "palette_record",
    "find_emotion_mapping",
    "generate_color_harmony",
    "generate_harmonious_palette",
    "determine_harmony_type",
    "PALETTE_SIZE",
    "generate_palette_from_emotion",
]
