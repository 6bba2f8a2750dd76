# Color model: conversions, schema, distance

from .convert import hex_to_rgb, hex_to_hsb, rgb_to_hsb, hsb_to_rgb, rgb_to_hex, hsb_to_hex
from .schema import (
    Color,
    ColorRange,
    EmotionMapping,
    ExtendedAssociation,
    HarmonyType,
    HARMONY_TYPES,
    palette_record,
)
from .distance import color_distance, distance_matrix, min_contrast

__all__ = [
    "hex_to_rgb",
    "hex_to_hsb",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "rgb_to_hex",
    "hsb_to_hex",
    "Color",
    "ColorRange",
    "EmotionMapping",
    "ExtendedAssociation",
    "HarmonyType",
    "HARMONY_TYPES",
    "palette_record",
    "color_distance",
    "distance_matrix",
    "min_contrast",
]
