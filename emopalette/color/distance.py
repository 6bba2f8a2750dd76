"""
Weighted HSB distance between colors. A heuristic for contrast, not a perceptual model.
"""
import math

import numpy as np

from .schema import Color


def color_distance(a: Color, b: Color) -> float:
    """
    Euclidean distance in HSB with hue weighted by mean saturation
    (hue matters less for washed-out colors) and brightness weighted x2.
    """
    raw = abs(a.h - b.h)
    h_diff = min(raw, 360 - raw)
    sat_weight = (a.s + b.s) / 200
    return math.sqrt(
        (h_diff * sat_weight * 1.5) ** 2
        + ((a.s - b.s) * 0.5) ** 2
        + ((a.b - b.b) * 2) ** 2
    )


def distance_matrix(colors: list[Color]) -> np.ndarray:
    """Pairwise color_distance as an (n, n) symmetric array."""
    hsb = np.array([[c.h, c.s, c.b] for c in colors], dtype=np.float64).reshape(-1, 3)
    raw = np.abs(hsb[:, None, 0] - hsb[None, :, 0])
    h_diff = np.minimum(raw, 360 - raw)
    sat_weight = (hsb[:, None, 1] + hsb[None, :, 1]) / 200
    s_diff = hsb[:, None, 1] - hsb[None, :, 1]
    b_diff = hsb[:, None, 2] - hsb[None, :, 2]
    return np.sqrt((h_diff * sat_weight * 1.5) ** 2 + (s_diff * 0.5) ** 2 + (b_diff * 2) ** 2)


def min_contrast(colors: list[Color]) -> float:
    """Smallest distance between any two colors. 0.0 for fewer than 2 colors."""
    if len(colors) < 2:
        return 0.0
    m = distance_matrix(colors)
    mask = ~np.eye(len(colors), dtype=bool)
    return float(m[mask].min())
