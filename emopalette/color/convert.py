"""
Color-space conversions: hex <-> RGB <-> HSB.
Pure math. RGB channels are 0-255 ints; hue is degrees [0, 360); saturation and brightness are 0-100.
"""
import logging
import math
import re

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp_channel(v: float) -> int:
    return max(0, min(255, _round_half_up(v)))


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """
    Parse '#RRGGBB' (leading '#' optional, any case) into (r, g, b).
    Anything else yields (0, 0, 0) rather than an error.
    """
    m = _HEX_PATTERN.fullmatch(hex_str or "")
    if not m:
        logger.debug("Unrecognized color format %r, using black", hex_str)
        return (0, 0, 0)
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hsb(r: float, g: float, b: float, *, round_hue: bool = True) -> tuple[float, float, float]:
    """
    RGB (0-255) to HSB. Hue is rounded to the nearest whole degree unless round_hue=False;
    saturation and brightness are unrounded percentages. Unrounded output converts back
    to the same RGB exactly.
    """
    r /= 255.0
    g /= 255.0
    b /= 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    h = 0
    s = 0.0
    if delta != 0:
        s = delta / mx
        if mx == r:
            h6 = ((g - b) / delta) % 6
        elif mx == g:
            h6 = (b - r) / delta + 2
        else:
            h6 = (r - g) / delta + 4
        h = (_round_half_up(h6 * 60) if round_hue else h6 * 60) % 360
    return (h, s * 100, mx * 100)


def hsb_to_rgb(h: float, s: float, b: float) -> tuple[int, int, int]:
    """HSB to RGB (0-255 ints) via the chroma k-function form."""
    h = h % 360
    s = max(0.0, min(100.0, s)) / 100.0
    b = max(0.0, min(100.0, b)) / 100.0

    def f(n: int) -> float:
        k = (n + h / 60) % 6
        return b * (1 - s * max(0.0, min(k, 4 - k, 1.0)))

    return (_clamp_channel(255 * f(5)), _clamp_channel(255 * f(3)), _clamp_channel(255 * f(1)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Pack (r, g, b) into '#RRGGBB' (uppercase)."""
    r, g, b = _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)
    return "#" + format((1 << 24) | (r << 16) | (g << 8) | b, "x")[1:].upper()


def hsb_to_hex(h: float, s: float, b: float) -> str:
    return rgb_to_hex(*hsb_to_rgb(h, s, b))


def hex_to_hsb(hex_str: str, *, round_hue: bool = True) -> tuple[float, float, float]:
    return rgb_to_hsb(*hex_to_rgb(hex_str), round_hue=round_hue)
