"""
Harmony engine: a resolved mapping + a harmony type → N related colors.
Supports monochromatic, analogous, complementary and triadic relationships;
any other type falls back to 15° analogous stepping.
"""
import math

from ..color.schema import Color, ColorRange, EmotionMapping, HarmonyType
from ..random_utils import RandomSource, jitter, resolve_rng

# Saturation skew toward the high end: s = min + random**(1 - bias) * span
_SATURATION_BIAS = 0.6


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))


def generate_smart_color(
    hue_min: float,
    hue_max: float,
    sat_min: float,
    sat_max: float,
    bri_min: float,
    bri_max: float,
    index: int = 0,
    total: int = 5,
    *,
    rng: RandomSource | None = None,
) -> Color:
    """
    Weighted color inside the given ranges, positioned for slot `index` of `total`.

    Hue is spread evenly across slots instead of drawn uniformly. Saturation leans
    toward the high end, or steps linearly when the hue window is narrow. With more
    than three slots brightness forms a hierarchy: slot 0 brightest, last slot darkest.
    """
    rng = resolve_rng(rng)
    hue_span = hue_max - hue_min
    if hue_span < 0:
        hue_span += 360

    if total > 1:
        step = hue_span / total
        h = (hue_min + index * step + rng.random() * step * 0.8) % 360
    else:
        h = math.floor(hue_min + rng.random() * hue_span) % 360

    sat_span = sat_max - sat_min
    if sat_span > 30 and hue_span < 30 and total > 2:
        s = sat_min + (index / (total - 1)) * sat_span + jitter(rng, 5)
    elif sat_span > 30:
        s = sat_min + rng.random() ** (1 - _SATURATION_BIAS) * sat_span
    else:
        s = sat_min + rng.random() * sat_span

    bri_span = bri_max - bri_min
    if total > 3:
        if index == 0:
            b = max(bri_min + bri_span * 0.7, bri_max - 10)
        elif index == total - 1:
            b = min(bri_min + bri_span * 0.3, bri_min + 15)
        else:
            step = bri_span / (total - 1)
            b = bri_max - step * index + jitter(rng, 5)
    else:
        b = bri_min + rng.random() * bri_span

    h = max(0, min(359, _round(h)))
    s = max(0, min(100, _round(s)))
    b = max(0, min(100, _round(b)))
    return Color(h, s, b)


def smart_color_for(mapping: EmotionMapping, index: int, total: int, *, rng: RandomSource | None = None) -> Color:
    """generate_smart_color over a mapping's own ranges."""
    return generate_smart_color(
        mapping.hue.min, mapping.hue.max,
        mapping.saturation.min, mapping.saturation.max,
        mapping.brightness.min, mapping.brightness.max,
        index, total,
        rng=rng,
    )


def _smart_near_hue(
    hue: float,
    mapping: EmotionMapping,
    index: int,
    total: int,
    rng: RandomSource,
) -> Color:
    # ±10° band around a target hue, mapping's saturation/brightness
    return generate_smart_color(
        hue - 10, hue + 10,
        mapping.saturation.min, mapping.saturation.max,
        mapping.brightness.min, mapping.brightness.max,
        index, total,
        rng=rng,
    )


def _monochromatic(base: Color, mapping: EmotionMapping, n: int, rng: RandomSource) -> list[Color]:
    out = []
    for i in range(1, n):
        sat_ratio = i / n
        bri_ratio = 1 - i / (n * 1.5)
        s = mapping.saturation.clamp(base.s * (1 - sat_ratio * 0.5))
        b = mapping.brightness.clamp(base.b * (0.7 + bri_ratio * 0.5))
        out.append(Color(base.h, s, b))
    return out


def _analogous(base: Color, mapping: EmotionMapping, n: int, rng: RandomSource) -> list[Color]:
    hue_step = 12
    out = []
    for i in range(1, n):
        direction = 1 if i % 2 == 0 else -1
        steps = math.ceil(i / 2)
        h = (base.h + direction * steps * hue_step + 360) % 360
        s = mapping.saturation.clamp(base.s + jitter(rng, 10))
        b = mapping.brightness.clamp(base.b + jitter(rng, 10))
        out.append(Color(h, s, b))
    return out


def _complementary(base: Color, mapping: EmotionMapping, n: int, rng: RandomSource) -> list[Color]:
    complement = (base.h + 180) % 360
    out: list[Color] = []
    if n < 2:
        return out
    if n <= 3:
        out.append(_smart_near_hue(complement, mapping, 1, n, rng))
        if n == 3:
            # Muted midpoint between base and complement
            out.append(Color((base.h + complement) / 2, min(base.s, 40), max(base.b, 80)))
        return out

    # Split complementary: ±15° either side of the true complement
    split1 = (complement - 15 + 360) % 360
    split2 = (complement + 15) % 360
    out.append(_smart_near_hue(split1, mapping, 1, n, rng))
    out.append(_smart_near_hue(split2, mapping, 2, n, rng))
    for i in range(3, n):
        if i % 2 == 0:
            out.append(Color((base.h + i * 15) % 360, base.s * 0.8, base.b * 0.9))
        else:
            out.append(Color((base.h + 30) % 360, base.s * 0.4, min(95, base.b * 1.1)))
    return out


def _triadic(base: Color, mapping: EmotionMapping, n: int, rng: RandomSource) -> list[Color]:
    palette = [base]
    if n >= 2:
        palette.append(_smart_near_hue((base.h + 120) % 360, mapping, 1, n, rng))
    if n >= 3:
        palette.append(_smart_near_hue((base.h + 240) % 360, mapping, 2, n, rng))
    for i in range(3, n):
        sub = palette[i % 3]
        palette.append(Color((sub.h + 15) % 360, sub.s * 0.7, min(95, sub.b * 1.1)))
    return palette[1:]


def _stepped(base: Color, mapping: EmotionMapping, n: int, rng: RandomSource) -> list[Color]:
    out = []
    for i in range(1, n):
        h = (base.h + i * 15) % 360
        s = mapping.saturation.clamp(base.s * (1 - i * 0.1))
        b = mapping.brightness.clamp(base.b * (1 + i * 0.05))
        out.append(Color(h, s, b))
    return out


_STRATEGIES = {
    "monochromatic": _monochromatic,
    "analogous": _analogous,
    "complementary": _complementary,
    "triadic": _triadic,
}


def generate_color_harmony(
    harmony_type: HarmonyType | str,
    mapping: EmotionMapping,
    num_colors: int = 5,
    base_color: Color | None = None,
    *,
    rng: RandomSource | None = None,
) -> list[Color]:
    """
    num_colors colors starting with base_color (or a weighted color from the mapping)
    and followed by colors related to it by harmony_type.
    """
    if num_colors < 1:
        return []
    rng = resolve_rng(rng)
    if base_color is None:
        base_color = smart_color_for(mapping, 0, num_colors, rng=rng)
    strategy = _STRATEGIES.get(harmony_type, _stepped)
    return [base_color, *strategy(base_color, mapping, num_colors, rng)]


def generate_harmonious_palette(
    base_color: Color,
    num_colors: int = 5,
    *,
    rng: RandomSource | None = None,
) -> list[Color]:
    """Palette around one chosen color: complementary when it is vivid (s > 70), else analogous."""
    mapping = EmotionMapping(
        emotion="custom",
        synonyms=("custom",),
        hue=ColorRange((base_color.h - 30 + 360) % 360, (base_color.h + 30) % 360),
        saturation=ColorRange(max(20, base_color.s - 20), min(100, base_color.s + 20)),
        brightness=ColorRange(max(30, base_color.b - 20), min(100, base_color.b + 20)),
    )
    harmony: HarmonyType = "complementary" if base_color.s > 70 else "analogous"
    return generate_color_harmony(harmony, mapping, num_colors, base_color, rng=rng)
