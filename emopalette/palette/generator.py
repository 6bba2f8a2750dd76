"""
Top-level palette generation: text (+ current palette and locks) → 5 colors.
Locks and selection belong to the caller; each call takes them as a snapshot and returns a new list.
"""
import logging
from collections.abc import Iterable, Sequence

from ..color.schema import Color, EmotionMapping
from ..harmony.engine import generate_color_harmony, smart_color_for
from ..harmony.selection import determine_harmony_type
from ..mapping.resolver import find_emotion_mapping
from ..random_utils import RandomSource, resolve_rng

logger = logging.getLogger(__name__)

PALETTE_SIZE = 5


def find_best_base_color(palette: Sequence[Color], locked_indices: Iterable[int]) -> Color | None:
    """Most saturated locked color (first one wins ties), or None when nothing is locked."""
    best: Color | None = None
    for idx in sorted(set(locked_indices)):
        if 0 <= idx < len(palette) and (best is None or palette[idx].s > best.s):
            best = palette[idx]
    return best


def find_adjacent_colors(palette: Sequence[Color], index: int, locked_indices: Iterable[int]) -> list[Color]:
    """Locked neighbours of index (left, then right)."""
    locked = set(locked_indices)
    return [
        palette[i]
        for i in (index - 1, index + 1)
        if 0 <= i < len(palette) and i in locked
    ]


def generate_harmonizing_color(
    adjacent_colors: Sequence[Color],
    mapping: EmotionMapping,
    index: int,
    total: int,
    *,
    rng: RandomSource | None = None,
) -> Color:
    """
    A color for one open slot that sits well next to its locked neighbours.

    Hue starts from the neighbours' average and moves to its complement or to an
    analogous offset of 15-30°. With a single neighbour, saturation and brightness
    are pushed 20 away from it for contrast. Results stay inside the mapping: a hue
    outside the mapping's range is replaced by a random hue from that range.
    """
    rng = resolve_rng(rng)
    if not adjacent_colors:
        return smart_color_for(mapping, index, total, rng=rng)

    n = len(adjacent_colors)
    avg_h = sum(c.h for c in adjacent_colors) / n
    avg_s = sum(c.s for c in adjacent_colors) / n
    avg_b = sum(c.b for c in adjacent_colors) / n

    use_complement = rng.random() > 0.7
    if use_complement:
        target_h = (avg_h + 180) % 360
    else:
        direction = 1 if rng.random() > 0.5 else -1
        hue_step = 15 + rng.random() * 15
        target_h = (avg_h + direction * hue_step + 360) % 360

    target_s = avg_s
    target_b = avg_b
    if n == 1:
        only = adjacent_colors[0]
        if only.s > 50:
            target_s = max(mapping.saturation.min, only.s - 20)
        else:
            target_s = min(mapping.saturation.max, only.s + 20)
        if only.b > 50:
            target_b = max(mapping.brightness.min, only.b - 20)
        else:
            target_b = min(mapping.brightness.max, only.b + 20)

    if not mapping.hue.contains(target_h):
        target_h = (mapping.hue.min + rng.random() * mapping.hue.span) % 360
    target_s = mapping.saturation.clamp(target_s)
    target_b = mapping.brightness.clamp(target_b)
    return Color(target_h, target_s, target_b)


def generate_palette_from_emotion(
    text: str,
    current_colors: Sequence[Color] = (),
    locked_indices: Iterable[int] = frozenset(),
    *,
    rng: RandomSource | None = None,
) -> list[Color]:
    """
    Five colors for text. With no current palette, a fresh harmony. Otherwise only
    unlocked slots change: several open slots are regenerated as a harmony around the
    most saturated locked color; a single open slot is matched to its locked neighbours.
    """
    rng = resolve_rng(rng)
    mapping = find_emotion_mapping(text, rng=rng)
    harmony_type = determine_harmony_type(text, mapping)

    if current_colors and len(current_colors) != PALETTE_SIZE:
        logger.warning("Expected %d current colors, got %d; generating fresh", PALETTE_SIZE, len(current_colors))
        current_colors = ()
    if not current_colors:
        logger.debug("Fresh %s palette for %r (%s)", harmony_type, text, mapping.emotion)
        return generate_color_harmony(harmony_type, mapping, PALETTE_SIZE, rng=rng)

    locked = frozenset(i for i in locked_indices if 0 <= i < PALETTE_SIZE)
    palette = list(current_colors)
    unlocked = [i for i in range(PALETTE_SIZE) if i not in locked]

    if len(unlocked) > 1:
        base = find_best_base_color(palette, locked)
        logger.debug("Regenerating %d slots as %s around %s", len(unlocked), harmony_type, base and base.hex)
        new_colors = generate_color_harmony(harmony_type, mapping, len(unlocked), base, rng=rng)
        for idx, color in zip(unlocked, new_colors):
            palette[idx] = color
    elif unlocked:
        idx = unlocked[0]
        adjacent = find_adjacent_colors(palette, idx, locked)
        if adjacent:
            logger.debug("Harmonizing slot %d with %d locked neighbour(s)", idx, len(adjacent))
            palette[idx] = generate_harmonizing_color(adjacent, mapping, idx, PALETTE_SIZE, rng=rng)
        else:
            palette[idx] = smart_color_for(mapping, idx, PALETTE_SIZE, rng=rng)
    return palette
