"""
Unit tests for palette generation with locks (fresh palettes, group regeneration, single-slot harmonizing).
"""
import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.helpers import FixedRandom
from emopalette.color import Color, ColorRange, EmotionMapping
from emopalette.mapping import find_emotion_mapping
from emopalette.palette import (
    PALETTE_SIZE,
    find_adjacent_colors,
    find_best_base_color,
    generate_harmonizing_color,
    generate_palette_from_emotion,
)

TEXTS = ["", "calm", "ocean breeze", "xyzzyplugh", "red blue green", "vibrant sunset", "a", "deep red"]

OCEAN = EmotionMapping("ocean", ("ocean",), ColorRange(180, 220), ColorRange(60, 90), ColorRange(60, 85))


def _palette() -> list[Color]:
    return [Color(10, 90, 90), Color(80, 40, 70), Color(150, 60, 50), Color(220, 95, 60), Color(300, 20, 95)]


class TestHelpers(unittest.TestCase):
    def test_best_base_is_most_saturated_locked(self):
        p = _palette()
        self.assertIs(find_best_base_color(p, {1, 3}), p[3])
        self.assertIs(find_best_base_color(p, {1, 2}), p[2])
        self.assertIsNone(find_best_base_color(p, set()))

    def test_best_base_tie_keeps_lowest_index(self):
        p = [Color(0, 50, 50), Color(90, 50, 50), Color(180, 50, 50), Color(0, 0, 0), Color(0, 0, 0)]
        self.assertIs(find_best_base_color(p, {2, 0, 1}), p[0])

    def test_adjacent_colors(self):
        p = _palette()
        self.assertEqual(find_adjacent_colors(p, 0, {1}), [p[1]])
        self.assertEqual(find_adjacent_colors(p, 2, {1, 3}), [p[1], p[3]])
        self.assertEqual(find_adjacent_colors(p, 2, {0, 4}), [])
        self.assertEqual(find_adjacent_colors(p, 4, {3, 5}), [p[3]])


class TestHarmonizingColor(unittest.TestCase):
    def test_complement_outside_range_is_redrawn_inside(self):
        # 0.9 → complement (20°, outside 180-220), 0.5 → redraw at 200°
        c = generate_harmonizing_color([Color(200, 80, 80)], OCEAN, 1, 5, rng=FixedRandom([0.9, 0.5]))
        self.assertEqual(c.h, 200)
        self.assertEqual(c.s, 60)
        self.assertEqual(c.b, 60)

    def test_analogous_offset(self):
        # 0.1 → analogous, 0.9 → clockwise, 0.0 → 15° step
        c = generate_harmonizing_color([Color(200, 30, 30)], OCEAN, 1, 5, rng=FixedRandom([0.1, 0.9, 0.0]))
        self.assertEqual(c.h, 215)
        self.assertEqual(c.s, 60)
        self.assertEqual(c.b, 60)

    def test_two_neighbours_average(self):
        left, right = Color(190, 70, 70), Color(210, 80, 80)
        c = generate_harmonizing_color([left, right], OCEAN, 2, 5, rng=FixedRandom([0.1, 0.1, 0.0]))
        self.assertEqual(c.h, 185)
        self.assertEqual(c.s, 75)
        self.assertEqual(c.b, 75)

    def test_no_neighbours_uses_mapping(self):
        c = generate_harmonizing_color([], OCEAN, 2, 5, rng=random.Random(9))
        self.assertTrue(OCEAN.hue.contains(c.h))

    def test_stays_in_mapping(self):
        rng = random.Random(11)
        for _ in range(200):
            neighbours = [Color(rng.random() * 360, rng.random() * 100, rng.random() * 100) for _ in range(rng.randint(1, 2))]
            c = generate_harmonizing_color(neighbours, OCEAN, 2, 5, rng=rng)
            self.assertTrue(OCEAN.hue.contains(c.h), c)
            self.assertTrue(60 <= c.s <= 90, c)
            self.assertTrue(60 <= c.b <= 85, c)


class TestGeneratePalette(unittest.TestCase):
    def test_fresh_palette_shape(self):
        rng = random.Random(0)
        for text in TEXTS:
            colors = generate_palette_from_emotion(text, rng=rng)
            self.assertEqual(len(colors), PALETTE_SIZE, text)
            self.assertTrue(all(isinstance(c, Color) for c in colors))

    def test_locked_slots_unchanged(self):
        rng = random.Random(1)
        for text in TEXTS:
            current = _palette()
            result = generate_palette_from_emotion(text, current, {1, 3}, rng=rng)
            self.assertEqual(len(result), PALETTE_SIZE)
            self.assertIs(result[1], current[1])
            self.assertIs(result[3], current[3])
            self.assertEqual(current, _palette())

    def test_shape_for_every_lock_combination(self):
        rng = random.Random(2)
        current = _palette()
        for mask in range(1 << PALETTE_SIZE):
            locked = {i for i in range(PALETTE_SIZE) if mask & (1 << i)}
            result = generate_palette_from_emotion("sunset", current, locked, rng=rng)
            self.assertEqual(len(result), PALETTE_SIZE)
            for i in locked:
                self.assertIs(result[i], current[i])

    def test_all_locked_returns_same_colors(self):
        current = _palette()
        result = generate_palette_from_emotion("ocean", current, set(range(5)))
        self.assertEqual(result, current)
        self.assertIsNot(result, current)

    def test_single_open_slot_harmonizes_within_mapping(self):
        rng = random.Random(3)
        mapping = find_emotion_mapping("ocean")
        current = _palette()
        for _ in range(50):
            result = generate_palette_from_emotion("ocean", current, {0, 1, 3, 4}, rng=rng)
            c = result[2]
            self.assertTrue(mapping.hue.contains(c.h), c)
            self.assertTrue(mapping.saturation.min <= c.s <= mapping.saturation.max)
            self.assertTrue(mapping.brightness.min <= c.b <= mapping.brightness.max)

    def test_open_slots_regenerated_from_locked_base(self):
        current = _palette()
        result = generate_palette_from_emotion("calm", current, {3}, rng=random.Random(4))
        # Monochromatic around the most saturated locked color: base lands in first open slot
        self.assertIs(result[0], current[3])
        self.assertEqual({c.h for c in result}, {220})

    def test_out_of_range_locks_ignored(self):
        result = generate_palette_from_emotion("ocean", _palette(), {1, 7, -1}, rng=random.Random(5))
        self.assertEqual(len(result), PALETTE_SIZE)

    def test_wrong_length_current_palette_starts_fresh(self):
        result = generate_palette_from_emotion("ocean", _palette()[:3], {0}, rng=random.Random(6))
        self.assertEqual(len(result), PALETTE_SIZE)


if __name__ == "__main__":
    unittest.main()
