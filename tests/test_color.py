"""
Unit tests for color-space conversion, the Color/ColorRange schema and the distance heuristic.
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import dataclasses
import random
import re
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from emopalette.color import (
    Color,
    ColorRange,
    color_distance,
    distance_matrix,
    hex_to_hsb,
    hex_to_rgb,
    hsb_to_hex,
    hsb_to_rgb,
    min_contrast,
    palette_record,
    rgb_to_hex,
    rgb_to_hsb,
)

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def _hue_diff(a: float, b: float) -> float:
    d = abs(a - b) % 360
    return min(d, 360 - d)


class TestConvert(unittest.TestCase):
    """hex <-> RGB <-> HSB."""

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#FF5733"), (255, 87, 51))
        self.assertEqual(hex_to_rgb("ff5733"), (255, 87, 51))
        self.assertEqual(hex_to_rgb("#00a0Ff"), (0, 160, 255))

    def test_hex_to_rgb_malformed_is_black(self):
        for bad in ("#FFF", "zzzzzz", "", "#FF5733\n", "#FF57333", "rgb(1,2,3)"):
            self.assertEqual(hex_to_rgb(bad), (0, 0, 0), bad)

    def test_rgb_to_hsb(self):
        h, s, b = rgb_to_hsb(255, 87, 51)
        self.assertEqual(h, 11)
        self.assertAlmostEqual(s, 80.0, places=6)
        self.assertAlmostEqual(b, 100.0, places=6)

    def test_rgb_to_hsb_gray_has_zero_hue_and_saturation(self):
        h, s, b = rgb_to_hsb(128, 128, 128)
        self.assertEqual(h, 0)
        self.assertEqual(s, 0)
        self.assertAlmostEqual(b, 128 / 255 * 100)

    def test_rgb_to_hsb_hue_in_range(self):
        for rgb in ((255, 0, 1), (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 0, 255)):
            h, _, _ = rgb_to_hsb(*rgb)
            self.assertTrue(0 <= h < 360, rgb)

    def test_hsb_to_hex_primaries(self):
        self.assertEqual(hsb_to_hex(0, 100, 100), "#FF0000")
        self.assertEqual(hsb_to_hex(120, 100, 100), "#00FF00")
        self.assertEqual(hsb_to_hex(240, 100, 100), "#0000FF")
        self.assertEqual(hsb_to_hex(0, 0, 100), "#FFFFFF")
        self.assertEqual(hsb_to_hex(200, 50, 0), "#000000")

    def test_hsb_to_rgb_wraps_hue(self):
        self.assertEqual(hsb_to_rgb(360, 100, 100), (255, 0, 0))
        self.assertEqual(hsb_to_rgb(-120, 100, 100), hsb_to_rgb(240, 100, 100))

    def test_rgb_to_hex_packs_and_clamps(self):
        self.assertEqual(rgb_to_hex(0, 0, 0), "#000000")
        self.assertEqual(rgb_to_hex(1, 2, 3), "#010203")
        self.assertEqual(rgb_to_hex(300, -5, 16), "#FF0010")

    def test_round_trip_within_one_unit(self):
        for h in range(0, 360, 7):
            for s in (80, 90, 100):
                for b in (80, 90, 100):
                    h2, s2, b2 = rgb_to_hsb(*hsb_to_rgb(h, s, b))
                    self.assertLessEqual(_hue_diff(h, h2), 1, (h, s, b))
                    self.assertLessEqual(abs(s - s2), 1, (h, s, b))
                    self.assertLessEqual(abs(b - b2), 1, (h, s, b))

    def test_round_trip_low_saturation_and_brightness(self):
        # Hue and saturation get coarser as chroma and brightness shrink
        for h in range(0, 360, 7):
            for s in (30, 40, 50, 60, 70):
                for b in (30, 40, 50, 60, 70):
                    h2, s2, b2 = rgb_to_hsb(*hsb_to_rgb(h, s, b))
                    chroma = 255 * s * b / 10000
                    self.assertLessEqual(_hue_diff(h, h2), 1 + 120 / chroma, (h, s, b))
                    self.assertLessEqual(abs(s - s2), 1 + 150 / (2.55 * b), (h, s, b))
                    self.assertLessEqual(abs(b - b2), 1, (h, s, b))

    def test_unrounded_hue(self):
        h, _, _ = rgb_to_hsb(197, 215, 20, round_hue=False)
        self.assertNotEqual(h, round(h))
        self.assertAlmostEqual(h, 65.538461538, places=6)
        self.assertEqual(rgb_to_hsb(197, 215, 20)[0], 66)

    def test_hex_to_hsb(self):
        self.assertEqual(hex_to_hsb("#FF0000"), (0, 100.0, 100.0))
        self.assertEqual(hex_to_hsb("nope"), (0, 0.0, 0.0))


class TestSchema(unittest.TestCase):
    """Color derives hex from HSB; ColorRange handles hue wrap."""

    def test_color_hex_derived(self):
        c = Color(0, 100, 100)
        self.assertEqual(c.hex, "#FF0000")
        self.assertTrue(HEX_RE.match(Color(123.4, 56.7, 89.1).hex))

    def test_color_is_immutable(self):
        c = Color(10, 20, 30)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            c.h = 50  # type: ignore[misc]

    def test_color_from_hex_close_to_source(self):
        c = Color.from_hex("#FF5733")
        for got, want in zip(hex_to_rgb(c.hex), (255, 87, 51)):
            self.assertLessEqual(abs(got - want), 1)

    def test_color_from_hex_keeps_exact_hex(self):
        rng = random.Random(0)
        values = [rng.randrange(0x1000000) for _ in range(2000)]
        values += [0x000000, 0xFFFFFF, 0xFF0000, 0x00FF00, 0x0000FF, 0x808080, 0x010203, 0xFEFDFC]
        for v in values:
            hx = f"#{v:06X}"
            self.assertEqual(Color.from_hex(hx).hex, hx)

    def test_color_from_hex_normalizes_case(self):
        self.assertEqual(Color.from_hex("c5d714").hex, "#C5D714")
        self.assertEqual(Color.from_hex("#a0b1c2").hex, "#A0B1C2")

    def test_adjusted_returns_new_color(self):
        c = Color(10, 50, 50)
        d = c.adjusted(h=370, s=150)
        self.assertEqual((d.h, d.s, d.b), (10, 100.0, 50))
        self.assertEqual(c.s, 50)
        self.assertEqual(d.hex, hsb_to_hex(10, 100, 50))

    def test_range_span_and_contains(self):
        plain = ColorRange(180, 220)
        wrapped = ColorRange(350, 10)
        self.assertEqual(plain.span, 40)
        self.assertEqual(wrapped.span, 20)
        self.assertTrue(plain.contains(200))
        self.assertFalse(plain.contains(10))
        self.assertTrue(wrapped.contains(355))
        self.assertTrue(wrapped.contains(5))
        self.assertFalse(wrapped.contains(180))
        self.assertEqual(plain.clamp(300), 220)

    def test_palette_record(self):
        rec = palette_record("Dawn", "sunrise", [Color(0, 100, 100), Color(120, 100, 100)])
        self.assertEqual(rec, {"name": "Dawn", "emotion": "sunrise", "colors": [{"hex": "#FF0000"}, {"hex": "#00FF00"}]})


class TestDistance(unittest.TestCase):
    """Weighted HSB distance."""

    def test_identical_colors(self):
        c = Color(40, 60, 70)
        self.assertEqual(color_distance(c, c), 0.0)

    def test_brightness_dominates(self):
        black = Color(0, 0, 0)
        white = Color(0, 0, 100)
        self.assertAlmostEqual(color_distance(black, white), 200.0)

    def test_hue_difference_is_circular(self):
        a = Color(350, 100, 100)
        b = Color(10, 100, 100)
        self.assertAlmostEqual(color_distance(a, b), 30.0)

    def test_matrix_matches_pairwise(self):
        colors = [Color(0, 100, 100), Color(120, 50, 60), Color(300, 20, 90)]
        m = distance_matrix(colors)
        self.assertEqual(m.shape, (3, 3))
        for i in range(3):
            self.assertAlmostEqual(m[i, i], 0.0)
            for j in range(3):
                self.assertAlmostEqual(m[i, j], color_distance(colors[i], colors[j]))
                self.assertAlmostEqual(m[i, j], m[j, i])

    def test_min_contrast(self):
        self.assertEqual(min_contrast([]), 0.0)
        self.assertEqual(min_contrast([Color(0, 0, 0)]), 0.0)
        colors = [Color(0, 0, 0), Color(0, 0, 100), Color(0, 0, 10)]
        self.assertAlmostEqual(min_contrast(colors), 20.0)


if __name__ == "__main__":
    unittest.main()
