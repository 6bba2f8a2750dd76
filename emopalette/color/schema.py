"""
Schema for colors, ranges and emotion mappings.
All values are immutable: regeneration replaces a Color, never edits it.
"""
from dataclasses import dataclass, field
from typing import Any, Literal

from .convert import hex_to_hsb, hsb_to_hex

HarmonyType = Literal["monochromatic", "analogous", "complementary", "triadic"]

HARMONY_TYPES: tuple[str, ...] = ("monochromatic", "analogous", "complementary", "triadic")


@dataclass(frozen=True)
class Color:
    """
    One palette color. hex is always derived from (h, s, b) at construction,
    so the two representations cannot diverge.
    """

    h: float  # 0-360
    s: float  # 0-100
    b: float  # 0-100
    hex: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", hsb_to_hex(self.h, self.s, self.b))

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Build from '#RRGGBB', keeping that exact hex. Malformed hex gives black."""
        return cls(*hex_to_hsb(hex_str, round_hue=False))

    def adjusted(
        self,
        *,
        h: float | None = None,
        s: float | None = None,
        b: float | None = None,
    ) -> "Color":
        """New color with any of h/s/b replaced; hue wraps, s/b clamp to 0-100."""
        new_h = self.h if h is None else h % 360
        new_s = self.s if s is None else max(0.0, min(100.0, s))
        new_b = self.b if b is None else max(0.0, min(100.0, b))
        return Color(new_h, new_s, new_b)

    def to_dict(self) -> dict[str, Any]:
        return {"hex": self.hex, "h": self.h, "s": self.s, "b": self.b}


@dataclass(frozen=True)
class ColorRange:
    """Closed interval. For hue, max < min means the range wraps past 360."""

    min: float
    max: float

    @property
    def span(self) -> float:
        width = self.max - self.min
        return width + 360 if width < 0 else width

    def contains(self, value: float) -> bool:
        if self.max >= self.min:
            return self.min <= value <= self.max
        return value >= self.min or value <= self.max

    def clamp(self, value: float) -> float:
        return max(self.min, min(self.max, value))


@dataclass(frozen=True)
class EmotionMapping:
    """Resolved hue/saturation/brightness ranges for an emotion or free text."""

    emotion: str
    synonyms: tuple[str, ...]
    hue: ColorRange
    saturation: ColorRange
    brightness: ColorRange

    def to_dict(self) -> dict[str, Any]:
        return {
            "emotion": self.emotion,
            "synonyms": list(self.synonyms),
            "hue": {"min": self.hue.min, "max": self.hue.max},
            "saturation": {"min": self.saturation.min, "max": self.saturation.max},
            "brightness": {"min": self.brightness.min, "max": self.brightness.max},
        }


@dataclass(frozen=True)
class ExtendedAssociation:
    """Ranges keyed by a single word (color name, nature term, food, concept)."""

    hue: ColorRange
    saturation: ColorRange
    brightness: ColorRange


def palette_record(name: str, emotion_label: str, colors: list[Color]) -> dict[str, Any]:
    """Hand-off shape for storing a finished palette: name, source text, ordered hex list."""
    return {
        "name": name,
        "emotion": emotion_label,
        "colors": [{"hex": c.hex} for c in colors],
    }
