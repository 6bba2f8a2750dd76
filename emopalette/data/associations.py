"""
Our data: single-word associations (colors, nature, foods, concepts) → HSB ranges.
Checked before the emotion list. Insertion order is the partial-match order.
A hue range with max < min wraps past 360 (e.g. red: 350 → 10).
"""
from ..color.schema import ColorRange, ExtendedAssociation


def _assoc(hue: tuple[int, int], saturation: tuple[int, int], brightness: tuple[int, int]) -> ExtendedAssociation:
    return ExtendedAssociation(ColorRange(*hue), ColorRange(*saturation), ColorRange(*brightness))


EXTENDED_ASSOCIATIONS: dict[str, ExtendedAssociation] = {
    # Colors
    "red": _assoc((350, 10), (75, 95), (65, 90)),
    "blue": _assoc((190, 230), (65, 90), (70, 90)),
    "green": _assoc((80, 150), (60, 85), (60, 85)),
    "yellow": _assoc((40, 60), (80, 100), (80, 100)),
    "purple": _assoc((260, 290), (60, 85), (60, 90)),
    "pink": _assoc((300, 335), (50, 80), (80, 95)),
    "orange": _assoc((20, 40), (80, 100), (70, 90)),
    "teal": _assoc((170, 190), (60, 80), (50, 75)),
    "brown": _assoc((20, 40), (40, 70), (30, 60)),
    "gray": _assoc((0, 360), (0, 15), (40, 90)),
    # Nature
    "ocean": _assoc((180, 220), (60, 90), (60, 85)),
    "forest": _assoc((90, 150), (40, 80), (30, 70)),
    "sunset": _assoc((10, 40), (70, 100), (70, 100)),
    "sunrise": _assoc((25, 50), (60, 90), (75, 95)),
    "sky": _assoc((190, 225), (50, 80), (70, 95)),
    "autumn": _assoc((15, 40), (60, 90), (50, 90)),
    "winter": _assoc((180, 240), (10, 40), (70, 100)),
    "spring": _assoc((80, 160), (40, 80), (60, 95)),
    "summer": _assoc((40, 100), (60, 100), (70, 100)),
    # Foods
    "coffee": _assoc((20, 40), (50, 80), (20, 50)),
    "chocolate": _assoc((20, 30), (60, 90), (20, 40)),
    "mint": _assoc((140, 160), (30, 70), (70, 100)),
    "berry": _assoc((300, 340), (70, 100), (50, 80)),
    "lemon": _assoc((45, 60), (80, 100), (80, 100)),
    "apple": _assoc((350, 10), (60, 90), (60, 85)),
    # Concepts
    "tech": _assoc((190, 230), (30, 70), (60, 90)),
    "retro": _assoc((260, 320), (40, 80), (60, 90)),
    "futuristic": _assoc((180, 240), (40, 90), (50, 95)),
    "vintage": _assoc((25, 45), (20, 60), (70, 90)),
    "cyberpunk": _assoc((270, 330), (70, 100), (50, 90)),
    "minimalist": _assoc((0, 360), (0, 30), (70, 100)),
    "elegant": _assoc((240, 300), (10, 40), (70, 100)),
    "rustic": _assoc((20, 40), (30, 70), (40, 80)),
}
