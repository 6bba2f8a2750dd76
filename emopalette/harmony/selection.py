"""
Pick a harmony type from textual cues. Keyword hits win; otherwise length and word count decide.
"""
import re

from ..color.schema import EmotionMapping, HarmonyType
from ..mapping.resolver import find_emotion_mapping

# Checked in this order for each word
HARMONY_KEYWORDS: tuple[tuple[HarmonyType, frozenset[str]], ...] = (
    ("analogous", frozenset({"similar", "related", "like", "family", "harmony", "natural", "subtle"})),
    ("complementary", frozenset({"opposite", "contrast", "versus", "against", "pop", "vibrant"})),
    ("triadic", frozenset({"balanced", "variety", "diverse", "colorful", "playful", "exciting"})),
    ("monochromatic", frozenset({"calm", "simple", "minimal", "elegant", "classic", "peaceful"})),
)

DEFAULT_HARMONY: HarmonyType = "complementary"

# Leading/trailing whitespace yields empty tokens, and those count as words
_WHITESPACE = re.compile(r"\s+")


def determine_harmony_type(text: str, mapping: EmotionMapping | None = None) -> HarmonyType:
    """
    Harmony for the input: keyword cue → that type; else short input (< 5 chars) → monochromatic;
    one word → analogous; three or more words → triadic; hue max - min < 30 → monochromatic;
    else complementary. mapping is only consulted for the hue-width rule.
    """
    text = text or ""
    words = _WHITESPACE.split(text.lower())
    for word in words:
        for harmony, keywords in HARMONY_KEYWORDS:
            if word in keywords:
                return harmony

    if len(text) < 5:
        return "monochromatic"
    if len(words) == 1:
        return "analogous"
    if len(words) >= 3:
        return "triadic"
    if mapping is None:
        mapping = find_emotion_mapping(text)
    # Plain max - min: a wrapped range (max < min) counts as narrow
    if mapping.hue.max - mapping.hue.min < 30:
        return "monochromatic"
    return DEFAULT_HARMONY
