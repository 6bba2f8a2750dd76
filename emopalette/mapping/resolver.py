"""
Free text → EmotionMapping.
Resolution is an ordered chain of matcher stages; the first stage that returns a mapping wins.
Unrecognized text falls through to a deterministic, hash-derived mapping, so resolution never fails.
"""
import logging
import re
from typing import Callable

from ..color.schema import ColorRange, EmotionMapping
from ..data import EMOTION_MAPPINGS, EXTENDED_ASSOCIATIONS
from ..random_utils import RandomSource, resolve_rng

logger = logging.getLogger(__name__)

Matcher = Callable[[str], EmotionMapping | None]

_WORD_SPLIT = re.compile(r"[\s\-_,]+")
_VOWELS = re.compile(r"[aeiou]", re.IGNORECASE)
_CONSONANTS = re.compile(r"[bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)

# Fuzzy matching: shared prefix length and positional overlap threshold
_PREFIX_LEN = 4
_OVERLAP_THRESHOLD = 0.7


def normalize(text: str) -> str:
    return (text or "").lower().strip()


def split_words(text: str) -> list[str]:
    """Split on whitespace, hyphen, underscore and comma."""
    return [w for w in _WORD_SPLIT.split(normalize(text)) if w]


# -----------------------------------------------------------------------------
# Stage 1: extended word associations (exact key, then substring either way)
# -----------------------------------------------------------------------------
def match_extended_association(text: str) -> EmotionMapping | None:
    for word in split_words(text):
        if len(word) < 3:
            continue
        assoc = EXTENDED_ASSOCIATIONS.get(word)
        if assoc is not None:
            return EmotionMapping(word, (word,), assoc.hue, assoc.saturation, assoc.brightness)
        for key, assoc in EXTENDED_ASSOCIATIONS.items():
            if key in word or word in key:
                return EmotionMapping(key, (word,), assoc.hue, assoc.saturation, assoc.brightness)
    return None


# -----------------------------------------------------------------------------
# Stage 2: full input equals an emotion label
# -----------------------------------------------------------------------------
def match_emotion_label(text: str) -> EmotionMapping | None:
    normalized = normalize(text)
    for mapping in EMOTION_MAPPINGS:
        if mapping.emotion.lower() == normalized:
            return mapping
    return None


# -----------------------------------------------------------------------------
# Stage 3: a word equals a synonym, or input and a synonym contain one another
# -----------------------------------------------------------------------------
def match_synonym(text: str) -> EmotionMapping | None:
    normalized = normalize(text)
    if not normalized:
        return None
    words = split_words(text)
    for mapping in EMOTION_MAPPINGS:
        if any(w in mapping.synonyms for w in words):
            return mapping
        if any(syn in normalized or normalized in syn for syn in mapping.synonyms):
            return mapping
    return None


def _words_similar(word: str, candidate: str) -> bool:
    if len(candidate) < _PREFIX_LEN:
        return False
    if word[:_PREFIX_LEN] == candidate[:_PREFIX_LEN]:
        return True
    n = min(len(word), len(candidate))
    matches = sum(1 for i in range(n) if word[i] == candidate[i])
    return matches / n > _OVERLAP_THRESHOLD


# -----------------------------------------------------------------------------
# Stage 4: fuzzy (4-char prefix or >70% positional character overlap)
# -----------------------------------------------------------------------------
def match_fuzzy(text: str) -> EmotionMapping | None:
    words = [w for w in split_words(text) if len(w) > 3]
    for mapping in EMOTION_MAPPINGS:
        candidates = (mapping.emotion, *mapping.synonyms)
        for word in words:
            if any(_words_similar(word, c) for c in candidates):
                return mapping
    return None


MATCHERS: tuple[Matcher, ...] = (
    match_extended_association,
    match_emotion_label,
    match_synonym,
    match_fuzzy,
)


def string_hash(text: str) -> int:
    """Polynomial hash (h*31 + code) folded to signed 32 bits, then made non-negative."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def create_deterministic_mapping(text: str) -> EmotionMapping:
    """
    Stable mapping for unrecognized text. Pure function of the string:
    vowel-heavy text leans cool (180-359), consonant-heavy leans warm (0-179);
    short text is more saturated.
    """
    h = string_hash(text)
    length = len(text)
    vowels = len(_VOWELS.findall(text))
    consonants = len(_CONSONANTS.findall(text))
    vowel_ratio = vowels / length if length > 0 else 0.5

    hue_base = 180 + h % 180 if vowel_ratio > 0.5 else h % 180
    sat_base = 70 + h % 30 if length < 5 else 40 + h % 40
    if length < 4 or consonants > vowels * 2:
        bri_base = 60 + h % 40
    else:
        bri_base = 50 + h % 50
    hue_width = 60 if length < 4 else 40

    return EmotionMapping(
        emotion=text,
        synonyms=(text,),
        hue=ColorRange(hue_base, (hue_base + hue_width) % 360),
        saturation=ColorRange(max(30, sat_base - 20), min(100, sat_base + 20)),
        brightness=ColorRange(max(40, bri_base - 20), min(100, bri_base + 20)),
    )


def create_random_mapping(*, rng: RandomSource | None = None) -> EmotionMapping:
    """Fresh random mapping for empty input: 60° hue window, vivid and bright."""
    rng = resolve_rng(rng)
    hue = int(rng.random() * 360)
    sat = int(rng.random() * 30) + 70
    bri = int(rng.random() * 20) + 80
    return EmotionMapping(
        emotion="random",
        synonyms=("random",),
        hue=ColorRange(hue, (hue + 60) % 360),
        saturation=ColorRange(max(40, sat - 20), min(100, sat + 20)),
        brightness=ColorRange(max(50, bri - 20), min(100, bri + 20)),
    )


def find_emotion_mapping(text: str, *, rng: RandomSource | None = None) -> EmotionMapping:
    """
    Best-fit mapping for any text. Empty input → random mapping;
    otherwise the first matcher hit; otherwise a deterministic mapping.
    """
    normalized = normalize(text)
    if not normalized:
        logger.debug("Empty input, using random mapping")
        return create_random_mapping(rng=rng)
    for matcher in MATCHERS:
        mapping = matcher(normalized)
        if mapping is not None:
            logger.debug("Resolved %r via %s → %s", normalized, matcher.__name__, mapping.emotion)
            return mapping
    logger.debug("No match for %r, using deterministic mapping", normalized)
    return create_deterministic_mapping(normalized)
