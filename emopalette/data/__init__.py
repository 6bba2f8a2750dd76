# Static lexicon: emotion entries, word associations, suggestions

from .emotions import EMOTION_MAPPINGS, COMMON_EMOTIONS
from .associations import EXTENDED_ASSOCIATIONS

__all__ = ["EMOTION_MAPPINGS", "COMMON_EMOTIONS", "EXTENDED_ASSOCIATIONS"]
