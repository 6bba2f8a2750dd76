# Mapping: free text → hue/saturation/brightness ranges

from .resolver import (
    find_emotion_mapping,
    create_deterministic_mapping,
    create_random_mapping,
    match_extended_association,
    match_emotion_label,
    match_synonym,
    match_fuzzy,
    MATCHERS,
    split_words,
)

__all__ = [
    "find_emotion_mapping",
    "create_deterministic_mapping",
    "create_random_mapping",
    "match_extended_association",
    "match_emotion_label",
    "match_synonym",
    "match_fuzzy",
    "MATCHERS",
    "split_words",
]
