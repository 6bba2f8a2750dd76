"""
Our data: named emotions with synonyms and HSB ranges. Used by the mapping resolver.
Order matters: the resolver returns the first entry that matches.
"""
from ..color.schema import ColorRange, EmotionMapping


def _entry(
    emotion: str,
    synonyms: list[str],
    *,
    hue: tuple[int, int],
    saturation: tuple[int, int],
    brightness: tuple[int, int],
) -> EmotionMapping:
    return EmotionMapping(
        emotion=emotion,
        synonyms=tuple(synonyms),
        hue=ColorRange(*hue),
        saturation=ColorRange(*saturation),
        brightness=ColorRange(*brightness),
    )


EMOTION_MAPPINGS: list[EmotionMapping] = [
    _entry(
        "calm",
        ["peaceful", "serene", "relaxed", "tranquil", "gentle", "quiet", "soothing", "soft", "chill", "zen"],
        hue=(170, 200), saturation=(30, 70), brightness=(60, 100),
    ),
    _entry(
        "happy",
        ["joyful", "cheerful", "delighted", "pleased", "content", "blissful", "ecstatic", "merry", "glad",
         "jubilant", "optimistic", "positive", "sunny"],
        hue=(40, 60), saturation=(60, 100), brightness=(80, 100),
    ),
    _entry(
        "energetic",
        ["lively", "enthusiastic", "vibrant", "dynamic", "active", "spirited", "vigorous", "zestful", "peppy",
         "bouncy", "animated", "vivacious", "perky"],
        hue=(0, 30), saturation=(70, 100), brightness=(70, 100),
    ),
    _entry(
        "peaceful",
        ["harmonious", "placid", "restful", "still", "mellow", "tranquil", "calm", "quiet", "serene", "gentle",
         "relaxed", "composed"],
        hue=(80, 140), saturation=(20, 60), brightness=(70, 100),
    ),
    _entry(
        "excited",
        ["thrilled", "eager", "animated", "passionate", "elated", "enthusiastic", "exhilarated", "thrilled",
         "stimulated", "energized", "psyched", "pumped"],
        hue=(300, 360), saturation=(70, 100), brightness=(70, 100),
    ),
    _entry(
        "melancholic",
        ["sad", "nostalgic", "wistful", "pensive", "reflective", "somber", "gloomy", "depressed", "sorrowful",
         "down", "blue", "moody", "unhappy", "forlorn"],
        hue=(220, 280), saturation=(20, 50), brightness=(20, 70),
    ),
    _entry(
        "romantic",
        ["loving", "passionate", "tender", "affectionate", "dreamy", "amorous", "sensual", "intimate", "warm",
         "sentimental", "heartfelt"],
        hue=(280, 340), saturation=(30, 70), brightness=(70, 90),
    ),
    _entry(
        "mysterious",
        ["enigmatic", "cryptic", "secretive", "intriguing", "obscure", "shadowy", "dark", "puzzling", "hidden",
         "unknown", "eerie", "spooky", "mystical"],
        hue=(230, 290), saturation=(30, 60), brightness=(20, 50),
    ),
    _entry(
        "powerful",
        ["strong", "dominant", "bold", "intense", "confident", "mighty", "forceful", "potent", "commanding",
         "authoritative", "imposing", "formidable"],
        hue=(0, 30), saturation=(60, 100), brightness=(40, 70),
    ),
    _entry(
        "fresh",
        ["new", "crisp", "clean", "cool", "invigorating", "revitalizing", "refreshing", "rejuvenating",
         "pristine", "mint", "spring", "dewy", "bright"],
        hue=(80, 180), saturation=(40, 80), brightness=(70, 100),
    ),
    _entry(
        "angry",
        ["furious", "mad", "enraged", "irate", "wrathful", "indignant", "irritated", "annoyed", "cross", "vexed",
         "heated", "exasperated", "fuming"],
        hue=(0, 15), saturation=(80, 100), brightness=(60, 90),
    ),
    _entry(
        "surprised",
        ["amazed", "astonished", "shocked", "stunned", "startled", "dumbfounded", "flabbergasted", "awestruck",
         "astounded", "taken aback", "speechless"],
        hue=(260, 320), saturation=(50, 90), brightness=(70, 100),
    ),
    _entry(
        "confused",
        ["puzzled", "perplexed", "bewildered", "disoriented", "baffled", "muddled", "befuddled", "lost",
         "uncertain", "unclear", "ambiguous", "mixed up"],
        hue=(240, 300), saturation=(20, 60), brightness=(50, 80),
    ),
    _entry(
        "fearful",
        ["scared", "afraid", "terrified", "frightened", "anxious", "worried", "panicked", "alarmed", "nervous",
         "horrified", "dread", "spooked", "uneasy"],
        hue=(210, 260), saturation=(30, 70), brightness=(20, 60),
    ),
    _entry(
        "focused",
        ["concentrated", "attentive", "alert", "intentional", "determined", "resolute", "steadfast",
         "committed", "devoted", "dedicated", "precise"],
        hue=(180, 240), saturation=(40, 80), brightness=(40, 80),
    ),
    _entry(
        "creative",
        ["imaginative", "innovative", "inventive", "original", "artistic", "inspired", "expressive",
         "resourceful", "clever", "ingenious", "brilliant"],
        hue=(20, 70), saturation=(60, 100), brightness=(70, 100),
    ),
    _entry(
        "tired",
        ["exhausted", "fatigued", "weary", "sleepy", "drowsy", "lethargic", "drained", "worn out", "spent",
         "beat", "sluggish", "lazy", "listless"],
        hue=(30, 60), saturation=(10, 40), brightness=(30, 70),
    ),
    _entry(
        "silly",
        ["goofy", "funny", "humorous", "playful", "whimsical", "ridiculous", "absurd", "ludicrous", "comical",
         "laughable", "hilarious", "wacky"],
        hue=(20, 70), saturation=(70, 100), brightness=(80, 100),
    ),
    _entry(
        "tropical",
        ["exotic", "paradise", "island", "beach", "sunny", "warm", "vacation", "resort", "coconut", "palm",
         "ocean", "coastal", "summery"],
        hue=(60, 150), saturation=(60, 100), brightness=(70, 100),
    ),
    _entry(
        "earthy",
        ["natural", "organic", "grounded", "rustic", "outdoors", "woodland", "forest", "nature", "soil", "dirt",
         "moss", "stone", "wood", "terra", "green"],
        hue=(30, 130), saturation=(30, 70), brightness=(30, 80),
    ),
]

# Suggestion words shown to users as starting points
COMMON_EMOTIONS: list[str] = [
    "happy", "sunset", "ocean", "coffee",
    "autumn", "space", "mint", "forest",
    "cyberpunk", "winter", "elegant", "tech",
]
