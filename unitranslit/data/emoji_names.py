# unitranslit/data/emoji_names.py
import unicodedata
from types import MappingProxyType

import emoji

from unitranslit import normalizer
from unitranslit.data.default_mappings import DEFAULT_MAPPINGS
from unitranslit.normalizer import Normalization
from unitranslit.notation import prepare_table

# Typographic quotes seen in a few names, e.g. "Côte d’Ivoire".
PUNCTUATION_FOLDS = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
}

# Literal-keyed default letters used to fold derived names.
_DEFAULT_LETTERS = prepare_table(DEFAULT_MAPPINGS)

# Hand-picked names; these win over the names derived from the emoji package.
CURATED_EMOJI_NAMES = {
    "U+1F600": "grinning face",
    "U+1F603": "grinning face with big eyes",
    "U+1F604": "grinning face with smiling eyes",
    "U+1F60A": "smiling face with smiling eyes",
    "U+1F642": "slightly smiling face",
    "U+1F913": "nerd face",
    "U+1F44D": "thumbs up",
    "U+263A": "smiling face",
    "U+2764": "red heart",
    "U+2764 U+FE0F": "red heart",
    "U+1F636 U+200D U+1F32B U+FE0F": "face in clouds",
    "U+1F62E U+200D U+1F4A8": "face exhaling",
    "U+1F642 U+200D U+2194 U+FE0F": "head shaking horizontally",
    "U+1F642 U+200D U+2195 U+FE0F": "head shaking vertically",
}


def emoji_label(alias: str) -> str:
    """Turns an emoji alias such as ":nerd_face:" into "nerd face"."""
    return alias.strip(":").replace("_", " ")


def ascii_label(label: str) -> str:
    """
    Folds a derived name the way the engine folds text, e.g. "piñata" to "pinata"
    and "Türkiye" to "Tuerkiye", so a name never changes when transliterated again.
    """
    folded = "".join(
        _DEFAULT_LETTERS.get(ch, PUNCTUATION_FOLDS.get(ch, ch))
        for ch in unicodedata.normalize("NFC", label)
    )
    return normalizer.apply(folded, Normalization.DECOMPOSE)


def notation_of(text: str) -> str:
    return " ".join(f"U+{ord(ch):04X}" for ch in text)


def build_emoji_names() -> dict:
    """
    Derives the notation-keyed emoji table from the emoji package's data,
    then lays the curated names on top.
    """
    names = {}
    for emj, data in emoji.EMOJI_DATA.items():
        alias = data.get("en")
        if not alias:
            continue
        names[notation_of(emj)] = ascii_label(emoji_label(alias))

    names.update(CURATED_EMOJI_NAMES)
    return names


EMOJI_NAMES = MappingProxyType(build_emoji_names())
