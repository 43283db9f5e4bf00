# unitranslit/validation.py
from typing import Mapping, Optional

import regex

# Grapheme ceilings for caller-supplied mapping entries.
MAX_KEY_GRAPHEMES = 6
MAX_VALUE_GRAPHEMES = 40

# \X matches one extended grapheme cluster (UAX #29).
GRAPHEME_RE = regex.compile(r"\X")


def _is_high_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDBFF


def _is_low_surrogate(cp: int) -> bool:
    return 0xDC00 <= cp <= 0xDFFF


def _is_bmp_noncharacter(cp: int) -> bool:
    return 0xFDD0 <= cp <= 0xFDEF or cp == 0xFFFE


def _is_supplementary_noncharacter(cp: int) -> bool:
    return (cp & 0xFFFF) in (0xFFFE, 0xFFFF)


def is_valid_unicode(text: str) -> bool:
    """
    Checks that text is a well-formed Unicode sequence.
    A high surrogate directly followed by a low surrogate counts as one
    codepoint; any other surrogate is rejected, as are noncharacters.
    Empty or whitespace-only text is valid here.
    """
    i = 0
    length = len(text)
    while i < length:
        cp = ord(text[i])

        if _is_high_surrogate(cp):
            # 1. A high surrogate needs a low surrogate right after it.
            if i + 1 >= length or not _is_low_surrogate(ord(text[i + 1])):
                return False
            combined = 0x10000 + ((cp - 0xD800) << 10) + (ord(text[i + 1]) - 0xDC00)
            if _is_supplementary_noncharacter(combined):
                return False
            i += 2
            continue

        # 2. A low surrogate on its own is never valid.
        if _is_low_surrogate(cp):
            return False

        # 3. Codepoints beyond the BMP arrive already combined in a Python str.
        if cp > 0xFFFF:
            if _is_supplementary_noncharacter(cp):
                return False
        elif _is_bmp_noncharacter(cp):
            return False

        i += 1

    return True


def grapheme_count(text: str) -> int:
    """Counts user-perceived characters, so "a" + U+0308 is one grapheme."""
    return len(GRAPHEME_RE.findall(text))


def is_valid_grapheme_length(text: str, max_graphemes: int) -> bool:
    """Blank text counts as zero graphemes and is therefore never valid."""
    if not isinstance(text, str) or not text.strip():
        return False
    return grapheme_count(text) <= max_graphemes


def validate_mapping(entries: Optional[Mapping[str, str]]) -> bool:
    """
    Checks every custom mapping entry against the grapheme ceilings.
    A single bad entry invalidates the whole mapping.
    """
    if not entries:
        return True

    for key, value in entries.items():
        if not is_valid_grapheme_length(key, MAX_KEY_GRAPHEMES):
            return False
        if not is_valid_grapheme_length(value, MAX_VALUE_GRAPHEMES):
            return False

    return True
