# unitranslit/normalizer.py
import logging
import unicodedata
from enum import Enum

log = logging.getLogger(__name__)


class Normalization(Enum):
    DECOMPOSE = "NFD"
    COMPOSE = "NFC"
    COMPATIBILITY_COMPOSE = "NFKC"
    COMPATIBILITY_DECOMPOSE = "NFKD"

    @classmethod
    def parse(cls, value) -> "Normalization":
        """
        Accepts a member, a form name ("NFKD", "nfkd") or a member name ("decompose").
        Anything else is a programming error and raises ValueError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().upper()
            for member in cls:
                if wanted in (member.value, member.name):
                    return member
        raise ValueError(f"Unknown normalization mode: {value!r}")


def strip_nonspacing_marks(text: str) -> str:
    return "".join(ch for ch in text if unicodedata.category(ch) != "Mn")


def apply(text: str, mode: Normalization) -> str:
    """
    Normalizes text, then removes every non-spacing mark.
    The order matters: decomposition is what exposes most of the marks.
    """
    mode = Normalization.parse(mode)

    # 1. Normalize; text the primitive cannot handle degrades to an empty result.
    try:
        normalized = unicodedata.normalize(mode.value, text)
    except (TypeError, ValueError) as exc:
        log.warning("Could not apply %s normalization: %s", mode.value, exc)
        return ""

    # 2. Strip the combining marks left behind.
    return strip_nonspacing_marks(normalized)
