# unitranslit/notation.py
import logging
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

log = logging.getLogger(__name__)

MARKER = "U+"
MAX_CODEPOINT = 0x10FFFF
# "10FFFF" is the longest hex span a codepoint can need.
MAX_HEX_DIGITS = 6


def decode_notation(notation: str) -> Optional[str]:
    """
    Converts "U+1F642 U+200D U+2194 U+FE0F" style notation into the literal text.
    Returns None when any token is unparsable or out of range.
    """
    if not isinstance(notation, str):
        return None

    chars = []
    # Everything before the first marker is ignored, like stray whitespace.
    for token in notation.split(MARKER)[1:]:
        hex_span = token.split(" ", 1)[0]
        if not hex_span or len(hex_span) > MAX_HEX_DIGITS:
            return None
        # int() would also take signs and underscores.
        if not all(c in string.hexdigits for c in hex_span):
            return None
        codepoint = int(hex_span, 16)
        if not 0 <= codepoint <= MAX_CODEPOINT:
            return None
        chars.append(chr(codepoint))

    return "".join(chars)


def to_notation(char: str) -> str:
    """Builds the single-codepoint key used by the reference tables, e.g. "U+00E4"."""
    return f"{MARKER}{ord(char):04X}"


def prepare_table(raw: Mapping[str, str]) -> dict:
    """
    Turns a notation-keyed table into a literal-keyed one.
    Never raises: bad keys are dropped and the first literal key wins.
    """
    table = {}
    if not raw:
        return table

    for notation, replacement in raw.items():
        key = decode_notation(notation)
        if not key:
            log.debug("Dropping unparsable mapping key %r", notation)
            continue
        if key in table:
            log.debug("Dropping duplicate mapping key %r", notation)
            continue
        table[key] = replacement

    return table


@dataclass(frozen=True)
class MappingTable:
    """An immutable literal-key table plus the scan bound derived from it."""

    name: str
    entries: Mapping[str, str]
    raw: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    max_key_length: int = 0

    @classmethod
    def from_notation(cls, raw: Mapping[str, str], name: str = "reference") -> "MappingTable":
        entries = prepare_table(raw)
        log.debug("Built %s table with %d entries", name, len(entries))
        return cls(
            name=name,
            entries=MappingProxyType(entries),
            raw=MappingProxyType(dict(raw)),
            max_key_length=max(map(len, entries), default=0),
        )

    @classmethod
    def from_literal(cls, mapping: Optional[Mapping[str, str]], name: str = "custom") -> "MappingTable":
        # Custom mappings are already literal text; only empty keys are unusable.
        entries = {key: value for key, value in (mapping or {}).items() if key}
        return cls(
            name=name,
            entries=MappingProxyType(entries),
            max_key_length=max(map(len, entries), default=0),
        )

    def lookup(self, candidate: str) -> Optional[str]:
        return self.entries.get(candidate)

    def lookup_notation(self, notation_key: str) -> Optional[str]:
        return self.raw.get(notation_key)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
