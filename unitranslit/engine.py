# unitranslit/engine.py
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Mapping, Optional, Sequence, Tuple

from unitranslit import normalizer
from unitranslit.data.default_mappings import DEFAULT_MAPPINGS
from unitranslit.data.emoji_names import EMOJI_NAMES
from unitranslit.errors import InvalidEncoding, InvalidInput, InvalidMapping
from unitranslit.normalizer import Normalization
from unitranslit.notation import MappingTable, to_notation
from unitranslit.validation import is_valid_unicode, validate_mapping

log = logging.getLogger(__name__)

# Tables are always consulted in this order; the first table with a hit wins.
TABLE_PRIORITY = ("custom", "emoji", "default")


def join_surrogate_pairs(text: str) -> str:
    """Folds well-formed surrogate pairs into the codepoint they encode; lone halves are kept."""
    if not any(0xD800 <= ord(ch) <= 0xDFFF for ch in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


@dataclass(frozen=True)
class TransliterationEngine:
    """
    Owns the reference tables and runs the longest-match substitution pass.
    Holds no per-call state; one instance is shared by every caller.
    """

    emoji_table: MappingTable
    default_table: MappingTable

    def reference_tables(self) -> List[MappingTable]:
        return [self.emoji_table, self.default_table]

    def active_tables(
        self,
        use_default_mapping: bool = True,
        custom_mapping: Optional[Mapping[str, str]] = None,
    ) -> List[MappingTable]:
        """Returns the tables for one call, highest priority first."""
        tables = []
        if custom_mapping:
            # Keys are folded the same way as the input text so pairs still match.
            custom = {join_surrogate_pairs(key): value for key, value in custom_mapping.items()}
            tables.append(MappingTable.from_literal(custom, name="custom"))
        if use_default_mapping:
            tables.extend(self.reference_tables())
        return tables

    def transliterate(
        self,
        text: str,
        mode: Normalization,
        use_default_mapping: bool = True,
        custom_mapping: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        Substitutes mapped sequences, then normalizes and strips combining marks.
        Raises InvalidInput, InvalidEncoding or InvalidMapping, checked in that order.
        """
        mode = Normalization.parse(mode)

        # 1. Reject bad input before doing any work.
        if not isinstance(text, str) or not text.strip():
            raise InvalidInput("Text must be a non-empty, non-whitespace string.")
        if not is_valid_unicode(text):
            raise InvalidEncoding("Text contains unpaired surrogates or noncharacters.")
        if not validate_mapping(custom_mapping):
            raise InvalidMapping(
                "Custom mapping keys must be 1-6 graphemes and values 1-40 graphemes."
            )

        text = join_surrogate_pairs(text)

        # 2. Nothing to substitute: only normalize.
        tables = self.active_tables(use_default_mapping, custom_mapping)
        if not tables:
            return normalizer.apply(text, mode)

        # 3. Substitute, then normalize the result.
        fallback = self.reference_tables() if use_default_mapping else []
        substituted = self.substitute(text, tables, fallback)
        return normalizer.apply(substituted, mode)

    def substitute(
        self,
        text: str,
        tables: Sequence[MappingTable],
        fallback_tables: Sequence[MappingTable] = (),
    ) -> str:
        """Greedy, leftmost, longest-match replacement over the given tables."""
        max_key_length = max((table.max_key_length for table in tables), default=0)
        log.debug(
            "Substituting %d codepoints over %s (max key length %d)",
            len(text), [table.name for table in tables], max_key_length,
        )

        parts = []
        i = 0
        while i < len(text):
            replacement, width = self._match_at(text, i, tables, max_key_length)
            if replacement is None:
                ch = text[i]
                replacement = self._lookup_notation(ch, fallback_tables)
                if replacement is None:
                    replacement = ch
                width = 1
            parts.append(replacement)
            i += width

        return "".join(parts)

    @staticmethod
    def _match_at(
        text: str, start: int, tables: Sequence[MappingTable], max_key_length: int
    ) -> Tuple[Optional[str], int]:
        longest = min(max_key_length, len(text) - start)
        for length in range(longest, 0, -1):
            candidate = text[start:start + length]
            for table in tables:
                replacement = table.lookup(candidate)
                if replacement is not None:
                    return replacement, length
        return None, 0

    @staticmethod
    def _lookup_notation(ch: str, tables: Sequence[MappingTable]) -> Optional[str]:
        # Last resort: the raw reference data keyed by "U+XXXX".
        notation_key = to_notation(ch)
        for table in tables:
            replacement = table.lookup_notation(notation_key)
            if replacement is not None:
                return replacement
        return None


@lru_cache(maxsize=None)
def default_engine() -> TransliterationEngine:
    """Builds the engine over the bundled reference tables on first use."""
    engine = TransliterationEngine(
        emoji_table=MappingTable.from_notation(EMOJI_NAMES, name="emoji"),
        default_table=MappingTable.from_notation(DEFAULT_MAPPINGS, name="default"),
    )
    log.debug(
        "Reference tables ready: %d emoji, %d default entries",
        len(engine.emoji_table), len(engine.default_table),
    )
    return engine


def transliterate(
    text: str,
    mode: Normalization,
    use_default_mapping: bool = True,
    custom_mapping: Optional[Mapping[str, str]] = None,
) -> str:
    return default_engine().transliterate(text, mode, use_default_mapping, custom_mapping)
