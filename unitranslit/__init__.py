"""Greedy longest-match transliteration of Unicode text to an ASCII-leaning form."""

from unitranslit.engine import TransliterationEngine, default_engine, transliterate
from unitranslit.errors import InvalidEncoding, InvalidInput, InvalidMapping, TransliterationError
from unitranslit.normalizer import Normalization
from unitranslit.notation import MappingTable, prepare_table

__all__ = [
    "InvalidEncoding",
    "InvalidInput",
    "InvalidMapping",
    "MappingTable",
    "Normalization",
    "TransliterationEngine",
    "TransliterationError",
    "default_engine",
    "prepare_table",
    "transliterate",
]
