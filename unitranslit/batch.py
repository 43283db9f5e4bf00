# unitranslit/batch.py
import logging
from typing import Dict, Iterable, Mapping, Optional

import pandas as pd

from unitranslit.engine import default_engine
from unitranslit.errors import InvalidMapping, TransliterationError
from unitranslit.normalizer import Normalization
from unitranslit.repair import repair_text
from unitranslit.validation import validate_mapping

log = logging.getLogger(__name__)

RESULT_COLUMNS = ["input", "output", "error"]


def displayable(line: str) -> str:
    """Escapes lone surrogates so the line can be stored in a string column."""
    # Well-formed pairs are folded first so only unpaired halves get escaped.
    folded = line.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return folded.encode("utf-8", "backslashreplace").decode("utf-8")


def mapping_from_frame(df: pd.DataFrame) -> Dict[str, str]:
    """Builds a custom mapping from an edited (key, value) table."""
    mapping = {}
    if df is None or df.empty:
        return mapping

    for row in df.itertuples(index=False):
        key, value = row.key, row.value
        # Rows the user left half-filled come back as None or NaN.
        if pd.isna(key) or key == "":
            continue
        mapping[str(key)] = "" if pd.isna(value) else str(value)
    return mapping


def transliterate_lines(
    lines: Iterable[str],
    mode: Normalization,
    use_default_mapping: bool = True,
    custom_mapping: Optional[Mapping[str, str]] = None,
    fix_encoding: bool = False,
) -> pd.DataFrame:
    """
    Transliterates each non-blank line and collects the results in a DataFrame.
    A bad line records its error and the batch carries on; a bad custom mapping
    rejects the whole batch up front.
    """
    mode = Normalization.parse(mode)
    if not validate_mapping(custom_mapping):
        raise InvalidMapping(
            "Custom mapping keys must be 1-6 graphemes and values 1-40 graphemes."
        )

    engine = default_engine()
    rows = []
    for line in lines:
        if not line or not line.strip():
            continue

        # 1. Optionally repair mojibake before the tables see the text.
        source = repair_text(line) if fix_encoding else line

        # 2. Transliterate, keeping per-line failures in the table.
        try:
            output = engine.transliterate(source, mode, use_default_mapping, custom_mapping)
            rows.append({"input": displayable(line), "output": output, "error": ""})
        except TransliterationError as exc:
            log.info("Skipping line %r: %s", line, exc)
            rows.append({"input": displayable(line), "output": "", "error": f"{type(exc).__name__}: {exc}"})

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
