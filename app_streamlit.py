# app_streamlit.py
import time

import pandas as pd
import streamlit as st

from unitranslit.batch import mapping_from_frame, transliterate_lines
from unitranslit.config import Settings
from unitranslit.engine import default_engine
from unitranslit.errors import InvalidMapping
from unitranslit.normalizer import Normalization

# --- Page Configuration ---
st.set_page_config(
    page_title="Unicode Transliteration",
    page_icon="🔤",
    layout="wide",
)


# --- Caching: Build the reference tables once per server process ---
@st.cache_resource
def load_engine():
    """Build the emoji and default tables up front so the first request is not slow."""
    return default_engine()


ENGINE = load_engine()
SETTINGS = Settings.from_env()

MODE_LABELS = {
    Normalization.DECOMPOSE: "NFD - canonical decomposition",
    Normalization.COMPOSE: "NFC - canonical composition",
    Normalization.COMPATIBILITY_COMPOSE: "NFKC - compatibility composition",
    Normalization.COMPATIBILITY_DECOMPOSE: "NFKD - compatibility decomposition",
}

# --- Streamlit User Interface ---

st.title("🔤 Unicode Transliteration")
st.markdown(
    "Replaces emoji, ligatures and language-specific letters with readable ASCII, "
    "then normalizes the text and strips the remaining combining marks."
)

st.header("Transliterate Text")

input_text = st.text_area(
    "Enter one or more lines of text:",
    height=200,
    value="Fußgängerübergänge\nЯ люблю единорогов\nI ❤ cofée 🤓\ntôi yêu những chú kỳ lân",
)

col_mode, col_opts = st.columns(2)
with col_mode:
    mode = st.selectbox(
        "Normalization",
        options=list(MODE_LABELS),
        index=list(MODE_LABELS).index(SETTINGS.mode),
        format_func=MODE_LABELS.get,
    )
with col_opts:
    use_default_mapping = st.checkbox("Use default emoji and character tables", value=SETTINGS.use_default_mapping)
    fix_encoding = st.checkbox("Repair mojibake first", value=SETTINGS.fix_encoding)

st.subheader("Custom Mapping")
st.caption("Custom entries win over the default tables. Keys: up to 6 graphemes, values: up to 40.")
mapping_df = st.data_editor(
    pd.DataFrame({"key": ["_"], "value": ["-"]}),
    num_rows="dynamic",
    use_container_width=True,
    hide_index=True,
)

if st.button("Transliterate", type="primary", use_container_width=True):
    lines = [line for line in input_text.split("\n") if line.strip()]
    if lines:
        try:
            start_time = time.time()
            df_results = transliterate_lines(
                lines,
                mode,
                use_default_mapping=use_default_mapping,
                custom_mapping=mapping_from_frame(mapping_df) or None,
                fix_encoding=fix_encoding,
            )
            total_time = time.time() - start_time
        except InvalidMapping as exc:
            st.error(f"Custom mapping rejected: {exc}")
        else:
            st.success(f"Transliterated {len(lines)} line(s) in {total_time * 1000:.1f} ms.")
            st.header("Results")
            st.dataframe(df_results, use_container_width=True, hide_index=True)
    else:
        st.warning("Please enter at least one line of text.")

# --- Sidebar ---
with st.sidebar:
    st.header("How it works")
    st.markdown("""
    1.  **Validation:** empty text, unpaired surrogates and noncharacters are rejected.

    2.  **Substitution:** the longest matching sequence is replaced, looking in the custom,
        emoji and default tables in that order.

    3.  **Normalization:** the chosen Unicode form is applied and non-spacing marks are removed.
    """)

    st.subheader("Reference Tables")
    st.markdown(
        f"- Emoji names: **{len(ENGINE.emoji_table)}** entries\n"
        f"- Characters: **{len(ENGINE.default_table)}** entries"
    )
