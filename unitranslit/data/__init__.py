"""Reference tables keyed by codepoint notation ("U+00E4", "U+1F642 U+200D U+2194 U+FE0F")."""
