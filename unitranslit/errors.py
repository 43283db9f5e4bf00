# unitranslit/errors.py


class TransliterationError(ValueError):
    """Base class for every error caused by bad caller input."""


class InvalidInput(TransliterationError):
    """Raised for null, empty or whitespace-only text."""


class InvalidEncoding(TransliterationError):
    """Raised for lone surrogates, truncated pairs and noncharacters."""


class InvalidMapping(TransliterationError):
    """Raised when a custom mapping breaks the grapheme limits."""
