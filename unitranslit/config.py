# unitranslit/config.py
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from unitranslit.errors import InvalidMapping
from unitranslit.normalizer import Normalization

ENV_MODE = "UNITRANSLIT_MODE"
ENV_LOG_LEVEL = "UNITRANSLIT_LOG_LEVEL"


def load_mapping_file(path: Path) -> Dict[str, str]:
    """Reads a custom mapping stored as a flat JSON object of strings."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise InvalidMapping(f"{path}: could not read mapping file: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidMapping(f"{path}: expected a JSON object of key/value strings.")
    for key, value in data.items():
        if not isinstance(value, str):
            raise InvalidMapping(f"{path}: value for {key!r} is not a string.")
    return data


@dataclass
class Settings:
    """Options shared by the command line and the Streamlit app."""

    mode: Normalization = Normalization.DECOMPOSE
    use_default_mapping: bool = True
    custom_mapping: Dict[str, str] = field(default_factory=dict)
    fix_encoding: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        settings = cls()
        if environ.get(ENV_MODE):
            settings.mode = Normalization.parse(environ[ENV_MODE])
        if environ.get(ENV_LOG_LEVEL):
            settings.log_level = environ[ENV_LOG_LEVEL].upper()
        return settings
