# unitranslit/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from unitranslit.config import Settings, load_mapping_file
from unitranslit.engine import default_engine
from unitranslit.errors import TransliterationError
from unitranslit.normalizer import Normalization
from unitranslit.repair import repair_text

log = logging.getLogger(__name__)

MODE_CHOICES = [member.value.lower() for member in Normalization]


def _parse_pair(value: str) -> tuple:
    key, sep, replacement = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, replacement


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or Settings.from_env()
    parser = argparse.ArgumentParser(
        prog="unitranslit",
        description="Transliterate Unicode text to a simplified, ASCII-leaning form.",
    )
    parser.add_argument("text", nargs="*", help="Text to transliterate (reads stdin lines when omitted)")
    parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        default=settings.mode.value.lower(),
        help="Unicode normalization form applied after substitution",
    )
    parser.add_argument(
        "--no-default-mapping",
        action="store_true",
        help="Skip the bundled emoji and character tables",
    )
    parser.add_argument(
        "--mapping-file",
        type=Path,
        default=None,
        help="JSON object of custom key/value replacements",
    )
    parser.add_argument(
        "--map",
        type=_parse_pair,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Custom replacement (may be given several times, wins over --mapping-file)",
    )
    parser.add_argument(
        "--fix-encoding",
        action="store_true",
        default=settings.fix_encoding,
        help="Repair mojibake before transliterating",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default WARNING)")
    return parser.parse_args(argv)


def build_custom_mapping(args: argparse.Namespace) -> Dict[str, str]:
    mapping = {}
    if args.mapping_file is not None:
        mapping.update(load_mapping_file(args.mapping_file))
    mapping.update(dict(args.map))
    return mapping


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")

    mode = Normalization.parse(args.mode)
    lines = [" ".join(args.text)] if args.text else [line.rstrip("\r\n") for line in sys.stdin]
    log.debug("Transliterating %d line(s) with %s", len(lines), mode.value)

    try:
        custom_mapping = build_custom_mapping(args)
        engine = default_engine()
        for line in lines:
            # Blank stdin lines are echoed so the output lines up with the input.
            if not args.text and not line.strip():
                print(line)
                continue
            source = repair_text(line) if args.fix_encoding else line
            print(engine.transliterate(source, mode, not args.no_default_mapping, custom_mapping or None))
    except TransliterationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
