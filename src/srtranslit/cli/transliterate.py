"""CLI entrypoint for Serbian Latin/Cyrillic transliteration."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from srtranslit.config import AUTO_ENCODING, LOG_LEVELS, TransliterationSettings
from srtranslit.engine import Direction, Transliterator
from srtranslit.errors import TransliterationError
from srtranslit.textio import decode_text, read_text_file


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None, settings: TransliterationSettings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transliterate Serbian text between Latin and Cyrillic")
    parser.add_argument(
        "--direction",
        choices=[member.value for member in Direction],
        default=settings.direction.value,
        help="Source -> target alphabet",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Text to transliterate")
    source.add_argument("--input", help="Path to a text file (defaults to stdin)")
    parser.add_argument(
        "--encoding",
        default=settings.input_encoding,
        help=f"Input encoding for --input and stdin, or '{AUTO_ENCODING}' to detect it",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level",
    )
    return parser.parse_args(argv)


def _read_source(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input is not None:
        return read_text_file(args.input, encoding=args.encoding)
    return decode_text(sys.stdin.buffer.read(), encoding=args.encoding)


def main(argv: list[str] | None = None) -> int:
    try:
        settings = TransliterationSettings.from_env()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    args = _parse_args(argv, settings)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    transliterator = Transliterator(Direction.from_name(args.direction))
    try:
        text = _read_source(args)
        for line in transliterator.process_lines(text.splitlines()):
            print(line)
    except TransliterationError as exc:
        LOGGER.error("Transliteration failed: %s", exc)
        return 1
    except (LookupError, ValueError) as exc:
        LOGGER.error("Could not read input: %s", exc)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
