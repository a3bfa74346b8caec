"""Reading source text from files with optional charset detection."""

from __future__ import annotations

import logging
from pathlib import Path

from charset_normalizer import from_bytes

from srtranslit.encoding import decode_input
from srtranslit.errors import TransliterationIOError, Utf8DecodeError

logger = logging.getLogger(__name__)

# Legacy single-byte code pages for Serbian Cyrillic and Latin text.
_FALLBACK_ENCODINGS = ("utf-8", "cp1251", "cp1250")


def detect_encoding(raw: bytes) -> str:
    """Guess the code page of *raw*, preferring the Serbian legacy ones."""
    best = from_bytes(raw).best()
    if best and best.encoding:
        name = best.encoding.lower()
        if name in {"windows-1251", "cp1251"}:
            return "cp1251"
        if name in {"windows-1250", "cp1250"}:
            return "cp1250"
        return best.encoding

    for fallback in _FALLBACK_ENCODINGS:
        try:
            raw.decode(fallback)
            return fallback
        except UnicodeDecodeError:
            continue
    raise ValueError("Could not detect text encoding")


def decode_text(raw: bytes, *, encoding: str = "utf-8") -> str:
    """Decode *raw* with *encoding*, or detect it when *encoding* is ``"auto"``."""
    if encoding == "auto":
        encoding = detect_encoding(raw)
        logger.info("Detected input encoding: %s", encoding)

    if encoding.replace("_", "-").lower() in {"utf-8", "utf8"}:
        return decode_input(raw)

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(exc) from exc


def read_text_file(path: Path | str, *, encoding: str = "utf-8") -> str:
    """Read a whole text file, mapping filesystem failures to the error taxonomy."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise TransliterationIOError(exc) from exc
    return decode_text(raw, encoding=encoding)
