"""Serbian Latin/Cyrillic transliteration."""

from .engine import Direction, Transliterator, to_cyrillic, to_latin
from .errors import (
    BufferOverflowError,
    EmptyDigestError,
    TransliterationError,
    TransliterationIOError,
    Utf8DecodeError,
    Utf8ReconstructError,
)

__all__ = [
    "Direction",
    "Transliterator",
    "to_cyrillic",
    "to_latin",
    "TransliterationError",
    "EmptyDigestError",
    "BufferOverflowError",
    "TransliterationIOError",
    "Utf8DecodeError",
    "Utf8ReconstructError",
]
