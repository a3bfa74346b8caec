"""Word scanner and transliteration engine."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
import logging
from typing import Iterable, Iterator

from srtranslit.disambiguation import digraph_exception
from srtranslit.encoding import decode_input, decode_output, encode_symbols
from srtranslit.tables import CYRILLIC_TO_LATIN, LATIN_TO_CYRILLIC, MappingTable

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Which alphabet the input is written in."""

    LATIN_TO_CYRILLIC = "latin-to-cyrillic"
    CYRILLIC_TO_LATIN = "cyrillic-to-latin"

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        value = name.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == value:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown transliteration direction '{name}' (expected one of: {choices})")


_TABLES: dict[Direction, MappingTable] = {
    Direction.LATIN_TO_CYRILLIC: LATIN_TO_CYRILLIC,
    Direction.CYRILLIC_TO_LATIN: CYRILLIC_TO_LATIN,
}


class Transliterator:
    """Convert Serbian text between the Latin and Cyrillic alphabets.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, direction: Direction = Direction.LATIN_TO_CYRILLIC) -> None:
        self._direction = direction
        self._table = _TABLES[direction]

    @property
    def direction(self) -> Direction:
        return self._direction

    def process_word(self, word: str) -> str:
        """Transliterate a single whitespace-free word."""
        output = bytearray()
        cursor = 0

        while cursor < len(word):
            match = self._table.match(word, cursor)
            if match is None:
                encode_symbols(word[cursor], output)
                cursor += 1
                continue

            emitted = match.target
            if self._direction is Direction.LATIN_TO_CYRILLIC:
                override = digraph_exception(word, match.source)
                if override is not None:
                    emitted = override

            encode_symbols(emitted, output)
            cursor += match.length

        result = decode_output(output)
        logger.debug("Transliterated word %r -> %r", word, result)
        return result

    def process(self, text: str | bytes) -> str:
        """Transliterate *text* word by word.

        Whitespace runs collapse to a single space and the result carries no
        leading or trailing whitespace.  ``bytes`` input must be UTF-8.
        """
        if isinstance(text, (bytes, bytearray)):
            text = decode_input(bytes(text))

        return " ".join(self.process_word(word) for word in text.split())

    def process_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one transliterated string per input line."""
        for line in lines:
            yield self.process(line)


@lru_cache(maxsize=None)
def _transliterator(direction: Direction) -> Transliterator:
    return Transliterator(direction)


def to_cyrillic(text: str | bytes) -> str:
    """Shortcut for ``Transliterator(Direction.LATIN_TO_CYRILLIC).process``."""
    return _transliterator(Direction.LATIN_TO_CYRILLIC).process(text)


def to_latin(text: str | bytes) -> str:
    """Shortcut for ``Transliterator(Direction.CYRILLIC_TO_LATIN).process``."""
    return _transliterator(Direction.CYRILLIC_TO_LATIN).process(text)
