"""Longest-match lookup over the static Latin/Cyrillic correspondence tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from srtranslit.charmaps import (
    CYRILLIC_DIRTY,
    CYRILLIC_DIRTY_SOURCE,
    LATIN_DIRTY,
    LATIN_DIRTY_TARGET,
)


@dataclass(frozen=True, slots=True)
class Match:
    """One table entry whose source matched at the scanning cursor."""

    source: str
    target: str

    @property
    def length(self) -> int:
        return len(self.source)


class MappingTable:
    """Immutable source -> target table that always prefers the longest match.

    Entries are ordered once at construction: longer sources first, and among
    sources of equal length the later registration first.  A digraph such as
    ``Lj`` is therefore consumed whole and never split into ``L`` + ``j``,
    independently of how the table data is ordered.
    """

    def __init__(self, source: Sequence[str], target: Sequence[str]) -> None:
        if len(source) != len(target):
            raise ValueError(
                f"Mapping table sides differ in length: {len(source)} sources, {len(target)} targets"
            )

        for index, (symbol, replacement) in enumerate(zip(source, target)):
            if not symbol:
                raise ValueError(f"Mapping table source at position {index} is empty")
            if not replacement:
                raise ValueError(f"Mapping table target at position {index} is empty")

        ranked = sorted(
            enumerate(zip(source, target)),
            key=lambda item: (-len(item[1][0]), -item[0]),
        )

        buckets: dict[str, list[Match]] = {}
        for _, (symbol, replacement) in ranked:
            buckets.setdefault(symbol[0], []).append(Match(source=symbol, target=replacement))

        self._size = len(source)
        self._by_first_char: dict[str, tuple[Match, ...]] = {
            char: tuple(matches) for char, matches in buckets.items()
        }

    def __len__(self) -> int:
        return self._size

    def match(self, chars: str, position: int) -> Match | None:
        """Return the longest entry whose source starts at ``chars[position]``."""
        candidates = self._by_first_char.get(chars[position], ())
        for candidate in candidates:
            if chars.startswith(candidate.source, position):
                return candidate
        return None


LATIN_TO_CYRILLIC = MappingTable(LATIN_DIRTY, CYRILLIC_DIRTY)
CYRILLIC_TO_LATIN = MappingTable(CYRILLIC_DIRTY_SOURCE, LATIN_DIRTY_TARGET)
