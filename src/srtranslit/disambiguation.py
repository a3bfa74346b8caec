"""Digraph disambiguation against the exception-word dictionary.

Latin ``dj``, ``dž`` and ``nj`` usually stand for a single Cyrillic letter
(ђ, џ, њ), but across a prefix boundary or in loanwords they are two
letters: ``odjek`` is ``одјек``, ``konjugacija`` is ``конјугација``.  A word
selects the two-letter rendering when its lowercase form contains one of the
exception markers.
"""

from __future__ import annotations

from typing import Sequence
import unicodedata

from srtranslit.charmaps import DIGRAPH_EXCEPTIONS, DigraphException
from srtranslit.encoding import encode_text


def _encode_markers(exception: DigraphException) -> tuple[bytes, ...]:
    return tuple(marker.encode("utf-8") for marker in exception.markers)


_DEFAULT_MARKERS: dict[DigraphException, tuple[bytes, ...]] = {
    exception: _encode_markers(exception) for exception in DIGRAPH_EXCEPTIONS
}


def digraph_exception(
    word: str,
    symbol: str,
    exceptions: Sequence[DigraphException] = DIGRAPH_EXCEPTIONS,
) -> str | None:
    """Return the Cyrillic override for *symbol* inside *word*, if any.

    Exceptions are consulted in table order and the first alternative with a
    marker present in the lowercased word wins.  The word is NFC-composed
    before the search, so decomposed diacritics find precomposed markers.
    ``None`` means the regular table mapping applies.
    """
    lowered: bytes | None = None

    for exception in exceptions:
        for index, latin in enumerate(exception.latin):
            if latin != symbol:
                continue
            if lowered is None:
                lowered = encode_text(unicodedata.normalize("NFC", word.lower()))
            markers = _DEFAULT_MARKERS.get(exception)
            if markers is None:
                markers = _encode_markers(exception)
            for marker in markers:
                if marker in lowered:
                    return exception.cyrillic[index]

    return None
