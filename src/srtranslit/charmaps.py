"""Static Serbian Latin/Cyrillic correspondence tables.

The ``*_CLEAN`` tuples hold the canonical alphabets and are exact inverses of
each other, position by position.  The ``*_DIRTY`` tuples list denormalized
spellings accepted as input (Unicode digraph ligatures, typographic
ligatures, decomposed diacritics, lookalike letters) and the canonical text
each one is rewritten to.
"""

from __future__ import annotations

from dataclasses import dataclass

# Canonical alphabets in azbuka order, uppercase then lowercase.
LATIN_CLEAN: tuple[str, ...] = (
    "A", "B", "V", "G", "D", "Đ", "E", "Ž", "Z", "I", "J", "K", "L", "Lj", "M",
    "N", "Nj", "O", "P", "R", "S", "T", "Ć", "U", "F", "H", "C", "Č", "Dž", "Š",
    "a", "b", "v", "g", "d", "đ", "e", "ž", "z", "i", "j", "k", "l", "lj", "m",
    "n", "nj", "o", "p", "r", "s", "t", "ć", "u", "f", "h", "c", "č", "dž", "š",
)

CYRILLIC_CLEAN: tuple[str, ...] = (
    "А", "Б", "В", "Г", "Д", "Ђ", "Е", "Ж", "З", "И", "Ј", "К", "Л", "Љ", "М",
    "Н", "Њ", "О", "П", "Р", "С", "Т", "Ћ", "У", "Ф", "Х", "Ц", "Ч", "Џ", "Ш",
    "а", "б", "в", "г", "д", "ђ", "е", "ж", "з", "и", "ј", "к", "л", "љ", "м",
    "н", "њ", "о", "п", "р", "с", "т", "ћ", "у", "ф", "х", "ц", "ч", "џ", "ш",
)

# Denormalized Latin input -> canonical Cyrillic output.
_LATIN_DENORMALIZED: tuple[tuple[str, str], ...] = (
    # All-caps digraphs
    ("LJ", "Љ"), ("NJ", "Њ"), ("DŽ", "Џ"),
    # "dj" written for đ, and the Icelandic eth used as a Đ lookalike
    ("DJ", "Ђ"), ("Dj", "Ђ"), ("dj", "ђ"),
    ("Ð", "Ђ"), ("ð", "ђ"),
    # Unicode digraph code points: Ǆ ǅ ǆ, Ǉ ǈ ǉ, Ǌ ǋ ǌ
    ("Ǆ", "Џ"), ("ǅ", "Џ"), ("ǆ", "џ"),
    ("Ǉ", "Љ"), ("ǈ", "Љ"), ("ǉ", "љ"),
    ("Ǌ", "Њ"), ("ǋ", "Њ"), ("ǌ", "њ"),
    # Combining caron (U+030C) and acute (U+0301) after the base letter
    ("C\u030c", "Ч"), ("c\u030c", "ч"),
    ("C\u0301", "Ћ"), ("c\u0301", "ћ"),
    ("S\u030c", "Ш"), ("s\u030c", "ш"),
    ("Z\u030c", "Ж"), ("z\u030c", "ж"),
    ("DZ\u030c", "Џ"), ("Dz\u030c", "Џ"), ("dz\u030c", "џ"),
    # Ligatures: Æ æ Œ œ Ĳ ĳ
    ("Æ", "АЕ"), ("æ", "ае"),
    ("Œ", "ОЕ"), ("œ", "ое"),
    ("Ĳ", "ИЈ"), ("ĳ", "иј"),
    # Typographic ligatures: ﬀ ﬁ ﬂ ﬃ ﬄ ﬅ ﬆ
    ("ﬀ", "фф"),
    ("ﬁ", "фи"),
    ("ﬂ", "фл"),
    ("ﬃ", "ффи"),
    ("ﬄ", "ффл"),
    ("ﬅ", "ст"),
    ("ﬆ", "ст"),
)

# Denormalized Cyrillic input -> canonical Latin output.
# Grave-accented vowels mark stress in Cyrillic text (сѝ, прѐ).
_CYRILLIC_DENORMALIZED: tuple[tuple[str, str], ...] = (
    ("Ѐ", "E"), ("ѐ", "e"),
    ("Ѝ", "I"), ("ѝ", "i"),
)

LATIN_DIRTY: tuple[str, ...] = LATIN_CLEAN + tuple(source for source, _ in _LATIN_DENORMALIZED)
CYRILLIC_DIRTY: tuple[str, ...] = CYRILLIC_CLEAN + tuple(target for _, target in _LATIN_DENORMALIZED)

CYRILLIC_DIRTY_SOURCE: tuple[str, ...] = CYRILLIC_CLEAN + tuple(
    source for source, _ in _CYRILLIC_DENORMALIZED
)
LATIN_DIRTY_TARGET: tuple[str, ...] = LATIN_CLEAN + tuple(target for _, target in _CYRILLIC_DENORMALIZED)


@dataclass(frozen=True, slots=True)
class DigraphException:
    """Latin spellings that should stay two Cyrillic letters in marked words.

    ``latin[i]`` is rendered as ``cyrillic[i]`` whenever the lowercased word
    contains any of ``markers``.
    """

    latin: tuple[str, ...]
    cyrillic: tuple[str, ...]
    markers: tuple[str, ...]


DIGRAPH_EXCEPTIONS: tuple[DigraphException, ...] = (
    # d + j across a prefix boundary (od-jek, pod-jednako), not đ
    DigraphException(
        latin=("dj", "Dj", "DJ"),
        cyrillic=("дј", "Дј", "ДЈ"),
        markers=(
            "adjektiv",
            "adjunkt",
            "bludje",
            "nadjača",
            "nadjaha",
            "nadjev",
            "odjav",
            "odjek",
            "odjel",
            "odjur",
            "odjedn",
            "podjar",
            "podjednak",
            "podjel",
            "predjel",
        ),
    ),
    # d + ž across a prefix boundary (nad-živeti, od-žvakati), not џ
    DigraphException(
        latin=("dž", "Dž", "DŽ", "dz\u030c", "Dz\u030c", "DZ\u030c"),
        cyrillic=("дж", "Дж", "ДЖ", "дж", "Дж", "ДЖ"),
        markers=(
            "nadživ",
            "nadžnje",
            "odžali",
            "odživ",
            "odžva",
            "podžanr",
            "podžupan",
        ),
    ),
    # n + j in loanwords (in-jekcija, kon-jugacija), not њ
    DigraphException(
        latin=("nj", "Nj", "NJ"),
        cyrillic=("нј", "Нј", "НЈ"),
        markers=(
            "injek",
            "injunkt",
            "kenjon",
            "konjug",
            "konjunk",
            "tanjug",
            "vanjezič",
        ),
    ),
)
