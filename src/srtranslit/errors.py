"""Error taxonomy surfaced by the transliteration engine and its helpers."""

from __future__ import annotations

from dataclasses import dataclass


class TransliterationError(Exception):
    """Base class for every failure surfaced to ``process`` callers."""


class EmptyDigestError(TransliterationError):
    """Reserved for collaborators that hash their input; the engine never raises it."""

    def __str__(self) -> str:
        return "Digest is empty"


class BufferOverflowError(TransliterationError):
    """An encoded symbol did not fit into an explicitly bounded output buffer."""

    def __str__(self) -> str:
        return "Buffer Overflow"


@dataclass(slots=True)
class TransliterationIOError(TransliterationError):
    """Reading input from a collaborator (file, stream) failed."""

    cause: OSError

    def __str__(self) -> str:
        return f"IO error - {self.cause}"


@dataclass(slots=True)
class Utf8DecodeError(TransliterationError):
    """Input is not valid UTF-8: undecodable bytes or unencodable text."""

    cause: UnicodeError

    def __str__(self) -> str:
        return f"UTF-8 error - {self.cause}"


@dataclass(slots=True)
class Utf8ReconstructError(TransliterationError):
    """The output buffer could not be turned back into text."""

    cause: UnicodeDecodeError

    def __str__(self) -> str:
        return f"From UTF-8 error - {self.cause}"
