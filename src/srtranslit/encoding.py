"""UTF-8 helpers for building transliterated output."""

from __future__ import annotations

from srtranslit.errors import BufferOverflowError, Utf8DecodeError, Utf8ReconstructError


def encode_text(text: str) -> bytes:
    """Encode *text* as UTF-8, rejecting lone surrogates."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise Utf8DecodeError(exc) from exc


def encode_symbols(symbols: str, output: bytearray, *, capacity: int | None = None) -> int:
    """Append the UTF-8 encoding of *symbols* to *output*.

    Returns the number of bytes written.  When *capacity* is given the buffer
    may not grow past it; nothing is appended if the symbols do not fit.
    """
    encoded = encode_text(symbols)
    if capacity is not None and len(output) + len(encoded) > capacity:
        raise BufferOverflowError()
    output.extend(encoded)
    return len(encoded)


def decode_input(raw: bytes) -> str:
    """Decode caller-supplied bytes as strict UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(exc) from exc


def decode_output(buffer: bytes | bytearray) -> str:
    try:
        return bytes(buffer).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8ReconstructError(exc) from exc
