"""Tests for UTF-8 output helpers and the error taxonomy."""

from __future__ import annotations

import pytest

from srtranslit.encoding import decode_input, decode_output, encode_symbols, encode_text
from srtranslit.errors import (
    BufferOverflowError,
    EmptyDigestError,
    TransliterationError,
    TransliterationIOError,
    Utf8DecodeError,
    Utf8ReconstructError,
)


# ---------------------------------------------------------------------------
# encode_symbols
# ---------------------------------------------------------------------------

def test_encode_symbols_appends_utf8_and_returns_written_length() -> None:
    output = bytearray(b"x")

    written = encode_symbols("Љж", output)

    assert written == 4
    assert bytes(output) == "xЉж".encode("utf-8")


def test_encode_symbols_grows_without_capacity() -> None:
    output = bytearray()
    for _ in range(100):
        encode_symbols("ффи", output)
    assert len(output) == 600


def test_encode_symbols_rejects_write_past_capacity() -> None:
    output = bytearray(b"ab")

    with pytest.raises(BufferOverflowError):
        encode_symbols("ж", output, capacity=3)

    assert bytes(output) == b"ab"


def test_encode_symbols_allows_exact_fit() -> None:
    output = bytearray(b"a")
    assert encode_symbols("ж", output, capacity=3) == 2


def test_encode_text_rejects_lone_surrogates() -> None:
    with pytest.raises(Utf8DecodeError) as info:
        encode_text("\ud800")
    assert isinstance(info.value.cause, UnicodeEncodeError)
    assert str(info.value).startswith("UTF-8 error - ")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def test_decode_input_reports_invalid_bytes() -> None:
    with pytest.raises(Utf8DecodeError) as info:
        decode_input(b"\xc3(")
    assert str(info.value).startswith("UTF-8 error - ")
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_decode_output_reports_truncated_sequence() -> None:
    with pytest.raises(Utf8ReconstructError) as info:
        decode_output(bytearray("ж".encode("utf-8")[:1]))
    assert str(info.value).startswith("From UTF-8 error - ")


def test_decode_output_round_trips_valid_buffer() -> None:
    assert decode_output(bytearray("Џеп".encode("utf-8"))) == "Џеп"


# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------

def test_error_messages() -> None:
    assert str(EmptyDigestError()) == "Digest is empty"
    assert str(BufferOverflowError()) == "Buffer Overflow"
    assert str(TransliterationIOError(FileNotFoundError("missing.txt"))) == "IO error - missing.txt"


def test_all_errors_share_a_common_base() -> None:
    for error_type in (
        EmptyDigestError,
        BufferOverflowError,
        TransliterationIOError,
        Utf8DecodeError,
        Utf8ReconstructError,
    ):
        assert issubclass(error_type, TransliterationError)
