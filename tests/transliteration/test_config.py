from __future__ import annotations

import pytest

from srtranslit.config import (
    DEFAULT_INPUT_ENCODING,
    DEFAULT_LOG_LEVEL,
    TransliterationSettings,
)
from srtranslit.engine import Direction


def test_settings_defaults_from_empty_environment() -> None:
    settings = TransliterationSettings.from_env({})

    assert settings.direction is Direction.LATIN_TO_CYRILLIC
    assert settings.input_encoding == DEFAULT_INPUT_ENCODING
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_settings_load_from_env() -> None:
    settings = TransliterationSettings.from_env(
        {
            "SRTRANSLIT_DIRECTION": "cyrillic-to-latin",
            "SRTRANSLIT_INPUT_ENCODING": "CP1251",
            "SRTRANSLIT_LOG_LEVEL": "debug",
        }
    )

    assert settings.direction is Direction.CYRILLIC_TO_LATIN
    assert settings.input_encoding == "cp1251"
    assert settings.log_level == "DEBUG"


def test_settings_accept_auto_encoding() -> None:
    settings = TransliterationSettings.from_env({"SRTRANSLIT_INPUT_ENCODING": "auto"})
    assert settings.input_encoding == "auto"


def test_settings_reject_unknown_direction() -> None:
    with pytest.raises(ValueError, match="SRTRANSLIT_DIRECTION"):
        TransliterationSettings.from_env({"SRTRANSLIT_DIRECTION": "latin-to-greek"})


def test_settings_reject_unknown_codec() -> None:
    with pytest.raises(ValueError, match="SRTRANSLIT_INPUT_ENCODING"):
        TransliterationSettings.from_env({"SRTRANSLIT_INPUT_ENCODING": "not-a-codec"})


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="SRTRANSLIT_LOG_LEVEL"):
        TransliterationSettings.from_env({"SRTRANSLIT_LOG_LEVEL": "LOUD"})


def test_settings_reject_blank_values() -> None:
    with pytest.raises(ValueError, match="SRTRANSLIT_DIRECTION cannot be empty"):
        TransliterationSettings.from_env({"SRTRANSLIT_DIRECTION": "  "})

    with pytest.raises(ValueError, match="SRTRANSLIT_LOG_LEVEL cannot be empty"):
        TransliterationSettings.from_env({"SRTRANSLIT_LOG_LEVEL": ""})
