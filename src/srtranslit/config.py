"""Runtime configuration for the transliteration command line."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from srtranslit.engine import Direction


DEFAULT_DIRECTION = Direction.LATIN_TO_CYRILLIC
DEFAULT_INPUT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
AUTO_ENCODING = "auto"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_log_level(raw_value: str) -> str:
    value = raw_value.upper()
    if value not in LOG_LEVELS:
        raise ValueError(f"SRTRANSLIT_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
    return value


def _parse_encoding(raw_value: str) -> str:
    value = raw_value.lower()
    if value == AUTO_ENCODING:
        return value
    try:
        "".encode(value)
    except LookupError as exc:
        raise ValueError(f"SRTRANSLIT_INPUT_ENCODING is not a known codec: {raw_value}") from exc
    return value


@dataclass(frozen=True, slots=True)
class TransliterationSettings:
    """Validated defaults for the ``srtranslit`` command."""

    direction: Direction = DEFAULT_DIRECTION
    input_encoding: str = DEFAULT_INPUT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TransliterationSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        direction_raw = source.get("SRTRANSLIT_DIRECTION", DEFAULT_DIRECTION.value).strip()
        encoding_raw = source.get("SRTRANSLIT_INPUT_ENCODING", DEFAULT_INPUT_ENCODING).strip()
        log_level_raw = source.get("SRTRANSLIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()

        if not direction_raw:
            raise ValueError("SRTRANSLIT_DIRECTION cannot be empty")
        if not encoding_raw:
            raise ValueError("SRTRANSLIT_INPUT_ENCODING cannot be empty")
        if not log_level_raw:
            raise ValueError("SRTRANSLIT_LOG_LEVEL cannot be empty")

        try:
            direction = Direction.from_name(direction_raw)
        except ValueError as exc:
            raise ValueError(f"SRTRANSLIT_DIRECTION is invalid: {exc}") from exc

        return cls(
            direction=direction,
            input_encoding=_parse_encoding(encoding_raw),
            log_level=_parse_log_level(log_level_raw),
        )
