"""
Summary: Derive track number, title and format from an audio filename.
Why: Both scanners share one naming convention ("01 - Title.wav", "1-Title.flac").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Final

from .models import AudioFormat

DEFAULT_TRACK_NUMBER: Final[int] = 1

# Leading digits, then any run of whitespace and/or hyphens, then the title.
_LEADING_NUMBER: Final[re.Pattern[str]] = re.compile(r"^([0-9]+)[\s-]+(.+)$")


@dataclass(slots=True, frozen=True)
class ParsedFilename:
    """Fields derivable from a filename alone."""

    track_number: int
    title: str
    format: AudioFormat | None


def is_audio_filename(filename: str) -> bool:
    """Return True when the extension is one of the supported audio formats."""

    return AudioFormat.from_extension(PurePath(filename).suffix) is not None


def parse_audio_filename(filename: str) -> ParsedFilename:
    """Parse ``filename`` into track number, title and format.

    Filenames without a leading number keep the whole stem as the title and
    default to track 1. A zero prefix ("00 - Intro") is raised to track 1.
    """

    path = PurePath(filename)
    stem = path.stem
    audio_format = AudioFormat.from_extension(path.suffix)

    match = _LEADING_NUMBER.match(stem)
    if match:
        title = match.group(2).strip()
        if title:
            return ParsedFilename(
                track_number=max(int(match.group(1)), DEFAULT_TRACK_NUMBER),
                title=title,
                format=audio_format,
            )

    return ParsedFilename(track_number=DEFAULT_TRACK_NUMBER, title=stem, format=audio_format)


__all__ = ["DEFAULT_TRACK_NUMBER", "ParsedFilename", "is_audio_filename", "parse_audio_filename"]
