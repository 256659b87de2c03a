"""Shared base classes for embedded tag extractors.

Where: src/mupub/features/scanning/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Each container only declares its file class and tag key mapping.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, cast, override

from mutagen import MutagenError

from mupub.platform.logging import logger

from ._tag_utils import parse_track_number, parse_year, safe_get_first
from ...domain.models import EmbeddedTags

__all__ = [
    "AudioTagExtractor",
    "BaseAudioExtractor",
    "TagReadError",
]


class TagReadError(Exception):
    """Embedded tags could not be read from an audio file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Could not read embedded tags from {path.name}: {message}")
        self.path = path


class AudioTagExtractor(abc.ABC):
    """Abstract base class for embedded tag extractors."""

    @abc.abstractmethod
    def extract_tags(self, file_path: Path) -> EmbeddedTags:
        """Extract embedded tags from an audio file."""
        raise NotImplementedError


class BaseAudioExtractor(AudioTagExtractor, abc.ABC):
    """Base class for mutagen-backed extractors."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album_artist": "",
        "album": "",
        "genre": "",
        "track": "",
        "date": "",
        "isrc": "",
    }

    def _open_file(self, file_path: Path) -> Any:
        """Open the audio file with the configured mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            raise TagReadError(file_path, str(exc) or exc.__class__.__name__) from exc

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Return the first string value stored under ``key``."""
        value = tags.get(key)
        if isinstance(value, list):
            first = safe_get_first(data=cast(list[str], value))
            return str(first) if first else None
        if value is None:
            return None
        return str(value) or None

    @override
    def extract_tags(self, file_path: Path) -> EmbeddedTags:
        audio = self._open_file(file_path)
        logger.debug("Opened %s with %s", file_path, type(audio).__name__)

        track_str = self._get_tag_value(audio, self.TAG_MAPPING["track"]) or ""
        date_str = self._get_tag_value(audio, self.TAG_MAPPING["date"]) or ""

        tags = EmbeddedTags(
            title=self._get_tag_value(audio, self.TAG_MAPPING["title"]),
            artist=self._get_tag_value(audio, self.TAG_MAPPING["artist"]),
            album=self._get_tag_value(audio, self.TAG_MAPPING["album"]),
            album_artist=self._get_tag_value(audio, self.TAG_MAPPING["album_artist"]),
            genre=self._get_tag_value(audio, self.TAG_MAPPING["genre"]),
            year=parse_year(date_str),
            track_number=parse_track_number(track_str),
            isrc=self._get_tag_value(audio, self.TAG_MAPPING["isrc"]),
        )
        logger.debug("Extracted tags: %s", tags)
        return tags
