"""Format-specific embedded tag extractors.

Where: src/mupub/features/scanning/usecases/extraction/format_extractors.py
What: Define concrete extractors for the publishable audio formats.
Why: Separate container quirks from the facade that routes by extension.
"""

from __future__ import annotations

from typing import Any, ClassVar, override

from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.wave import WAVE

from ._base_extractors import BaseAudioExtractor

__all__ = [
    "FlacExtractor",
    "Mp3Extractor",
    "WavExtractor",
]


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album_artist": "albumartist",
        "album": "album",
        "genre": "genre",
        "track": "tracknumber",
        "date": "date",
        "isrc": "isrc",
    }


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files using Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album_artist": "albumartist",
        "album": "album",
        "genre": "genre",
        "track": "tracknumber",
        "date": "date",
        "isrc": "isrc",
    }


class WavExtractor(BaseAudioExtractor):
    """Extractor for WAV files carrying an ID3 chunk."""

    FILE_CLASS: ClassVar[type | None] = WAVE
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album_artist": "TPE2",
        "album": "TALB",
        "genre": "TCON",
        "track": "TRCK",
        "date": "TDRC",
        "isrc": "TSRC",
    }

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        frame = tags.get(key)
        if frame is None:
            return None
        text = getattr(frame, "text", None)
        if isinstance(text, (list, tuple)) and text:
            return str(text[0]) or None
        if text:
            return str(text)
        return None
