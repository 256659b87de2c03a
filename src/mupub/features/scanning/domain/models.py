"""Value objects produced by release directory scans.

Where: src/mupub/features/scanning/domain/models.py
What: Track, metadata and album records shared by scanners, validators and builders.
Why: Keep one canonical representation for both FUGA and TuneCore shaped releases.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Final

_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"\s+")

ALBUM_METADATA_FIELDS: Final[tuple[str, ...]] = (
    "artist",
    "album",
    "genre",
    "release_date",
    "upc",
    "explicit",
    "tracks",
)
METADATA_TRACK_FIELDS: Final[tuple[str, ...]] = ("title", "isrc", "explicit")


class AudioFormat(str, Enum):
    """Audio containers accepted for publishing."""

    WAV = "wav"
    FLAC = "flac"
    MP3 = "mp3"

    @staticmethod
    def from_extension(extension: str) -> "AudioFormat | None":
        """Map an extension (with or without the dot, any case) to a format."""

        normalized = extension.lower().lstrip(".")
        for audio_format in AudioFormat:
            if audio_format.value == normalized:
                return audio_format
        return None


class Platform(str, Enum):
    """Publishing platforms a release directory can target."""

    FUGA = "fuga"
    TUNECORE = "tunecore"

    @staticmethod
    def from_user_input(value: str) -> "Platform":
        """Translate raw CLI or config input into the matching platform."""

        normalized = value.strip().lower()
        for platform in Platform:
            if platform.value == normalized:
                return platform
        valid = ", ".join(p.value for p in Platform)
        msg = f"Unsupported platform '{value}'. Valid options: {valid}"
        raise ValueError(msg)


def normalize_title(title: str | None) -> str:
    """Lowercase, collapse whitespace runs and trim; used for matching only."""

    if not title:
        return ""
    return _WHITESPACE_RUN.sub(" ", title.lower()).strip()


@dataclass(slots=True, frozen=True)
class EmbeddedTags:
    """Tags read from the audio container itself."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    album_artist: str | None = None
    genre: str | None = None
    year: int | None = None
    track_number: int | None = None
    isrc: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return only the tags that carry a value."""

        values = {
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "album_artist": self.album_artist,
            "genre": self.genre,
            "year": self.year,
            "track_number": self.track_number,
            "isrc": self.isrc,
        }
        return {key: value for key, value in values.items() if value not in (None, "")}


@dataclass(slots=True, frozen=True)
class Track:
    """Audio file discovered on disk, described by its filename."""

    filename: str
    path: Path
    track_number: int
    title: str
    format: AudioFormat
    tags: EmbeddedTags | None = None


@dataclass(slots=True, frozen=True)
class MetadataTrack:
    """Track entry declared in ``metadata.json``."""

    title: str
    isrc: str | None = None
    explicit: bool = False
    extras: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "MetadataTrack":
        raw_title = data.get("title")
        raw_isrc = data.get("isrc")
        return MetadataTrack(
            title=str(raw_title) if raw_title is not None else "",
            isrc=str(raw_isrc) if raw_isrc not in (None, "") else None,
            explicit=bool(data.get("explicit", False)),
            extras={k: v for k, v in data.items() if k not in METADATA_TRACK_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extras,
            "title": self.title,
            "isrc": self.isrc,
            "explicit": self.explicit,
        }


@dataclass(slots=True, frozen=True)
class ReconciledTrack:
    """Audio file merged with its declared metadata track.

    Filesystem fields come from the audio file; ``isrc``, ``explicit`` and
    ``extras`` come from the matching metadata entry, if any.
    """

    filename: str
    path: Path
    track_number: int
    title: str
    format: AudioFormat
    isrc: str | None = None
    explicit: bool = False
    extras: dict[str, Any] = field(default_factory=dict)
    tags: EmbeddedTags | None = None


@dataclass(slots=True, frozen=True)
class AlbumMetadata:
    """Structured album metadata loaded from ``metadata.json``."""

    artist: str
    album: str
    genre: str | None = None
    release_date: str | None = None
    upc: str | None = None
    explicit: bool = False
    tracks: list[MetadataTrack] = field(default_factory=list)
    extras: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "AlbumMetadata":
        """Build metadata from a parsed JSON object.

        Missing or non-string names become empty strings so validation can
        report them instead of the parser raising. A numeric UPC is kept as
        its decimal string.
        """

        raw_tracks = data.get("tracks")
        tracks = (
            [MetadataTrack.from_mapping(t) for t in raw_tracks if isinstance(t, Mapping)]
            if isinstance(raw_tracks, list)
            else []
        )
        raw_upc = data.get("upc")
        raw_genre = data.get("genre")
        raw_date = data.get("release_date")
        return AlbumMetadata(
            artist=_as_text(data.get("artist")),
            album=_as_text(data.get("album")),
            genre=str(raw_genre) if raw_genre is not None else None,
            release_date=str(raw_date) if raw_date is not None else None,
            upc=str(raw_upc) if raw_upc not in (None, "") else None,
            explicit=bool(data.get("explicit", False)),
            tracks=tracks,
            extras={k: v for k, v in data.items() if k not in ALBUM_METADATA_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extras,
            "artist": self.artist,
            "album": self.album,
            "genre": self.genre,
            "release_date": self.release_date,
            "upc": self.upc,
            "explicit": self.explicit,
            "tracks": [track.to_dict() for track in self.tracks],
        }


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(slots=True, frozen=True)
class Album:
    """Unified scan result for one ``Artist/Album`` directory."""

    artist: str
    album: str
    path: Path
    tracks: list[Track] | list[ReconciledTrack]
    metadata: AlbumMetadata | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def total_tracks(self) -> int:
        return len(self.tracks)


@dataclass(slots=True)
class ValidationResult:
    """Accumulated validation problems; never raised."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


@dataclass(slots=True, frozen=True)
class ScanReport:
    """Albums found under a root plus diagnostics for skipped ones."""

    albums: list[Album]
    warnings: list[str] = field(default_factory=list)


__all__ = [
    "ALBUM_METADATA_FIELDS",
    "Album",
    "AlbumMetadata",
    "AudioFormat",
    "EmbeddedTags",
    "MetadataTrack",
    "Platform",
    "ReconciledTrack",
    "ScanReport",
    "Track",
    "ValidationResult",
    "normalize_title",
]
