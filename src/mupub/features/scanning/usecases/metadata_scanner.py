"""
Summary: Scan Artist/Album trees into TuneCore-shape albums backed by metadata.json.
Why: Declared album/track metadata must be reconciled with the audio files actually present.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol

from mupub.platform.filesystem import ScanError, list_subdirectories
from mupub.platform.logging import logger

from ..domain.models import (
    Album,
    AlbumMetadata,
    MetadataTrack,
    ReconciledTrack,
    ScanReport,
    Track,
    ValidationResult,
    normalize_title,
)
from .audio_files import TagReader, scan_audio_files
from .file_scanner import DEFAULT_MUSIC_ROOT, album_directory_exists

METADATA_FILENAME: Final[str] = "metadata.json"

UPC_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{12}$", re.ASCII)
ISRC_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Z]{2}[A-Z0-9]{3}\d{7}$", re.ASCII)


class _Titled(Protocol):
    @property
    def title(self) -> str: ...


@dataclass(slots=True, frozen=True)
class MetadataLoad:
    """Outcome of reading ``metadata.json``: the metadata or why it is missing."""

    metadata: AlbumMetadata | None
    warning: str | None = None


def read_metadata_file(album_path: Path) -> MetadataLoad:
    """Read and parse ``album_path/metadata.json`` without logging.

    A missing file (or a directory in its place) yields no warning; unreadable content is reported as a
    warning so a corrupt sidecar behaves like a missing one.

    Raises:
        ScanError: On I/O failures other than absence.
    """

    metadata_path = album_path / METADATA_FILENAME
    try:
        content = metadata_path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
        return MetadataLoad(metadata=None)
    except UnicodeDecodeError as exc:
        return MetadataLoad(None, f"Failed to parse {METADATA_FILENAME} in {album_path}: {exc}")
    except OSError as exc:
        raise ScanError(metadata_path, f"Failed to read metadata ({exc.strerror or exc})") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        return MetadataLoad(None, f"Failed to parse {METADATA_FILENAME} in {album_path}: {exc}")

    if not isinstance(data, dict):
        return MetadataLoad(
            None,
            f"Failed to parse {METADATA_FILENAME} in {album_path}: expected a JSON object",
        )
    return MetadataLoad(metadata=AlbumMetadata.from_mapping(data))


def match_tracks_with_metadata(
    audio_files: Sequence[Track],
    metadata_tracks: Sequence[MetadataTrack],
) -> list[ReconciledTrack]:
    """Merge each audio file with the first metadata track of the same normalized title.

    Audio files without a match are kept with ``isrc=None`` and
    ``explicit=False``. Metadata tracks without an audio file are not
    returned; see :func:`unmatched_metadata_tracks`.

    Raises:
        TypeError: If either argument is not a list or tuple.
    """

    if not isinstance(audio_files, (list, tuple)) or not isinstance(metadata_tracks, (list, tuple)):
        raise TypeError("audio_files and metadata_tracks must be lists")

    matched: list[ReconciledTrack] = []
    for audio_file in audio_files:
        wanted = normalize_title(audio_file.title)
        metadata_track = next(
            (track for track in metadata_tracks if normalize_title(track.title) == wanted),
            None,
        )
        matched.append(
            ReconciledTrack(
                filename=audio_file.filename,
                path=audio_file.path,
                track_number=audio_file.track_number,
                title=metadata_track.title if metadata_track else audio_file.title,
                format=audio_file.format,
                isrc=metadata_track.isrc if metadata_track else None,
                explicit=metadata_track.explicit if metadata_track else False,
                extras=dict(metadata_track.extras) if metadata_track else {},
                tags=audio_file.tags,
            )
        )
    return matched


def unmatched_metadata_tracks(
    audio_files: Sequence[_Titled],
    metadata_tracks: Sequence[MetadataTrack],
) -> list[tuple[int, MetadataTrack]]:
    """Return ``(1-based index, track)`` for metadata tracks no audio file matches."""

    audio_titles = {normalize_title(audio.title) for audio in audio_files}
    return [
        (index, track)
        for index, track in enumerate(metadata_tracks, start=1)
        if normalize_title(track.title) not in audio_titles
    ]


class MetadataScanner:
    """Discover albums laid out as ``root/Artist/Album/{metadata.json, audio}``."""

    def __init__(
        self,
        root_dir: Path = DEFAULT_MUSIC_ROOT,
        tag_reader: TagReader | None = None,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.tag_reader = tag_reader

    def scan_all(self, root_dir: Path | None = None) -> list[Album]:
        """Scan every album under the root, excluding albums without metadata."""

        return self.scan_report(root_dir).albums

    def scan_report(self, root_dir: Path | None = None) -> ScanReport:
        """Scan every album and explain each exclusion in ``warnings``."""

        root = Path(root_dir) if root_dir is not None else self.root_dir
        albums: list[Album] = []
        warnings: list[str] = []
        for artist in list_subdirectories(root):
            for album in list_subdirectories(root / artist):
                album_data = self.scan_album(root, artist, album)
                if album_data is None:
                    continue
                if album_data.metadata is None:
                    warnings.extend(album_data.warnings)
                    warnings.append(f"Skipping {artist}/{album}: no usable {METADATA_FILENAME}")
                    continue
                albums.append(album_data)

        logger.debug("MetadataScanner found %d album(s) under %s", len(albums), root)
        return ScanReport(albums=albums, warnings=warnings)

    def scan_specific_album(self, artist: str, album: str) -> Album | None:
        """Scan one album below the configured root."""

        return self.scan_album(self.root_dir, artist, album)

    def scan_album(self, root_dir: Path, artist: str, album: str) -> Album | None:
        """Scan one album; metadata is optional at this level.

        Returns ``None`` only when the album directory does not exist. Without
        usable metadata the album carries the plain audio tracks and
        ``metadata=None``.
        """

        album_path = Path(root_dir) / artist / album
        if not album_directory_exists(album_path):
            return None

        load = read_metadata_file(album_path)
        audio = scan_audio_files(album_path, self.tag_reader)

        warnings: list[str] = []
        if load.warning:
            warnings.append(load.warning)
        warnings.extend(audio.warnings)

        if load.metadata is None:
            return Album(
                artist=artist,
                album=album,
                path=album_path,
                tracks=audio.tracks,
                metadata=None,
                warnings=warnings,
            )

        return Album(
            artist=artist,
            album=album,
            path=album_path,
            tracks=match_tracks_with_metadata(audio.tracks, load.metadata.tracks),
            metadata=load.metadata,
            warnings=warnings,
        )

    @staticmethod
    def load_metadata(album_path: Path) -> AlbumMetadata | None:
        """Load ``metadata.json``; ``None`` when missing or unparsable."""

        load = read_metadata_file(Path(album_path))
        if load.warning:
            logger.warning(load.warning)
        return load.metadata

    def scan_audio_files(self, album_path: Path) -> list[Track]:
        """Return the sorted audio tracks of ``album_path``."""

        return scan_audio_files(Path(album_path), self.tag_reader).tracks

    @staticmethod
    def match_tracks_with_metadata(
        audio_files: Sequence[Track],
        metadata_tracks: Sequence[MetadataTrack],
    ) -> list[ReconciledTrack]:
        return match_tracks_with_metadata(audio_files, metadata_tracks)

    @staticmethod
    def validate_album_data(album: Album | None) -> ValidationResult:
        """Validate metadata presence, counts and identifier formats.

        Every problem is collected; the only early return is for missing
        metadata, since nothing else can be checked without it. Declared
        tracks that no audio file matches are reported as warnings.
        """

        result = ValidationResult()
        if album is None:
            result.errors.append("Album data is required")
            return result

        metadata = album.metadata
        if metadata is None:
            result.errors.append("Metadata is required")
            return result

        if not metadata.artist.strip():
            result.errors.append("Artist name is required in metadata")

        if not metadata.album.strip():
            result.errors.append("Album title is required in metadata")

        if not metadata.tracks:
            result.errors.append("At least one track is required in metadata")

        audio_file_count = len(album.tracks)
        metadata_track_count = len(metadata.tracks)
        if audio_file_count != metadata_track_count:
            result.errors.append(
                f"Track count mismatch: metadata has {metadata_track_count} tracks, "
                f"found {audio_file_count} audio files"
            )

        if metadata.upc and not UPC_PATTERN.fullmatch(metadata.upc):
            result.errors.append("UPC must be 12 digits")

        for index, track in enumerate(metadata.tracks, start=1):
            if track.isrc and not ISRC_PATTERN.fullmatch(track.isrc):
                result.errors.append(f"Track {index} ({track.title}): Invalid ISRC format")

        for index, track in unmatched_metadata_tracks(album.tracks, metadata.tracks):
            result.warnings.append(
                f"Metadata track {index} ({track.title}) has no matching audio file "
                "and will not be published"
            )

        return result


__all__ = [
    "ISRC_PATTERN",
    "METADATA_FILENAME",
    "MetadataLoad",
    "MetadataScanner",
    "UPC_PATTERN",
    "match_tracks_with_metadata",
    "read_metadata_file",
    "unmatched_metadata_tracks",
]
