"""
Summary: List, parse and order the audio files of one album directory.
Why: FileScanner and MetadataScanner share one extension filter, parser and sort.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from mupub.platform.filesystem import list_files
from mupub.platform.logging import logger

from ..domain.filename_parser import is_audio_filename, parse_audio_filename
from ..domain.models import EmbeddedTags, Track
from .extraction import TagReadError

TagReader = Callable[[Path], EmbeddedTags]


@dataclass(slots=True)
class AudioFileScan:
    """Tracks found in a directory plus non-fatal diagnostics."""

    tracks: list[Track] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def scan_audio_files(album_path: Path, tag_reader: TagReader | None = None) -> AudioFileScan:
    """Return the audio tracks of ``album_path`` sorted by track number.

    Ties keep name order because the listing is name-sorted and ``sorted`` is
    stable. When ``tag_reader`` is given, unreadable tags produce a warning
    and a track with ``tags=None``.
    """

    result = AudioFileScan()
    for filename in list_files(album_path):
        if not is_audio_filename(filename):
            continue

        parsed = parse_audio_filename(filename)
        assert parsed.format is not None
        file_path = album_path / filename

        tags: EmbeddedTags | None = None
        if tag_reader is not None:
            try:
                tags = tag_reader(file_path)
            except TagReadError as exc:
                logger.debug("%s", exc)
                result.warnings.append(str(exc))

        result.tracks.append(
            Track(
                filename=filename,
                path=file_path,
                track_number=parsed.track_number,
                title=parsed.title,
                format=parsed.format,
                tags=tags,
            )
        )

    result.tracks.sort(key=lambda track: track.track_number)
    return result


__all__ = ["AudioFileScan", "TagReader", "scan_audio_files"]
