"""
Summary: Generate a metadata.json skeleton from the audio files of an album.
Why: Converting a FUGA-shape directory to TuneCore shape starts from the tracks already on disk.
"""

from __future__ import annotations

import datetime as dt
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mupub.config.file_ops import write_text_file
from mupub.platform.logging import logger

from ..domain.errors import MetadataExistsError
from ..domain.models import Track
from .metadata_scanner import METADATA_FILENAME

DEFAULT_GENRE = "Other"


def create_sample_metadata(
    artist: str,
    album: str,
    tracks: Sequence[Track],
    today: dt.date | None = None,
) -> dict[str, Any]:
    """Return a metadata mapping with placeholders for identifiers."""

    release_date = (today or dt.date.today()).isoformat()
    return {
        "artist": artist,
        "album": album,
        "genre": DEFAULT_GENRE,
        "release_date": release_date,
        "upc": None,
        "explicit": False,
        "tracks": [
            {"title": track.title, "isrc": None, "explicit": False}
            for track in tracks
        ],
    }


def write_sample_metadata(
    album_path: Path,
    artist: str,
    album: str,
    tracks: Sequence[Track],
    *,
    force: bool = False,
    today: dt.date | None = None,
) -> Path:
    """Write ``metadata.json`` into ``album_path`` and return its path.

    Raises:
        MetadataExistsError: If the file exists and ``force`` is False.
    """

    target = Path(album_path) / METADATA_FILENAME
    if target.exists() and not force:
        raise MetadataExistsError(target)

    payload = create_sample_metadata(artist, album, tracks, today=today)
    write_text_file(target, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
    logger.info("Wrote %s with %d track(s)", target, len(tracks))
    return target


__all__ = ["DEFAULT_GENRE", "create_sample_metadata", "write_sample_metadata"]
