"""Tests for PublishOptions building."""

from pathlib import Path
from typing import Any

from mupub.features.scanning import (
    Album,
    AlbumMetadata,
    AudioFormat,
    Platform,
    Track,
    build_publish_options,
    prepare_publish_options,
)
from mupub.features.scanning.domain import EmbeddedTags
from mupub.features.scanning.usecases import match_tracks_with_metadata

ALBUM_PATH = Path("/music/Artist1/Album1")


def _track(number: int, title: str, tags: EmbeddedTags | None = None) -> Track:
    filename = f"{number:02d} - {title}.wav"
    return Track(
        filename=filename,
        path=ALBUM_PATH / filename,
        track_number=number,
        title=title,
        format=AudioFormat.WAV,
        tags=tags,
    )


def test_tunecore_options_merge_metadata_and_tracks(tunecore_metadata: dict[str, Any]) -> None:
    tunecore_metadata["label"] = "Indie"
    tunecore_metadata["tracks"][0]["title"] = "song a"
    tunecore_metadata["tracks"][0]["filename"] = "declared.wav"
    tunecore_metadata["tracks"][0]["composer"] = "Someone"
    metadata = AlbumMetadata.from_mapping(tunecore_metadata)
    tracks = match_tracks_with_metadata([_track(1, "Song A"), _track(2, "Song B")], metadata.tracks)
    album = Album("Artist1", "Album1", ALBUM_PATH, tracks, metadata=metadata)

    options = build_publish_options(album, Platform.TUNECORE)

    assert options["artist"] == "Artist1"
    assert options["upc"] == "123456789012"
    assert options["label"] == "Indie"
    first = options["tracks"][0]
    assert first == {
        "file": str(ALBUM_PATH / "01 - Song A.wav"),
        "filename": "01 - Song A.wav",
        "title": "song a",
        "track_number": 1,
        "format": "wav",
        "composer": "Someone",
        "isrc": "USABC2400001",
        "explicit": True,
    }
    assert options["tracks"][1]["isrc"] == "USABC2400002"


def test_fuga_options_add_embedded_tags_without_overriding() -> None:
    tags = EmbeddedTags(title="Tag Title", artist="Artist2", album="Album2", year=2024)
    album = Album("Artist2", "Album2", ALBUM_PATH, [_track(1, "Track One", tags), _track(2, "Track Two")])

    options = build_publish_options(album, Platform.FUGA)

    assert set(options) == {"tracks"}
    first, second = options["tracks"]
    assert first["title"] == "Track One"
    assert first["artist"] == "Artist2"
    assert first["year"] == 2024
    assert "artist" not in second


def test_prepare_returns_errors_without_options() -> None:
    album = Album("Artist", "Album", ALBUM_PATH, [])

    preparation = prepare_publish_options(album, Platform.FUGA)

    assert not preparation.ok
    assert preparation.options is None
    assert preparation.errors == ["Album must contain at least one track"]


def test_prepare_keeps_warnings_on_success() -> None:
    album = Album("Artist", "Album", ALBUM_PATH, [_track(1, "Song")], warnings=["unreadable tags"])

    preparation = prepare_publish_options(album, Platform.FUGA)

    assert preparation.ok
    assert preparation.platform is Platform.FUGA
    assert preparation.warnings == ["unreadable tags"]
    assert preparation.options == build_publish_options(album, Platform.FUGA)
