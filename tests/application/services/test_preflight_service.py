"""Tests for the pre-flight service."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from mupub.application.services.preflight_service import PreflightRequest, PreflightService
from mupub.features.scanning import DetectionError, FileScanner, Platform

AlbumFactory = Callable[..., Path]


@pytest.fixture
def service() -> PreflightService:
    """Service whose FUGA scanner skips embedded tag reads on placeholder files."""

    return PreflightService(file_scanner=FileScanner(tag_reader=None))


def test_run_detects_fuga_and_builds_options(
    service: PreflightService, make_album: AlbumFactory
) -> None:
    album_path = make_album("Artist2", "Album2", ["01 - Track One.wav", "02 - Track Two.mp3"])

    report = service.run(PreflightRequest(album_path=album_path))

    assert report.ok
    assert report.detected
    assert report.platform is Platform.FUGA
    assert report.album is not None
    assert report.album.artist == "Artist2"
    assert report.options is not None
    assert [t["title"] for t in report.options["tracks"]] == ["Track One", "Track Two"]


def test_run_detects_tunecore(
    service: PreflightService, make_album: AlbumFactory, tunecore_metadata: dict[str, Any]
) -> None:
    album_path = make_album("Artist1", "Album1", ["01 - Song A.wav", "02 - Song B.wav"], tunecore_metadata)

    report = service.run(PreflightRequest(album_path=album_path))

    assert report.ok
    assert report.platform is Platform.TUNECORE
    assert report.options is not None
    assert report.options["upc"] == "123456789012"
    assert report.options["tracks"][0]["isrc"] == "USABC2400001"


def test_run_keeps_names_of_a_symlinked_album(
    service: PreflightService, make_album: AlbumFactory, tmp_path: Path
) -> None:
    target = make_album("Storage", "Take 7", ["01 - Track One.wav"])
    link = tmp_path / "links" / "Artist2" / "Album2"
    link.parent.mkdir(parents=True)
    link.symlink_to(target, target_is_directory=True)

    report = service.run(PreflightRequest(album_path=link, platform=Platform.FUGA))

    assert report.album_path == link
    assert report.album is not None
    assert (report.album.artist, report.album.album) == ("Artist2", "Album2")


def test_run_reports_validation_errors(
    service: PreflightService, make_album: AlbumFactory, tunecore_metadata: dict[str, Any]
) -> None:
    album_path = make_album("Artist1", "Album1", ["01 - Song A.wav"], tunecore_metadata)

    report = service.run(PreflightRequest(album_path=album_path))

    assert not report.ok
    assert report.options is None
    assert report.errors == ["Track count mismatch: metadata has 2 tracks, found 1 audio files"]
    assert report.warnings == [
        "Metadata track 2 (Song B) has no matching audio file and will not be published"
    ]


def test_run_with_forced_platform(service: PreflightService, make_album: AlbumFactory) -> None:
    album_path = make_album("Artist2", "Album2", ["01 - Track One.wav"])

    report = service.run(PreflightRequest(album_path=album_path, platform=Platform.TUNECORE))

    assert not report.detected
    assert report.platform is Platform.TUNECORE
    assert report.errors == ["Metadata is required"]


def test_run_missing_directory_with_platform(service: PreflightService, tmp_path: Path) -> None:
    missing = tmp_path / "Artist" / "Missing"

    report = service.run(PreflightRequest(album_path=missing, platform=Platform.FUGA))

    assert report.album is None
    assert report.errors == [f"Album directory not found: {missing}"]


def test_run_missing_directory_without_platform(service: PreflightService, tmp_path: Path) -> None:
    with pytest.raises(DetectionError):
        _ = service.run(PreflightRequest(album_path=tmp_path / "Artist" / "Missing"))


def test_survey_detects_each_album(
    service: PreflightService,
    music_root: Path,
    make_album: AlbumFactory,
    tunecore_metadata: dict[str, Any],
) -> None:
    _ = make_album("Artist1", "Album1", ["01 - Song A.wav", "02 - Song B.wav"], tunecore_metadata)
    _ = make_album("Artist2", "Album2", ["01 - Track One.wav"])
    _ = make_album("Artist2", "Empty", [])

    report = service.survey(music_root)

    summary = [(e.album.artist, e.album.album, e.platform, e.validation.valid) for e in report.entries]
    assert summary == [
        ("Artist1", "Album1", Platform.TUNECORE, True),
        ("Artist2", "Album2", Platform.FUGA, True),
        ("Artist2", "Empty", Platform.FUGA, False),
    ]


def test_survey_with_tunecore_skips_albums_without_metadata(
    service: PreflightService,
    music_root: Path,
    make_album: AlbumFactory,
    tunecore_metadata: dict[str, Any],
) -> None:
    _ = make_album("Artist1", "Album1", ["01 - Song A.wav", "02 - Song B.wav"], tunecore_metadata)
    _ = make_album("Artist2", "Album2", ["01 - Track One.wav"])

    report = service.survey(music_root, Platform.TUNECORE)

    assert [e.album.artist for e in report.entries] == ["Artist1"]
    assert report.warnings == ["Skipping Artist2/Album2: no usable metadata.json"]


def test_survey_with_fuga_scans_every_album(
    service: PreflightService,
    music_root: Path,
    make_album: AlbumFactory,
    tunecore_metadata: dict[str, Any],
) -> None:
    _ = make_album("Artist1", "Album1", ["01 - Song A.wav", "02 - Song B.wav"], tunecore_metadata)
    _ = make_album("Artist2", "Album2", ["01 - Track One.wav"])

    report = service.survey(music_root, Platform.FUGA)

    assert [e.platform for e in report.entries] == [Platform.FUGA, Platform.FUGA]
    assert all(e.validation.valid for e in report.entries)


def test_survey_missing_root_is_empty(service: PreflightService, tmp_path: Path) -> None:
    report = service.survey(tmp_path / "absent")

    assert report.entries == []
    assert report.warnings == []
