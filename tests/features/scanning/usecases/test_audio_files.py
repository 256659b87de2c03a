"""Tests for album audio file listing."""

from pathlib import Path

from mupub.features.scanning.domain import AudioFormat, EmbeddedTags
from mupub.features.scanning.usecases import scan_audio_files
from mupub.features.scanning.usecases.extraction import TagReadError


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).touch()


def test_filters_non_audio_and_sorts_by_track_number(tmp_path: Path) -> None:
    _touch(tmp_path, "02 - B.wav", "01 - A.flac", "Intro.mp3", "notes.txt", "cover.jpg")
    (tmp_path / "bonus.wav").mkdir()

    scan = scan_audio_files(tmp_path)

    assert [track.filename for track in scan.tracks] == [
        "01 - A.flac",
        "Intro.mp3",
        "02 - B.wav",
    ]
    assert [track.track_number for track in scan.tracks] == [1, 1, 2]
    assert scan.tracks[0].format is AudioFormat.FLAC
    assert scan.tracks[0].path == tmp_path / "01 - A.flac"
    assert all(track.tags is None for track in scan.tracks)
    assert scan.warnings == []


def test_missing_directory_yields_no_tracks(tmp_path: Path) -> None:
    scan = scan_audio_files(tmp_path / "absent")

    assert scan.tracks == []


def test_tag_reader_results_are_attached(tmp_path: Path) -> None:
    _touch(tmp_path, "01 - A.wav")
    tags = EmbeddedTags(title="A", artist="Someone")

    scan = scan_audio_files(tmp_path, tag_reader=lambda _path: tags)

    assert scan.tracks[0].tags == tags


def test_unreadable_tags_become_warnings(tmp_path: Path) -> None:
    _touch(tmp_path, "01 - A.wav")

    def _broken_reader(path: Path) -> EmbeddedTags:
        raise TagReadError(path, "no RIFF header")

    scan = scan_audio_files(tmp_path, tag_reader=_broken_reader)

    assert len(scan.tracks) == 1
    assert scan.tracks[0].tags is None
    assert scan.warnings == ["Could not read embedded tags from 01 - A.wav: no RIFF header"]
