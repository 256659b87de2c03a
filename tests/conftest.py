"""Shared pytest fixtures for release tree tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

AlbumFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep config files inside the test's temporary directory."""

    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _ = (repo_root / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import mupub.config.paths as paths
    from mupub.config.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return repo_root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield repo_root
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def music_root(tmp_path: Path) -> Path:
    """Empty library root."""

    root = tmp_path / "music"
    root.mkdir()
    return root


@pytest.fixture
def make_album(music_root: Path) -> AlbumFactory:
    """Create ``music_root/artist/album`` with empty audio files and optional metadata."""

    def _make(
        artist: str,
        album: str,
        files: list[str],
        metadata: dict[str, Any] | str | None = None,
    ) -> Path:
        album_path = music_root / artist / album
        album_path.mkdir(parents=True)
        for name in files:
            (album_path / name).touch()
        if isinstance(metadata, str):
            _ = (album_path / "metadata.json").write_text(metadata, encoding="utf-8")
        elif metadata is not None:
            _ = (album_path / "metadata.json").write_text(json.dumps(metadata), encoding="utf-8")
        return album_path

    return _make


@pytest.fixture
def tunecore_metadata() -> dict[str, Any]:
    """Metadata for a valid two-track TuneCore release."""

    return {
        "artist": "Artist1",
        "album": "Album1",
        "genre": "Pop",
        "release_date": "2024-01-01",
        "upc": "123456789012",
        "explicit": False,
        "tracks": [
            {"title": "Song A", "isrc": "USABC2400001", "explicit": True},
            {"title": "Song B", "isrc": "USABC2400002"},
        ],
    }
