"""
Summary: Scan Artist/Album trees into FUGA-shape albums described by their audio files.
Why: FUGA releases carry no sidecar, so filenames and embedded tags are the only source.
"""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Final

from mupub.platform.filesystem import ScanError, list_subdirectories
from mupub.platform.logging import logger

from ..domain.models import Album, AudioFormat, ScanReport, ValidationResult
from .audio_files import TagReader, scan_audio_files
from .extraction import EmbeddedTagReader

DEFAULT_MUSIC_ROOT: Final[Path] = Path("./music")


def album_directory_exists(album_path: Path) -> bool:
    """Return True when ``album_path`` is an existing directory.

    Raises:
        ScanError: When the path cannot be inspected for reasons other than absence.
    """

    try:
        mode = album_path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise ScanError(album_path, f"Failed to stat album directory ({exc.strerror or exc})") from exc
    return stat.S_ISDIR(mode)


class FileScanner:
    """Discover albums laid out as ``root/Artist/Album/NN - Title.ext``."""

    def __init__(
        self,
        root_dir: Path = DEFAULT_MUSIC_ROOT,
        tag_reader: TagReader | None = EmbeddedTagReader.read,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.tag_reader = tag_reader

    def scan_all(self, root_dir: Path | None = None) -> list[Album]:
        """Scan every ``Artist/Album`` pair under the root."""

        return self.scan_report(root_dir).albums

    def scan_report(self, root_dir: Path | None = None) -> ScanReport:
        """Scan every ``Artist/Album`` pair and return albums with diagnostics."""

        root = Path(root_dir) if root_dir is not None else self.root_dir
        albums: list[Album] = []
        for artist in list_subdirectories(root):
            for album in list_subdirectories(root / artist):
                album_data = self.scan_album(root, artist, album)
                if album_data is not None:
                    albums.append(album_data)

        logger.debug("FileScanner found %d album(s) under %s", len(albums), root)
        return ScanReport(albums=albums)

    def scan_specific_album(self, artist: str, album: str) -> Album | None:
        """Scan one album below the configured root."""

        return self.scan_album(self.root_dir, artist, album)

    def scan_album(self, root_dir: Path, artist: str, album: str) -> Album | None:
        """Scan ``root_dir/artist/album``; ``None`` when the directory is absent."""

        album_path = Path(root_dir) / artist / album
        if not album_directory_exists(album_path):
            return None

        audio = scan_audio_files(album_path, self.tag_reader)
        return Album(
            artist=artist,
            album=album,
            path=album_path,
            tracks=audio.tracks,
            metadata=None,
            warnings=audio.warnings,
        )

    @staticmethod
    def validate_structure(album: Album | None) -> ValidationResult:
        """Check names, track presence and per-track fields, collecting every error."""

        result = ValidationResult()
        if album is None:
            result.errors.append("Album object is required")
            return result

        if not album.artist or not album.artist.strip():
            result.errors.append("Artist name is required")

        if not album.album or not album.album.strip():
            result.errors.append("Album name is required")

        if not album.tracks:
            result.errors.append("Album must contain at least one track")

        for index, track in enumerate(album.tracks, start=1):
            if not track.filename:
                result.errors.append(f"Track {index}: filename is required")
            if not track.title:
                result.errors.append(f"Track {index}: title is required")
            if not isinstance(track.format, AudioFormat):
                result.errors.append(f"Track {index}: unsupported format {track.format}")

        return result


__all__ = ["DEFAULT_MUSIC_ROOT", "FileScanner", "album_directory_exists"]
