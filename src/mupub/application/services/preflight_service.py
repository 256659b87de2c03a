"""src/mupub/application/services/preflight_service.py
What: Run detect, scan, validate and build for one album directory.
Why: Give every CLI surface (validate, publish, publish --dry-run) the same pre-flight path.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import assert_never, final

from mupub.features.scanning import (
    Album,
    FileScanner,
    MetadataScanner,
    Platform,
    ValidationResult,
    detect_platform,
    prepare_publish_options,
    validate_album,
)
from mupub.features.scanning.usecases import PublishOptions
from mupub.platform.filesystem import list_subdirectories
from mupub.platform.logging import logger


@dataclass(slots=True)
class PreflightRequest:
    """Inputs for a pre-flight run."""

    album_path: Path
    platform: Platform | None = None


@dataclass(slots=True)
class PreflightReport:
    """Everything a caller needs to decide whether to hand off to a platform client."""

    album_path: Path
    platform: Platform
    detected: bool
    album: Album | None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    options: PublishOptions | None = None

    @property
    def ok(self) -> bool:
        return not self.errors and self.options is not None


@dataclass(slots=True, frozen=True)
class SurveyEntry:
    """One album found under a library root with its validation outcome."""

    album: Album
    platform: Platform
    validation: ValidationResult


@dataclass(slots=True)
class SurveyReport:
    """Albums found under a library root plus skipped-album diagnostics."""

    root: Path
    entries: list[SurveyEntry] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@final
class PreflightService:
    """Compose the scanning feature into one call per album directory."""

    def __init__(
        self,
        *,
        file_scanner: FileScanner | None = None,
        metadata_scanner: MetadataScanner | None = None,
    ) -> None:
        self._file_scanner = file_scanner or FileScanner()
        self._metadata_scanner = metadata_scanner or MetadataScanner()

    def run(self, request: PreflightRequest) -> PreflightReport:
        """Validate ``request.album_path`` and build its PublishOptions.

        The album directory's name is the album, its parent's name is the
        artist. Detection and scan I/O faults propagate; validation problems
        end up in ``errors``.
        """

        album_path = Path(os.path.abspath(Path(request.album_path).expanduser()))
        detected = request.platform is None
        platform = request.platform or detect_platform(album_path)
        logger.debug(
            "Pre-flight for %s on %s (%s)",
            album_path,
            platform.value,
            "detected" if detected else "requested",
        )

        album = self.scan(album_path, platform)
        if album is None:
            return PreflightReport(
                album_path=album_path,
                platform=platform,
                detected=detected,
                album=None,
                errors=[f"Album directory not found: {album_path}"],
            )

        preparation = prepare_publish_options(album, platform)
        return PreflightReport(
            album_path=album_path,
            platform=platform,
            detected=detected,
            album=album,
            errors=preparation.errors,
            warnings=preparation.warnings,
            options=preparation.options,
        )

    def scan(self, album_path: Path, platform: Platform) -> Album | None:
        """Scan a single album directory with the scanner for ``platform``."""

        root = album_path.parent.parent
        artist = album_path.parent.name
        album = album_path.name

        match platform:
            case Platform.FUGA:
                return self._file_scanner.scan_album(root, artist, album)
            case Platform.TUNECORE:
                return self._metadata_scanner.scan_album(root, artist, album)
            case _:
                assert_never(platform)

    def survey(self, root: Path, platform: Platform | None = None) -> SurveyReport:
        """Scan and validate every ``Artist/Album`` directory under ``root``.

        With a fixed ``platform`` the matching scanner runs over the whole tree
        (so TuneCore excludes albums lacking metadata). Without one, each album
        directory is detected on its own.
        """

        root = Path(root).expanduser().resolve()
        report = SurveyReport(root=root)

        match platform:
            case Platform.FUGA:
                scan = self._file_scanner.scan_report(root)
            case Platform.TUNECORE:
                scan = self._metadata_scanner.scan_report(root)
            case None:
                for artist in list_subdirectories(root):
                    for album_name in list_subdirectories(root / artist):
                        album_path = root / artist / album_name
                        detected = detect_platform(album_path)
                        album = self.scan(album_path, detected)
                        if album is not None:
                            report.entries.append(
                                SurveyEntry(album, detected, validate_album(album, detected))
                            )
                return report
            case _:
                assert_never(platform)

        report.warnings.extend(scan.warnings)
        for album in scan.albums:
            report.entries.append(SurveyEntry(album, platform, validate_album(album, platform)))
        return report


__all__ = [
    "PreflightReport",
    "PreflightRequest",
    "PreflightService",
    "SurveyEntry",
    "SurveyReport",
]
