"""
Summary: Run the structural checks that belong to an album's platform.
Why: One dispatch point keeps the FUGA/TuneCore rules exhaustive as platforms are added.
"""

from __future__ import annotations

from typing import assert_never

from ..domain.models import Album, Platform, ValidationResult
from .file_scanner import FileScanner
from .metadata_scanner import MetadataScanner


def validate_album(album: Album, platform: Platform) -> ValidationResult:
    """Validate ``album`` against ``platform`` rules, carrying scan warnings along."""

    match platform:
        case Platform.FUGA:
            result = FileScanner.validate_structure(album)
        case Platform.TUNECORE:
            result = MetadataScanner.validate_album_data(album)
        case _:
            assert_never(platform)

    result.warnings[:0] = album.warnings
    return result


__all__ = ["validate_album"]
