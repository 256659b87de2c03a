"""
Summary: Flatten a validated album into the PublishOptions document for platform clients.
Why: Upload clients consume one normalized shape regardless of where metadata came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, assert_never

from ..domain.models import Album, Platform, ReconciledTrack, Track
from .validation import validate_album

PublishOptions = dict[str, Any]


@dataclass(slots=True)
class PublishPreparation:
    """Options when validation passed, otherwise the collected errors."""

    platform: Platform
    options: PublishOptions | None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.options is not None


def _track_entry(track: Track | ReconciledTrack) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "file": str(track.path),
        "filename": track.filename,
        "title": track.title,
        "track_number": track.track_number,
        "format": track.format.value,
    }
    if isinstance(track, ReconciledTrack):
        # Declared fields may add keys but never replace filesystem ones.
        for key, value in track.extras.items():
            entry.setdefault(key, value)
        entry["isrc"] = track.isrc
        entry["explicit"] = track.explicit
    elif track.tags is not None:
        for key, value in track.tags.to_dict().items():
            entry.setdefault(key, value)
    return entry


def build_publish_options(album: Album, platform: Platform) -> PublishOptions:
    """Build the PublishOptions document without validating."""

    tracks = [_track_entry(track) for track in album.tracks]
    match platform:
        case Platform.TUNECORE:
            metadata = album.metadata.to_dict() if album.metadata is not None else {}
            return {**metadata, "tracks": tracks}
        case Platform.FUGA:
            return {"tracks": tracks}
        case _:
            assert_never(platform)


def prepare_publish_options(album: Album, platform: Platform) -> PublishPreparation:
    """Validate ``album`` for ``platform`` and build options only when it is valid."""

    result = validate_album(album, platform)
    if not result.valid:
        return PublishPreparation(
            platform=platform,
            options=None,
            errors=result.errors,
            warnings=result.warnings,
        )
    return PublishPreparation(
        platform=platform,
        options=build_publish_options(album, platform),
        warnings=result.warnings,
    )


__all__ = [
    "PublishOptions",
    "PublishPreparation",
    "build_publish_options",
    "prepare_publish_options",
]
