"""
Summary: Describe what each publishing platform needs from a release and its operator.
Why: Drive the ``platforms``/``detect`` output and the credential pre-check from one table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, assert_never

from .models import AudioFormat, Platform


@dataclass(slots=True, frozen=True)
class PlatformRequirements:
    """Static requirements for one platform."""

    platform: Platform
    config_fields: tuple[str, ...]
    metadata_source: str
    supported_formats: tuple[AudioFormat, ...]
    description: str


_ALL_FORMATS: Final[tuple[AudioFormat, ...]] = (AudioFormat.MP3, AudioFormat.WAV, AudioFormat.FLAC)


def supported_platforms() -> list[Platform]:
    """Return every platform in declaration order."""

    return list(Platform)


def platform_requirements(platform: Platform) -> PlatformRequirements:
    """Return the requirements record for ``platform``."""

    match platform:
        case Platform.FUGA:
            return PlatformRequirements(
                platform=platform,
                config_fields=("fuga_api_key", "fuga_base_url"),
                metadata_source="embedded",
                supported_formats=_ALL_FORMATS,
                description="Uses embedded metadata from audio files",
            )
        case Platform.TUNECORE:
            return PlatformRequirements(
                platform=platform,
                config_fields=("tunecore_partner_id", "tunecore_api_key", "tunecore_base_url"),
                metadata_source="structured",
                supported_formats=_ALL_FORMATS,
                description=(
                    "Requires metadata.json file with structured album/track information"
                ),
            )
        case _:
            assert_never(platform)


def missing_credentials(platform: Platform, credentials: Mapping[str, str | None]) -> list[str]:
    """Return the config fields ``platform`` needs that are unset in ``credentials``."""

    required = platform_requirements(platform).config_fields
    return [name for name in required if not (credentials.get(name) or "").strip()]


__all__ = [
    "PlatformRequirements",
    "missing_credentials",
    "platform_requirements",
    "supported_platforms",
]
