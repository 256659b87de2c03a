"""
Summary: Domain records, filename rules and platform catalogue for release scanning.
Why: Keep pure, I/O-free pieces importable without pulling in mutagen.
"""

from .errors import DetectionError, MetadataExistsError, ScanError
from .filename_parser import ParsedFilename, is_audio_filename, parse_audio_filename
from .models import (
    Album,
    AlbumMetadata,
    AudioFormat,
    EmbeddedTags,
    MetadataTrack,
    Platform,
    ReconciledTrack,
    ScanReport,
    Track,
    ValidationResult,
    normalize_title,
)
from .platforms import (
    PlatformRequirements,
    missing_credentials,
    platform_requirements,
    supported_platforms,
)

__all__ = [
    "Album",
    "AlbumMetadata",
    "AudioFormat",
    "DetectionError",
    "EmbeddedTags",
    "MetadataExistsError",
    "MetadataTrack",
    "ParsedFilename",
    "Platform",
    "PlatformRequirements",
    "ReconciledTrack",
    "ScanError",
    "ScanReport",
    "Track",
    "ValidationResult",
    "is_audio_filename",
    "missing_credentials",
    "normalize_title",
    "parse_audio_filename",
    "platform_requirements",
    "supported_platforms",
]
