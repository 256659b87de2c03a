# Where: mupub.features.scanning.__init__
# What: Expose release scanning services and shared dataclasses.
# Why: Provide a cohesive import surface for UI and application layers.

from .domain import (
    Album,
    AlbumMetadata,
    AudioFormat,
    DetectionError,
    MetadataExistsError,
    MetadataTrack,
    Platform,
    ReconciledTrack,
    ScanError,
    ScanReport,
    Track,
    ValidationResult,
)
from .usecases import (
    FileScanner,
    MetadataScanner,
    PublishPreparation,
    build_publish_options,
    detect_platform,
    prepare_publish_options,
    validate_album,
    write_sample_metadata,
)

__all__ = [
    "Album",
    "AlbumMetadata",
    "AudioFormat",
    "DetectionError",
    "FileScanner",
    "MetadataExistsError",
    "MetadataScanner",
    "MetadataTrack",
    "Platform",
    "PublishPreparation",
    "ReconciledTrack",
    "ScanError",
    "ScanReport",
    "Track",
    "ValidationResult",
    "build_publish_options",
    "detect_platform",
    "prepare_publish_options",
    "validate_album",
    "write_sample_metadata",
]
