# Where: mupub.features.scanning.usecases
# What: Scanners, detection, validation and publish option building.
# Why: Group the operations the CLI and services compose into a pre-flight run.

from .audio_files import AudioFileScan, scan_audio_files
from .file_scanner import DEFAULT_MUSIC_ROOT, FileScanner
from .metadata_scanner import (
    METADATA_FILENAME,
    MetadataScanner,
    match_tracks_with_metadata,
    read_metadata_file,
    unmatched_metadata_tracks,
)
from .platform_detector import detect_platform, has_metadata_file
from .publish_options import (
    PublishOptions,
    PublishPreparation,
    build_publish_options,
    prepare_publish_options,
)
from .sample_metadata import create_sample_metadata, write_sample_metadata
from .validation import validate_album

__all__ = [
    "AudioFileScan",
    "DEFAULT_MUSIC_ROOT",
    "FileScanner",
    "METADATA_FILENAME",
    "MetadataScanner",
    "PublishOptions",
    "PublishPreparation",
    "build_publish_options",
    "create_sample_metadata",
    "detect_platform",
    "has_metadata_file",
    "match_tracks_with_metadata",
    "prepare_publish_options",
    "read_metadata_file",
    "scan_audio_files",
    "unmatched_metadata_tracks",
    "validate_album",
    "write_sample_metadata",
]
