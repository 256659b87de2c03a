"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from mupub.features.scanning import Platform


@final
@dataclass(slots=True)
class DetectArgs:
    """Command line arguments for the ``detect`` subcommand."""

    command: Literal["detect"]
    directory: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ValidateArgs:
    """Command line arguments for the ``validate`` subcommand."""

    command: Literal["validate"]
    directory: Path
    platform: Platform | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PublishArgs:
    """Command line arguments for the ``publish`` subcommand."""

    command: Literal["publish"]
    directory: Path
    platform: Platform | None
    dry_run: bool
    output: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    root: Path
    platform: Platform | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PlatformsArgs:
    """Command line arguments for the ``platforms`` subcommand."""

    command: Literal["platforms"]


@final
@dataclass(slots=True)
class InitMetadataArgs:
    """Command line arguments for the ``init-metadata`` subcommand."""

    command: Literal["init-metadata"]
    directory: Path
    force: bool
    verbose: bool
    quiet: bool


CLIArgs = DetectArgs | ValidateArgs | PublishArgs | ScanArgs | PlatformsArgs | InitMetadataArgs

__all__ = [
    "CLIArgs",
    "DetectArgs",
    "InitMetadataArgs",
    "PlatformsArgs",
    "PublishArgs",
    "ScanArgs",
    "ValidateArgs",
]
