"""Command line argument handling package."""

from mupub.ui.cli.args.parser import ArgumentParser
from mupub.ui.cli.args.options import (
    CLIArgs,
    DetectArgs,
    InitMetadataArgs,
    PlatformsArgs,
    PublishArgs,
    ScanArgs,
    ValidateArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "DetectArgs",
    "InitMetadataArgs",
    "PlatformsArgs",
    "PublishArgs",
    "ScanArgs",
    "ValidateArgs",
]
