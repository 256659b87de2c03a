"""Command execution package for CLI."""

from mupub.ui.cli.commands.detect import DetectCommand
from mupub.ui.cli.commands.executor import CommandExecutor
from mupub.ui.cli.commands.init_metadata import InitMetadataCommand
from mupub.ui.cli.commands.platforms import PlatformsCommand
from mupub.ui.cli.commands.publish import PublishCommand
from mupub.ui.cli.commands.scan import ScanCommand
from mupub.ui.cli.commands.validate import ValidateCommand

__all__ = [
    "CommandExecutor",
    "DetectCommand",
    "InitMetadataCommand",
    "PlatformsCommand",
    "PublishCommand",
    "ScanCommand",
    "ValidateCommand",
]
