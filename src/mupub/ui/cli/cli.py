"""Command line interface for mupub."""

import sys
from collections.abc import Sequence
from typing import final

from mupub.features.scanning import DetectionError, ScanError
from mupub.platform.logging import logger
from mupub.ui.cli.args import ArgumentParser
from mupub.ui.cli.args.options import (
    CLIArgs,
    DetectArgs,
    InitMetadataArgs,
    PlatformsArgs,
    PublishArgs,
    ScanArgs,
    ValidateArgs,
)
from mupub.ui.cli.commands import (
    DetectCommand,
    InitMetadataCommand,
    PlatformsCommand,
    PublishCommand,
    ScanCommand,
    ValidateCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if not CommandProcessor._dispatch(args):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (DetectionError, ScanError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _dispatch(args: CLIArgs) -> bool:
        if isinstance(args, DetectArgs):
            return DetectCommand(args).execute()
        if isinstance(args, ValidateArgs):
            return ValidateCommand(args).execute()
        if isinstance(args, PublishArgs):
            return PublishCommand(args).execute()
        if isinstance(args, ScanArgs):
            return ScanCommand(args).execute()
        if isinstance(args, PlatformsArgs):
            return PlatformsCommand(args).execute()
        assert isinstance(args, InitMetadataArgs)
        return InitMetadataCommand(args).execute()


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
