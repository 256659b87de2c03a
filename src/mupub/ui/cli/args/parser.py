"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from mupub.config.config import Config
from mupub.features.scanning import Platform
from mupub.features.scanning.usecases import DEFAULT_MUSIC_ROOT
from mupub.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from mupub.ui.cli.args.options import (
    CLIArgs,
    DetectArgs,
    InitMetadataArgs,
    PlatformsArgs,
    PublishArgs,
    ScanArgs,
    ValidateArgs,
)

PLATFORM_CHOICES: tuple[str, ...] = tuple(p.value for p in Platform)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="mupub",
            description=(
                "mupub - Detect, validate and prepare music releases for FUGA or TuneCore."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        detect_parser = subparsers.add_parser(
            "detect",
            help="Detect which platform an album directory targets",
        )
        ArgumentParser._add_directory_argument(detect_parser, "Album directory to analyze")
        ArgumentParser._add_verbosity_flags(detect_parser)

        validate_parser = subparsers.add_parser(
            "validate",
            help="Validate an album directory without publishing",
        )
        ArgumentParser._add_directory_argument(validate_parser, "Album directory to validate")
        ArgumentParser._add_platform_option(validate_parser)
        ArgumentParser._add_verbosity_flags(validate_parser)

        publish_parser = subparsers.add_parser(
            "publish",
            help="Validate an album and emit its publish options for the platform client",
        )
        ArgumentParser._add_directory_argument(publish_parser, "Album directory to publish")
        ArgumentParser._add_platform_option(publish_parser)
        _ = publish_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate without producing the publish document",
        )
        _ = publish_parser.add_argument(
            "--output",
            type=str,
            metavar="FILE",
            help="Write publish options JSON to FILE instead of stdout",
        )
        ArgumentParser._add_verbosity_flags(publish_parser)

        scan_parser = subparsers.add_parser(
            "scan",
            help="Scan a whole Artist/Album tree and summarise every album",
        )
        _ = scan_parser.add_argument(
            "root",
            type=str,
            nargs="?",
            default=None,
            help="Library root (defaults to music_root from config, then ./music)",
            metavar="ROOT",
        )
        ArgumentParser._add_platform_option(scan_parser)
        ArgumentParser._add_verbosity_flags(scan_parser)

        _ = subparsers.add_parser(
            "platforms",
            help="List supported platforms and their requirements",
        )

        init_parser = subparsers.add_parser(
            "init-metadata",
            help="Write a sample metadata.json from the audio files of an album",
        )
        ArgumentParser._add_directory_argument(init_parser, "Album directory to initialise")
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing metadata.json",
        )
        ArgumentParser._add_verbosity_flags(init_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "detect":
            return DetectArgs(
                command="detect",
                directory=Path(parsed_args.directory),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "validate":
            return ValidateArgs(
                command="validate",
                directory=Path(parsed_args.directory),
                platform=ArgumentParser._resolve_platform(parsed_args, configuration),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "publish":
            return PublishArgs(
                command="publish",
                directory=Path(parsed_args.directory),
                platform=ArgumentParser._resolve_platform(parsed_args, configuration),
                dry_run=bool(parsed_args.dry_run),
                output=Path(parsed_args.output) if parsed_args.output else None,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "scan":
            if parsed_args.root:
                root = Path(parsed_args.root)
            else:
                root = configuration.music_root or DEFAULT_MUSIC_ROOT
            return ScanArgs(
                command="scan",
                root=root,
                platform=ArgumentParser._resolve_platform(parsed_args, configuration),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "platforms":
            return PlatformsArgs(command="platforms")

        if command == "init-metadata":
            return InitMetadataArgs(
                command="init-metadata",
                directory=Path(parsed_args.directory),
                force=bool(parsed_args.force),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_directory_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
        _ = parser.add_argument(
            "directory",
            type=str,
            help=help_text,
            metavar="DIRECTORY",
        )

    @staticmethod
    def _add_platform_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--platform",
            type=str.lower,
            choices=PLATFORM_CHOICES,
            default=None,
            help="Platform to validate for instead of auto-detecting",
        )

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information including publish options",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _resolve_platform(parsed_args: argparse.Namespace, configuration: Config) -> Platform | None:
        """Pick the command line platform, then the configured default, else detection."""

        raw: str | None = parsed_args.platform or configuration.default_platform
        if not raw:
            return None
        try:
            return Platform.from_user_input(raw)
        except ValueError as exc:
            logger.error("%s", exc)
            sys.exit(2)
