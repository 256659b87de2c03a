"""src/mupub/ui/cli/commands/publish.py
What: Validate an album, check platform credentials and emit its publish options.
Why: Produce the hand-off document the platform upload clients consume.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Mapping
from typing import TextIO, override

from mupub.application.services.preflight_service import PreflightRequest, PreflightService
from mupub.config.config import Config
from mupub.config.file_ops import write_text_file
from mupub.features.scanning.domain import missing_credentials
from mupub.platform.logging import logger
from mupub.ui.cli.args.options import PublishArgs
from mupub.ui.cli.commands.executor import CommandExecutor
from mupub.ui.cli.display import ReportDisplay

CredentialsProvider = Callable[[], Mapping[str, str | None]]


def _configured_credentials() -> Mapping[str, str | None]:
    return Config.load().credentials()


class PublishCommand(CommandExecutor[PublishArgs]):
    """Command for publishing preparation."""

    def __init__(
        self,
        args: PublishArgs,
        *,
        service: PreflightService | None = None,
        display: ReportDisplay | None = None,
        credentials_provider: CredentialsProvider | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        super().__init__(args, service=service, display=display)
        self._credentials_provider = credentials_provider or _configured_credentials
        self._stdout = stdout

    @override
    def execute(self) -> bool:
        report = self.service.run(
            PreflightRequest(album_path=self.args.directory, platform=self.args.platform)
        )
        self.log_warnings(report.warnings)
        if not report.ok or report.options is None:
            self.display.show_preflight(report, quiet=self.args.quiet)
            return False

        platform_label = report.platform.value.upper()
        missing = missing_credentials(report.platform, self._credentials_provider())
        if missing:
            self.display.show_errors(
                f"{platform_label} configuration is incomplete",
                [f"Missing setting: {name}" for name in missing],
            )
            return False

        if self.args.dry_run:
            self.display.show_preflight(report, verbose=self.args.verbose, quiet=self.args.quiet)
            return True

        document = json.dumps(report.options, indent=2, ensure_ascii=False) + "\n"
        if self.args.output is not None:
            write_text_file(self.args.output, document)
            logger.info("Wrote %s publish options to %s", platform_label, self.args.output)
        else:
            out = self._stdout or sys.stdout
            _ = out.write(document)
        return True
