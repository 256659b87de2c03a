"""src/mupub/ui/cli/commands/validate.py
What: Run the pre-flight checks for an album directory and print the outcome.
Why: Show every problem in one pass before anything is sent to a platform.
"""

from typing import override

from mupub.application.services.preflight_service import PreflightRequest
from mupub.ui.cli.args.options import ValidateArgs
from mupub.ui.cli.commands.executor import CommandExecutor


class ValidateCommand(CommandExecutor[ValidateArgs]):
    """Command for album validation."""

    @override
    def execute(self) -> bool:
        report = self.service.run(
            PreflightRequest(album_path=self.args.directory, platform=self.args.platform)
        )
        self.log_warnings(report.warnings)
        self.display.show_preflight(report, verbose=self.args.verbose, quiet=self.args.quiet)
        return report.ok
