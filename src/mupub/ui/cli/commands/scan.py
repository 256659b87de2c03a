"""src/mupub/ui/cli/commands/scan.py
What: Survey every album under a library root.
Why: Spot which releases are ready before working on them one by one.
"""

from typing import override

from mupub.ui.cli.args.options import ScanArgs
from mupub.ui.cli.commands.executor import CommandExecutor


class ScanCommand(CommandExecutor[ScanArgs]):
    """Command for whole-library scans."""

    @override
    def execute(self) -> bool:
        report = self.service.survey(self.args.root, self.args.platform)
        self.log_warnings(report.warnings)
        for entry in report.entries:
            self.log_warnings(entry.validation.warnings)
        self.display.show_survey(report, quiet=self.args.quiet)
        return all(entry.validation.valid for entry in report.entries)
