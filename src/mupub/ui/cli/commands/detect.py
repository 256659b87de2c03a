"""src/mupub/ui/cli/commands/detect.py
What: Report which platform an album directory targets.
Why: Let operators confirm auto-detection before validating or publishing.
"""

from typing import override

from mupub.features.scanning import detect_platform
from mupub.features.scanning.domain import platform_requirements
from mupub.ui.cli.args.options import DetectArgs
from mupub.ui.cli.commands.executor import CommandExecutor


class DetectCommand(CommandExecutor[DetectArgs]):
    """Command for platform detection."""

    @override
    def execute(self) -> bool:
        platform = detect_platform(self.args.directory)
        self.display.show_detection(platform_requirements(platform), quiet=self.args.quiet)
        return True
