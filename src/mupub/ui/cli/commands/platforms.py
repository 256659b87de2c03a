"""src/mupub/ui/cli/commands/platforms.py
What: List supported platforms with their requirements.
Why: Tell operators which settings and metadata each platform expects.
"""

from typing import final

from mupub.features.scanning.domain import platform_requirements, supported_platforms
from mupub.ui.cli.args.options import PlatformsArgs
from mupub.ui.cli.display import ReportDisplay


@final
class PlatformsCommand:
    """Render the platform catalogue."""

    def __init__(self, args: PlatformsArgs, *, display: ReportDisplay | None = None) -> None:
        self._args = args
        self._display = display or ReportDisplay()

    def execute(self) -> bool:
        self._display.show_platforms(
            [platform_requirements(platform) for platform in supported_platforms()]
        )
        return True
