"""src/mupub/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction, warning reporting and display helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from mupub.application.services.preflight_service import PreflightService
from mupub.platform.logging import logger
from mupub.ui.cli.display import ReportDisplay

ArgsT = TypeVar("ArgsT")


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    service: PreflightService
    display: ReportDisplay

    def __init__(
        self,
        args: ArgsT,
        *,
        service: PreflightService | None = None,
        display: ReportDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Parsed command line arguments.
            service: Pre-flight service; built with default scanners when omitted.
            display: Output renderer; writes to the terminal when omitted.
        """
        self.args = args
        self.service = service or PreflightService()
        self.display = display or ReportDisplay()

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            True on success, False when the process should exit non-zero.
        """
        pass

    @staticmethod
    def log_warnings(warnings: Iterable[str]) -> None:
        """Surface scan and validation diagnostics through the application logger."""
        for warning in warnings:
            logger.warning("%s", warning)
