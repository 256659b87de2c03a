"""Console rendering helpers for the CLI."""

from mupub.ui.cli.display.report import ReportDisplay

__all__ = ["ReportDisplay"]
