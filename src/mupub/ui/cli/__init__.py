"""Command line interface package."""

from mupub.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
