"""src/mupub/ui/cli/display/report.py
What: Render pre-flight, detection, survey and platform summaries.
Why: Keep console formatting consistent across the CLI commands.
"""

from __future__ import annotations

import json
from typing import Any, final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from mupub.application.services.preflight_service import PreflightReport, SurveyReport
from mupub.features.scanning import Platform
from mupub.features.scanning.domain import PlatformRequirements


@final
class ReportDisplay:
    """Handles user-facing output; errors always go to stderr."""

    console: Console
    err_console: Console

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def show_errors(self, title: str, errors: list[str]) -> None:
        self.err_console.print(f"[red]{escape(title)}[/red]")
        for error in errors:
            self.err_console.print(f"  • {error}", markup=False)

    def show_preflight(self, report: PreflightReport, *, verbose: bool = False, quiet: bool = False) -> None:
        """Display the outcome of a pre-flight run."""

        platform_label = report.platform.value.upper()
        if not report.ok:
            self.show_errors(f"Directory is not valid for {platform_label}", report.errors)
            return

        if quiet:
            return

        self.console.print(f"[green]Directory is valid for {platform_label}[/green]")
        options = report.options or {}
        tracks = options.get("tracks", [])
        match report.platform:
            case Platform.TUNECORE:
                self.console.print(f"Album: {options.get('album') or 'Unknown'}", markup=False)
                self.console.print(f"Artist: {options.get('artist') or 'Unknown'}", markup=False)
                self.console.print(f"Tracks: {len(tracks)}")
                if options.get("upc"):
                    self.console.print(f"UPC: {options['upc']}", markup=False)
            case Platform.FUGA:
                self.console.print(f"Tracks: {len(tracks)}")
                if tracks:
                    first = tracks[0]
                    self.console.print(f"Artist: {first.get('artist') or 'Unknown'}", markup=False)
                    self.console.print(f"Album: {first.get('album') or 'Unknown'}", markup=False)

        if verbose:
            self.show_options(options)

    def show_options(self, options: dict[str, Any]) -> None:
        self.console.print("\nPublish options preview:")
        self.console.print_json(json.dumps(options, ensure_ascii=False))

    def show_detection(self, requirements: PlatformRequirements, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"Platform: {requirements.platform.value.upper()}")
        self.console.print(f"Description: {requirements.description}")
        self.console.print(f"Required config: {', '.join(requirements.config_fields)}")
        self.console.print(f"Metadata source: {requirements.metadata_source}")

    def show_platforms(self, requirements: list[PlatformRequirements]) -> None:
        table = Table(
            title="Supported Publishing Platforms",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Platform", style="bold")
        table.add_column("Metadata")
        table.add_column("Formats")
        table.add_column("Configuration")
        table.add_column("Description", style="dim")
        for item in requirements:
            table.add_row(
                item.platform.value,
                item.metadata_source,
                ", ".join(f.value for f in item.supported_formats),
                ", ".join(item.config_fields),
                item.description,
            )
        self.console.print(table)

    def show_survey(self, report: SurveyReport, *, quiet: bool = False) -> None:
        if quiet:
            return
        if not report.entries:
            self.console.print(f"[yellow]No albums found under {escape(str(report.root))}[/yellow]")
            return

        table = Table(
            title=f"Albums under {escape(str(report.root))}",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Artist", style="bold")
        table.add_column("Album")
        table.add_column("Platform")
        table.add_column("Tracks", justify="right")
        table.add_column("Status")
        for entry in report.entries:
            status = (
                "[green]valid[/green]"
                if entry.validation.valid
                else f"[red]{len(entry.validation.errors)} error(s)[/red]"
            )
            table.add_row(
                Text(entry.album.artist),
                Text(entry.album.album),
                entry.platform.value,
                str(entry.album.total_tracks),
                status,
            )
        self.console.print(table)

        for entry in report.entries:
            if entry.validation.errors:
                self.show_errors(
                    f"{entry.album.artist}/{entry.album.album}",
                    entry.validation.errors,
                )


__all__ = ["ReportDisplay"]
