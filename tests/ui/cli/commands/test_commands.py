"""Tests for command execution."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from mupub.application.services.preflight_service import PreflightService
from mupub.features.scanning import FileScanner, Platform
from mupub.ui.cli.args.options import (
    DetectArgs,
    InitMetadataArgs,
    PlatformsArgs,
    PublishArgs,
    ScanArgs,
    ValidateArgs,
)
from mupub.ui.cli.commands import (
    DetectCommand,
    InitMetadataCommand,
    PlatformsCommand,
    PublishCommand,
    ScanCommand,
    ValidateCommand,
)
from mupub.ui.cli.display import ReportDisplay

AlbumFactory = Callable[..., Path]

TUNECORE_CREDENTIALS: dict[str, str | None] = {
    "tunecore_partner_id": "partner",
    "tunecore_api_key": "key",
    "tunecore_base_url": "https://api.tunecore.com",
}


@pytest.fixture
def console(mocker: MockerFixture) -> MagicMock:
    return mocker.create_autospec(Console, instance=True)


@pytest.fixture
def err_console(mocker: MockerFixture) -> MagicMock:
    return mocker.create_autospec(Console, instance=True)


@pytest.fixture
def display(console: MagicMock, err_console: MagicMock) -> ReportDisplay:
    return ReportDisplay(console=console, err_console=err_console)


@pytest.fixture
def service() -> PreflightService:
    return PreflightService(file_scanner=FileScanner(tag_reader=None))


@pytest.fixture
def tunecore_album(make_album: AlbumFactory, tunecore_metadata: dict[str, Any]) -> Path:
    return make_album("Artist1", "Album1", ["01 - Song A.wav", "02 - Song B.wav"], tunecore_metadata)


def _publish_args(directory: Path, **overrides: Any) -> PublishArgs:
    values: dict[str, Any] = {
        "command": "publish",
        "directory": directory,
        "platform": None,
        "dry_run": False,
        "output": None,
        "verbose": False,
        "quiet": False,
    }
    values.update(overrides)
    return PublishArgs(**values)


def _printed(console: MagicMock) -> str:
    return "\n".join(str(call.args[0]) for call in console.print.call_args_list if call.args)


def test_detect_command(
    make_album: AlbumFactory, service: PreflightService, display: ReportDisplay, console: MagicMock
) -> None:
    album_path = make_album("Artist2", "Album2", ["01 - Track One.wav"])
    args = DetectArgs(command="detect", directory=album_path, verbose=False, quiet=False)

    assert DetectCommand(args, service=service, display=display).execute()
    assert "Platform: FUGA" in _printed(console)


def test_validate_command_success(
    tunecore_album: Path, service: PreflightService, display: ReportDisplay, console: MagicMock
) -> None:
    args = ValidateArgs(
        command="validate", directory=tunecore_album, platform=None, verbose=False, quiet=False
    )

    assert ValidateCommand(args, service=service, display=display).execute()
    assert "Directory is valid for TUNECORE" in _printed(console)


def test_validate_command_failure_logs_warnings(
    make_album: AlbumFactory,
    tunecore_metadata: dict[str, Any],
    service: PreflightService,
    display: ReportDisplay,
    err_console: MagicMock,
    caplog: pytest.LogCaptureFixture,
) -> None:
    album_path = make_album("Artist1", "Album1", ["01 - Song A.wav"], tunecore_metadata)
    args = ValidateArgs(
        command="validate", directory=album_path, platform=None, verbose=False, quiet=False
    )

    assert not ValidateCommand(args, service=service, display=display).execute()
    assert "Track count mismatch: metadata has 2 tracks, found 1 audio files" in _printed(err_console)
    assert "Metadata track 2 (Song B) has no matching audio file" in caplog.text


def test_publish_writes_options_to_stdout(
    tunecore_album: Path, service: PreflightService, display: ReportDisplay
) -> None:
    stdout = io.StringIO()
    command = PublishCommand(
        _publish_args(tunecore_album),
        service=service,
        display=display,
        credentials_provider=lambda: TUNECORE_CREDENTIALS,
        stdout=stdout,
    )

    assert command.execute()
    options = json.loads(stdout.getvalue())
    assert options["artist"] == "Artist1"
    assert [t["isrc"] for t in options["tracks"]] == ["USABC2400001", "USABC2400002"]


def test_publish_writes_options_to_file(
    tunecore_album: Path, tmp_path: Path, service: PreflightService, display: ReportDisplay
) -> None:
    output = tmp_path / "out" / "options.json"
    command = PublishCommand(
        _publish_args(tunecore_album, output=output),
        service=service,
        display=display,
        credentials_provider=lambda: TUNECORE_CREDENTIALS,
    )

    assert command.execute()
    assert json.loads(output.read_text(encoding="utf-8"))["upc"] == "123456789012"


def test_publish_dry_run_only_previews(
    tunecore_album: Path, service: PreflightService, display: ReportDisplay, console: MagicMock
) -> None:
    stdout = io.StringIO()
    command = PublishCommand(
        _publish_args(tunecore_album, dry_run=True, verbose=True),
        service=service,
        display=display,
        credentials_provider=lambda: TUNECORE_CREDENTIALS,
        stdout=stdout,
    )

    assert command.execute()
    assert stdout.getvalue() == ""
    console.print_json.assert_called_once()


def test_publish_requires_credentials(
    tunecore_album: Path, service: PreflightService, display: ReportDisplay, err_console: MagicMock
) -> None:
    stdout = io.StringIO()
    command = PublishCommand(
        _publish_args(tunecore_album),
        service=service,
        display=display,
        credentials_provider=lambda: {"tunecore_partner_id": "partner"},
        stdout=stdout,
    )

    assert not command.execute()
    printed = _printed(err_console)
    assert "TUNECORE configuration is incomplete" in printed
    assert "Missing setting: tunecore_api_key" in printed
    assert stdout.getvalue() == ""


def test_publish_stops_on_validation_errors(
    make_album: AlbumFactory, service: PreflightService, display: ReportDisplay
) -> None:
    album_path = make_album("Artist2", "Empty", [])
    provider = MagicMock(return_value={})
    command = PublishCommand(
        _publish_args(album_path, platform=Platform.FUGA),
        service=service,
        display=display,
        credentials_provider=provider,
    )

    assert not command.execute()
    provider.assert_not_called()


def test_scan_command(
    music_root: Path,
    make_album: AlbumFactory,
    service: PreflightService,
    display: ReportDisplay,
) -> None:
    _ = make_album("Artist2", "Album2", ["01 - Track One.wav"])
    args = ScanArgs(command="scan", root=music_root, platform=None, verbose=False, quiet=False)

    assert ScanCommand(args, service=service, display=display).execute()

    _ = make_album("Artist3", "Empty", [])
    assert not ScanCommand(args, service=service, display=display).execute()


def test_platforms_command(display: ReportDisplay, console: MagicMock) -> None:
    assert PlatformsCommand(PlatformsArgs(command="platforms"), display=display).execute()
    console.print.assert_called_once()


def test_init_metadata_command(
    make_album: AlbumFactory, display: ReportDisplay, err_console: MagicMock
) -> None:
    album_path = make_album("Artist2", "Album2", ["02 - Track Two.wav", "01 - Track One.wav"])
    args = InitMetadataArgs(
        command="init-metadata", directory=album_path, force=False, verbose=False, quiet=True
    )

    assert InitMetadataCommand(args, display=display).execute()
    written = json.loads((album_path / "metadata.json").read_text(encoding="utf-8"))
    assert written["artist"] == "Artist2"
    assert [t["title"] for t in written["tracks"]] == ["Track One", "Track Two"]

    assert not InitMetadataCommand(args, display=display).execute()
    assert "Use --force to overwrite it" in _printed(err_console)


def test_init_metadata_requires_audio(make_album: AlbumFactory, display: ReportDisplay) -> None:
    album_path = make_album("Artist2", "Empty", ["cover.jpg"])
    args = InitMetadataArgs(
        command="init-metadata", directory=album_path, force=False, verbose=False, quiet=False
    )

    assert not InitMetadataCommand(args, display=display).execute()
    assert not (album_path / "metadata.json").exists()
