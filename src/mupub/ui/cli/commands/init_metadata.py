"""src/mupub/ui/cli/commands/init_metadata.py
What: Write a metadata.json skeleton for an album directory.
Why: Turn a FUGA-shape album into a TuneCore-shape one without typing every title.
"""

import os
from pathlib import Path
from typing import override

from mupub.features.scanning import MetadataExistsError, MetadataScanner, write_sample_metadata
from mupub.ui.cli.args.options import InitMetadataArgs
from mupub.ui.cli.commands.executor import CommandExecutor

_FAILURE_TITLE = "Cannot initialise metadata"


class InitMetadataCommand(CommandExecutor[InitMetadataArgs]):
    """Command for sample metadata generation."""

    @override
    def execute(self) -> bool:
        album_path = Path(os.path.abspath(Path(self.args.directory).expanduser()))
        if not album_path.is_dir():
            self.display.show_errors(_FAILURE_TITLE, [f"Not a directory: {album_path}"])
            return False

        tracks = MetadataScanner().scan_audio_files(album_path)
        if not tracks:
            self.display.show_errors(_FAILURE_TITLE, [f"No audio files in {album_path}"])
            return False

        try:
            target = write_sample_metadata(
                album_path,
                artist=album_path.parent.name,
                album=album_path.name,
                tracks=tracks,
                force=self.args.force,
            )
        except MetadataExistsError as exc:
            self.display.show_errors(_FAILURE_TITLE, [str(exc), "Use --force to overwrite it"])
            return False

        if not self.args.quiet:
            self.display.console.print(f"Created {target} with {len(tracks)} track(s)", markup=False)
        return True
