"""Embedded tag reading facade.

Where: src/mupub/features/scanning/usecases/extraction/tag_reader.py
What: Route audio files to the extractor for their container.
Why: Give scanners one callable to attach tags to FUGA-shape tracks.
"""

from pathlib import Path
from typing import ClassVar

from ._base_extractors import AudioTagExtractor
from .format_extractors import FlacExtractor, Mp3Extractor, WavExtractor
from ...domain.models import AudioFormat, EmbeddedTags

__all__ = ["EmbeddedTagReader"]


class EmbeddedTagReader:
    """Facade class for reading embedded tags from audio files.

    This class selects the appropriate extractor based on file extension.
    """

    _format_map: ClassVar[dict[AudioFormat, AudioTagExtractor]] = {
        AudioFormat.MP3: Mp3Extractor(),
        AudioFormat.FLAC: FlacExtractor(),
        AudioFormat.WAV: WavExtractor(),
    }

    def __call__(self, file_path: Path) -> EmbeddedTags:
        return self.read(file_path)

    @classmethod
    def read(cls, file_path: Path) -> EmbeddedTags:
        """Read embedded tags from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            EmbeddedTags: Tags found in the file; fields are None when absent.

        Raises:
            ValueError: If the file format is unsupported.
            TagReadError: If the container cannot be parsed.
        """
        audio_format = AudioFormat.from_extension(file_path.suffix)
        if audio_format is None:
            raise ValueError(f"Unsupported file format: {file_path.suffix}")
        return cls._format_map[audio_format].extract_tags(file_path)
