"""
Summary: Public surface for embedded tag extraction modules.
Why: Provide a stable import path for scanners and tests.
"""

from ._base_extractors import TagReadError
from .format_extractors import FlacExtractor, Mp3Extractor, WavExtractor
from .tag_reader import EmbeddedTagReader

__all__ = [
    "EmbeddedTagReader",
    "FlacExtractor",
    "Mp3Extractor",
    "TagReadError",
    "WavExtractor",
]
