"""
Summary: Exceptions raised by release scanning and detection.
Why: Attach the offending path so the CLI can report genuine I/O faults precisely.
"""

from __future__ import annotations

from pathlib import Path

from mupub.platform.filesystem import ScanError


class DetectionError(RuntimeError):
    """The target directory could not be classified for a platform."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Failed to detect platform for {path}: {message}")
        self.path = path


class MetadataExistsError(FileExistsError):
    """Writing a sample ``metadata.json`` would overwrite an existing one."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"metadata.json already exists: {path}")
        self.path = path


__all__ = ["DetectionError", "MetadataExistsError", "ScanError"]
