"""
Summary: Decide whether a directory is a FUGA or a TuneCore release.
Why: The presence of metadata.json is the single signal separating the two shapes.
"""

from __future__ import annotations

import stat
from pathlib import Path

from mupub.platform.logging import logger

from ..domain.errors import DetectionError
from ..domain.models import Platform
from .metadata_scanner import METADATA_FILENAME


def has_metadata_file(directory: Path) -> bool:
    """Return True when ``directory`` directly contains ``metadata.json``."""

    try:
        return stat.S_ISREG((directory / METADATA_FILENAME).stat().st_mode)
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise DetectionError(directory, f"cannot inspect {METADATA_FILENAME} ({exc})") from exc


def detect_platform(directory: Path) -> Platform:
    """Return TUNECORE when ``metadata.json`` is present, FUGA otherwise.

    Raises:
        DetectionError: If ``directory`` cannot be stat'ed or is not a directory.
    """

    directory = Path(directory)
    try:
        mode = directory.stat().st_mode
    except OSError as exc:
        raise DetectionError(directory, exc.strerror or str(exc)) from exc
    if not stat.S_ISDIR(mode):
        raise DetectionError(directory, "not a directory")

    platform = Platform.TUNECORE if has_metadata_file(directory) else Platform.FUGA
    logger.debug("Detected %s for %s", platform.value, directory)
    return platform


__all__ = ["detect_platform", "has_metadata_file"]
