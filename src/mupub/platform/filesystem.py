"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import stat
from pathlib import Path


class ScanError(OSError):
    """An I/O failure other than a missing path while scanning."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


def _list_entries(directory: Path, *, want_directories: bool) -> list[str]:
    """List entry names of ``directory`` whose stat type matches the request."""

    try:
        names = sorted(os.listdir(directory))
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise ScanError(directory, f"Failed to list directory ({exc.strerror or exc})") from exc

    matched: list[str] = []
    for name in names:
        entry_path = directory / name
        try:
            mode = entry_path.stat().st_mode
        except FileNotFoundError:
            # Removed between listing and stat.
            continue
        except OSError as exc:
            raise ScanError(entry_path, f"Failed to stat entry ({exc.strerror or exc})") from exc

        if want_directories and stat.S_ISDIR(mode):
            matched.append(name)
        elif not want_directories and stat.S_ISREG(mode):
            matched.append(name)
    return matched


def list_subdirectories(directory: Path) -> list[str]:
    """Return sorted names of immediate subdirectories; ``[]`` if missing."""

    return _list_entries(directory, want_directories=True)


def list_files(directory: Path) -> list[str]:
    """Return sorted names of regular files directly inside ``directory``; ``[]`` if missing."""

    return _list_entries(directory, want_directories=False)


__all__ = ["ScanError", "list_files", "list_subdirectories"]
