"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

log = logging.getLogger(__name__)


def calculate_size(path: Path | str) -> int:
    """Calculate the total size of a directory tree in bytes.

    Symlinks are counted by their own size and never followed. Entries
    that cannot be stat'ed and directories that cannot be listed are
    logged and contribute nothing.
    """
    total = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            log.warning("Error calculating size for %s: %s", current, e.strerror or e)
            continue

        for entry in entries:
            try:
                st = entry.stat(follow_symlinks=False)
                if entry.is_dir(follow_symlinks=False):
                    stack.append(entry.path)
                else:
                    total += st.st_size
            except OSError as e:
                log.warning("Skipping %s: %s", entry.path, e.strerror or e)
    return total


def bytes_to_human(size_bytes: int) -> str:
    """Convert a byte count to a string like ``1.50 KB``.

    GB is the largest unit; bigger values keep counting in GB.
    """
    units = ("B", "KB", "MB", "GB")
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(units) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {units[unit_index]}"


def remove_directory(path: Path) -> None:
    """Recursively delete *path*. A path that is already gone is not an error."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        log.debug("Already removed: %s", path)
