"""Depth-first directory walk that hands matched targets to a callback."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

from reclaim.config import ScanConfig

log = logging.getLogger(__name__)

TargetCallback = Callable[[Path], None]


class TreeScanner:
    """Walks a tree looking for target directories.

    Hidden entries are never visited. Matched targets are passed to
    ``on_target`` and never descended into, whatever the callback did
    with them.
    """

    def __init__(self, config: ScanConfig, on_target: TargetCallback) -> None:
        self.config = config
        self._on_target = on_target

    def scan(self, root: Path | None = None) -> None:
        """Scan from *root*, or the configured root.

        Uses an explicit stack of ``(path, is_target)`` pairs so depth is
        not bounded by the recursion limit. Children are pushed in reverse
        name order, which keeps targets in the same order a recursive
        walk would visit them.
        """
        stack: list[tuple[Path, bool]] = [(Path(root) if root is not None else self.config.root, False)]
        while stack:
            path, is_target = stack.pop()
            if is_target:
                self._on_target(path)
            else:
                stack.extend(reversed(self._list_subdirs(path)))

    def _list_subdirs(self, directory: Path) -> list[tuple[Path, bool]]:
        """Visible, non-symlink subdirectories of *directory* in name order."""
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.warning("Error scanning %s: %s", directory, e.strerror or e)
            return []

        subdirs: list[tuple[Path, bool]] = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
            except OSError as e:
                log.warning("Error scanning %s: %s", entry.path, e.strerror or e)
                continue
            subdirs.append((Path(entry.path), self.config.is_target(entry.name)))
        return subdirs
