"""Static scan configuration: project rules and target directory names."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from reclaim.models.rule import ProjectTypeRule

log = logging.getLogger(__name__)

# Checked in this order during project detection.
PROJECT_RULES: tuple[ProjectTypeRule, ...] = (
    ProjectTypeRule("node", "node_modules", ("package.json", "package-lock.json", "yarn.lock")),
    ProjectTypeRule("python", "venv", ("requirements.txt", "Pipfile", "poetry.lock")),
)

# Dot-prefixed names never match because hidden entries are skipped while scanning.
TARGET_DIR_NAMES: frozenset[str] = frozenset(
    {
        "node_modules",
        "venv",
        ".pytest_cache",
        "__pycache__",
        ".next",
        "dist",
        "build",
        ".gradle",
        "target",
        "vendor",
        ".cargo",
    }
)


@dataclass(frozen=True)
class ScanConfig:
    """Read-only settings shared by every component for a single run."""

    root: Path
    rules: tuple[ProjectTypeRule, ...] = PROJECT_RULES
    target_names: frozenset[str] = field(default=TARGET_DIR_NAMES)
    dry_run: bool = False

    @classmethod
    def build(
        cls,
        root: Path | None = None,
        extra_targets: Iterable[str] = (),
        dry_run: bool = False,
    ) -> ScanConfig:
        """Create the configuration, defaulting the root to the user's home.

        Dot-prefixed extra targets are dropped with a warning; hidden
        entries are never visited, so they could not match.
        """
        extra: set[str] = set()
        for name in (n.strip() for n in extra_targets):
            if not name:
                continue
            if name.startswith("."):
                log.warning("Ignoring target %s: hidden directories are never scanned", name)
                continue
            extra.add(name)
        return cls(
            root=Path(root) if root is not None else Path.home(),
            target_names=TARGET_DIR_NAMES | extra,
            dry_run=dry_run,
        )

    def is_target(self, name: str) -> bool:
        return name in self.target_names

    def rules_for(self, name: str) -> list[ProjectTypeRule]:
        """Rules whose marker directory is *name*, in detection order."""
        return [rule for rule in self.rules if rule.marker_dir == name]
