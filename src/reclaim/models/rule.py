"""Project type rules and detection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ProjectTypeRule:
    """Ties a dependency folder name to the manifests that can restore it."""

    ecosystem: str
    marker_dir: str
    manifest_files: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectMatch:
    """A target directory recognised as belonging to a project ecosystem."""

    rule: ProjectTypeRule
    parent: Path


@dataclass(slots=True)
class ManifestCheck:
    """Outcome of checking a project's manifest files.

    ``is_valid`` is True when at least one manifest exists and is non-empty.
    ``missing`` lists the manifests that are absent or could not be read;
    empty-but-present manifests appear in neither.
    """

    is_valid: bool
    missing: list[str] = field(default_factory=list)
