"""Project type detection and manifest validation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from reclaim.models.rule import ManifestCheck, ProjectMatch, ProjectTypeRule

log = logging.getLogger(__name__)


def _stat_manifest(path: Path) -> os.stat_result | None:
    """Stat a manifest file, returning None when it is missing or unreadable."""
    try:
        return path.stat()
    except OSError as e:
        log.debug("Manifest not accessible: %s (%s)", path, e)
        return None


def detect_project_type(path: Path, rules: Iterable[ProjectTypeRule]) -> ProjectMatch | None:
    """Match *path* to the first rule whose marker dir is its basename.

    The rule only counts if at least one of its manifest files exists
    next to the target directory. A matching name without any manifest
    is not a recognised project.
    """
    parent = path.parent
    for rule in rules:
        if rule.marker_dir != path.name:
            continue
        for manifest in rule.manifest_files:
            if _stat_manifest(parent / manifest) is not None:
                log.debug("Detected %s project at %s via %s", rule.ecosystem, parent, manifest)
                return ProjectMatch(rule=rule, parent=parent)
    return None


def validate_manifests(parent: Path, rule: ProjectTypeRule) -> ManifestCheck:
    """Check that at least one of the rule's manifests exists and is non-empty."""
    missing: list[str] = []
    is_valid = False
    for manifest in rule.manifest_files:
        st = _stat_manifest(parent / manifest)
        if st is None:
            missing.append(manifest)
        elif st.st_size > 0:
            is_valid = True
    return ManifestCheck(is_valid=is_valid, missing=missing)
