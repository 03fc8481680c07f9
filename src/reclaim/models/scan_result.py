"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reclaim.models.rule import ProjectMatch

OUTCOME_DELETED = "deleted"
OUTCOME_SKIPPED = "skipped"
OUTCOME_REPORTED = "reported"
OUTCOME_ERROR = "error"


@dataclass(slots=True)
class ScanResult:
    """What happened to a single matched target directory."""

    path: Path
    size_bytes: int = 0
    project: ProjectMatch | None = None
    missing_manifests: list[str] = field(default_factory=list)
    is_manifest_valid: bool = True
    outcome: str = OUTCOME_SKIPPED
    error: str = ""


@dataclass(slots=True)
class ScanSummary:
    """Aggregated results of one scan run."""

    results: list[ScanResult] = field(default_factory=list)

    @property
    def found(self) -> int:
        return len(self.results)

    @property
    def deleted(self) -> int:
        return sum(1 for r in self.results if r.outcome == OUTCOME_DELETED)

    @property
    def freed_bytes(self) -> int:
        """Bytes released by deleted targets."""
        return sum(r.size_bytes for r in self.results if r.outcome == OUTCOME_DELETED)

    @property
    def reclaimable_bytes(self) -> int:
        """Bytes held by every target found, deleted or not."""
        return sum(r.size_bytes for r in self.results)
