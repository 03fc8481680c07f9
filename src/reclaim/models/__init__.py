"""Reclaim data models."""

from reclaim.models.rule import ManifestCheck, ProjectMatch, ProjectTypeRule
from reclaim.models.scan_result import ScanResult, ScanSummary

__all__ = [
    "ManifestCheck",
    "ProjectMatch",
    "ProjectTypeRule",
    "ScanResult",
    "ScanSummary",
]
