"""Scan orchestration engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from reclaim.config import ScanConfig
from reclaim.core.processor import ConfirmCallback, TargetProcessor
from reclaim.core.scanner import TreeScanner
from reclaim.models.scan_result import ScanResult, ScanSummary
from reclaim.utils import bytes_to_human

log = logging.getLogger(__name__)

ResultCallback = Callable[[ScanResult], None]


class ReclaimEngine:
    """Runs a single scan, feeding every matched target through the processor."""

    def __init__(
        self,
        config: ScanConfig,
        confirm: ConfirmCallback | None = None,
        on_result: ResultCallback | None = None,
    ) -> None:
        self.config = config
        self.processor = TargetProcessor(config, confirm=confirm)
        self._on_result = on_result

    def run(self) -> ScanSummary:
        """Walk ``config.root`` and return what happened to each target.

        Targets are processed one at a time, in walk order; the walk
        blocks while the processor waits for confirmation.
        """
        summary = ScanSummary()

        def _handle_target(path: Path) -> None:
            result = self.processor.process(path)
            summary.results.append(result)
            if self._on_result:
                self._on_result(result)

        TreeScanner(self.config, _handle_target).scan()

        log.info(
            "Found %d targets (%s), deleted %d (%s)",
            summary.found,
            bytes_to_human(summary.reclaimable_bytes),
            summary.deleted,
            bytes_to_human(summary.freed_bytes),
        )
        return summary
