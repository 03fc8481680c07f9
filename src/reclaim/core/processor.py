"""Per-target report, confirmation and deletion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click

from reclaim.config import ScanConfig
from reclaim.core.detector import detect_project_type, validate_manifests
from reclaim.models.scan_result import (
    OUTCOME_DELETED,
    OUTCOME_ERROR,
    OUTCOME_REPORTED,
    OUTCOME_SKIPPED,
    ScanResult,
)
from reclaim.utils import bytes_to_human, calculate_size, remove_directory

log = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], str]  # (question) -> raw answer

DELETE_PROMPT = "Delete this folder? (y/n)"


def prompt_operator(question: str) -> str:
    """Ask on the terminal and return the raw answer (empty on plain Enter)."""
    return click.prompt(question, default="", show_default=False)


class TargetProcessor:
    """Sizes a target directory, warns about missing manifests, and deletes on confirmation."""

    def __init__(self, config: ScanConfig, confirm: ConfirmCallback | None = None) -> None:
        self.config = config
        self._confirm = confirm or prompt_operator

    def process(self, path: Path) -> ScanResult:
        """Handle one matched target.

        Errors are logged and recorded on the result; they never propagate
        to the scanner. ``click.Abort`` is the exception, so the operator
        can still interrupt the run from the prompt.
        """
        result = ScanResult(path=path)
        try:
            self._process(result)
        except click.Abort:
            raise
        except Exception as e:
            log.error("Error processing %s: %s", path, e)
            result.outcome = OUTCOME_ERROR
            result.error = str(e)
        log.debug("%s -> %s", path, result.outcome)
        return result

    def _process(self, result: ScanResult) -> None:
        path = result.path
        result.size_bytes = calculate_size(path)

        click.echo(f"\nFound: {path}")
        click.echo(f"Size: {bytes_to_human(result.size_bytes)}")

        self._check_project(result)

        if self.config.dry_run:
            result.outcome = OUTCOME_REPORTED
            return

        answer = self._confirm(DELETE_PROMPT)
        if answer.strip().lower() != "y":
            result.outcome = OUTCOME_SKIPPED
            return

        remove_directory(path)
        result.outcome = OUTCOME_DELETED
        click.secho("Deleted successfully!", fg="green")

    def _check_project(self, result: ScanResult) -> None:
        project = detect_project_type(result.path, self.config.rules_for(result.path.name))
        result.project = project
        if project is None:
            return

        check = validate_manifests(project.parent, project.rule)
        result.is_manifest_valid = check.is_valid
        result.missing_manifests = check.missing
        if not check.is_valid:
            click.secho("\nWARNING: Missing or empty configuration files:", fg="yellow", bold=True)
            click.secho(", ".join(check.missing), fg="yellow")
            click.secho("Deleting this folder might cause issues with dependency restoration.", fg="yellow")
