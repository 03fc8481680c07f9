"""CLI interface for Reclaim."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from reclaim import __version__
from reclaim.config import ScanConfig
from reclaim.core.engine import ReclaimEngine
from reclaim.utils import bytes_to_human

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    envvar="RECLAIM_ROOT",
    help="Directory to scan (default: your home directory)",
)
@click.option("--dry-run", is_flag=True, help="Report targets and sizes without prompting or deleting")
@click.option("--target", "-t", "targets", multiple=True, metavar="NAME", help="Extra directory name to treat as a target")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="reclaim")
def main(root: Path | None, dry_run: bool, targets: tuple[str, ...], verbose: int) -> None:
    """Find build and dependency folders and delete them on confirmation."""
    _setup_logging(verbose)

    try:
        config = ScanConfig.build(root=root, extra_targets=targets, dry_run=dry_run)
        click.echo(f"Starting scan from: {config.root}")
        summary = ReclaimEngine(config).run()
        click.echo("\nScan complete!")
    except (click.ClickException, click.Abort):
        raise
    except Exception as e:
        log.error("Error: %s", e)
        log.debug("Unhandled error during scan", exc_info=True)
        return

    if dry_run:
        if summary.found:
            click.echo(
                f"Total reclaimable: {click.style(bytes_to_human(summary.reclaimable_bytes), fg='green', bold=True)} "
                f"({summary.found} folder(s))"
            )
    elif summary.deleted:
        click.echo(
            f"Total freed: {click.style(bytes_to_human(summary.freed_bytes), fg='green', bold=True)} "
            f"({summary.deleted} folder(s) deleted)"
        )
