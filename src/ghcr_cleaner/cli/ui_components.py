"""Rich presentation helpers for the CLI: log handler setup and the run summary.

Log records and the summary table share one stderr console.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ghcr_cleaner.core.services.cleanup import PackageCleanupResult

_PACKAGE_LOGGER = "ghcr_cleaner"


def configure_logging(
    console: Console,
    *,
    verbose: bool = False,
    level_name: str | None = None,
) -> int:
    """Route the package loggers to a `RichHandler` and return the level in use.

    `level_name` (from the environment) wins over `verbose` when set.
    """

    if level_name:
        level = logging.getLevelName(level_name.upper())
    else:
        level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(
                console=console,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
        )
    return level


def build_results_table(results: Iterable[PackageCleanupResult]) -> Table:
    """One row per package: pages walked, untagged versions and outcome."""

    table = Table(title="Cleanup Summary")
    table.add_column("Package", style="cyan", no_wrap=True)
    table.add_column("Pages", justify="right")
    table.add_column("Untagged", justify="right")
    table.add_column("Deleted", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Status")

    for result in results:
        if result.error is not None:
            status = f"[red]FAILED[/red] {escape(str(result.error))}"
        elif result.dry_run:
            status = "[yellow]DRY RUN[/yellow]"
        else:
            status = "[green]OK[/green]"
        table.add_row(
            f"{result.owner}/{result.package_name}",
            str(result.pages_fetched),
            str(len(result.candidates)),
            str(result.deleted),
            str(result.failed),
            status,
        )
    return table
