"""`ghcr-cleaner` command.

Deletes all untagged versions of the given GitHub container packages.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

import typer
from pydantic import ValidationError
from rich.console import Console

from ghcr_cleaner import __app_name__, __version__
from ghcr_cleaner.adapters.github_registry import GitHubRegistryClient
from ghcr_cleaner.cli.ui_components import build_results_table, configure_logging
from ghcr_cleaner.core.config import AppSettings
from ghcr_cleaner.core.domain.models import PackageOwner
from ghcr_cleaner.core.errors import ConfigurationError
from ghcr_cleaner.core.services.cleanup import PackageCleanupResult, clean_packages

app = typer.Typer(
    add_completion=False,
    help="Delete all untagged versions of GitHub container packages.",
)

_console = Console(stderr=True)

log = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__app_name__} {__version__}")
        raise typer.Exit()


def resolve_token(token_path: Path | None, settings: AppSettings) -> str:
    """Token from `--token` (file, stripped) or from the settings (GITHUB_TOKEN)."""

    if token_path is not None:
        try:
            token = token_path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigurationError(
                f"Failed to read the github token from {token_path}: {exc}"
            ) from exc
        if not token:
            raise ConfigurationError(f"The token file {token_path} is empty")
        return token

    if settings.github_token is None or not settings.github_token.get_secret_value().strip():
        raise ConfigurationError("No github token provided via --token or GITHUB_TOKEN")
    return settings.github_token.get_secret_value().strip()


async def run(
    *,
    settings: AppSettings,
    package_names: Sequence[str],
    user: str | None = None,
    org: str | None = None,
    token_path: Path | None = None,
    dry_run: bool = False,
) -> list[PackageCleanupResult]:
    """Validate the configuration, then clean every package in order.

    Only `ConfigurationError` escapes; package level failures are recorded
    in the returned results.
    """

    owner = PackageOwner.parse(user, org)
    if any(not name.strip() for name in package_names):
        raise ConfigurationError("Package names must not be blank")
    token = resolve_token(token_path, settings)

    async with GitHubRegistryClient(token, settings) as client:
        return await clean_packages(client, owner, package_names, dry_run=dry_run)


@app.command()
def clean(
    package_names: list[str] = typer.Argument(
        ...,
        help="Packages to clean.",
        show_default=False,
    ),
    user: str | None = typer.Option(
        None,
        "--user",
        help="User owning the packages (conflicts with --org).",
    ),
    org: str | None = typer.Option(
        None,
        "--org",
        help="Organization owning the packages (conflicts with --user).",
    ),
    token: Path | None = typer.Option(
        None,
        "--token",
        help="Path to a file containing a GitHub token. "
        "The token can also be passed verbatim via the GITHUB_TOKEN env variable.",
        dir_okay=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Don't delete anything, only print what would be deleted.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Make logging more verbose. GHCR_CLEANER_LOG_LEVEL takes precedence.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Delete all untagged versions of GitHub container packages."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        configure_logging(_console, verbose=verbose)
        log.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    configure_logging(_console, verbose=verbose, level_name=settings.log_level)
    log.info("Starting %s %s", __app_name__, __version__)
    log.debug("With arguments %s", sys.argv)

    try:
        results = asyncio.run(
            run(
                settings=settings,
                package_names=package_names,
                user=user,
                org=org,
                token_path=token,
                dry_run=dry_run,
            )
        )
    except ConfigurationError as exc:
        log.error("%s", exc)
        raise typer.Exit(code=1) from exc

    _console.print(build_results_table(results))


def run_cli() -> None:
    app()


if __name__ == "__main__":
    run_cli()
