"""Cleanup orchestration.

Walks every page of versions of a package, picks the untagged ones and
deletes them (or only reports them on a dry run). Everything runs strictly
sequentially: one registry request in flight at a time.

Failure policy:
- listing a page fails: the package is aborted (`PackageCleanupError`),
  `clean_packages` logs it and moves on to the next package.
- deleting a version fails, for whatever reason: logged as a warning, the
  page continues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ghcr_cleaner.core.domain.models import PackageOwner, PackageVersion
from ghcr_cleaner.core.errors import CleanerError, PackageCleanupError
from ghcr_cleaner.core.interfaces.registry import RegistryClient

log = logging.getLogger(__name__)


@dataclass
class PackageCleanupResult:
    """Outcome of one package cleanup pass."""

    owner: PackageOwner
    package_name: str
    dry_run: bool = False
    pages_fetched: int = 0
    candidates: list[str] = field(default_factory=list)
    deleted: int = 0
    failed: int = 0
    error: CleanerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def clean_page_versions(
    client: RegistryClient,
    owner: PackageOwner,
    package_name: str,
    versions: Sequence[PackageVersion],
    *,
    dry_run: bool,
    result: PackageCleanupResult | None = None,
) -> PackageCleanupResult:
    """Delete the untagged versions of one page, in registry order."""

    result = result or PackageCleanupResult(owner, package_name, dry_run=dry_run)
    suffix = " (DRY RUN)" if dry_run else ""

    for version in versions:
        if not version.is_untagged:
            continue

        result.candidates.append(version.name)
        log.info("Deleting %s/%s:%s%s", owner, package_name, version.name, suffix)

        if dry_run:
            continue

        try:
            await client.delete_version(owner, package_name, str(version.id))
        except Exception as exc:
            result.failed += 1
            log.warning(
                "Failed to delete %s/%s:%s (id %s): %s",
                owner,
                package_name,
                version.name,
                version.id,
                exc,
            )
        else:
            result.deleted += 1

    return result


async def clean_package(
    client: RegistryClient,
    owner: PackageOwner,
    package_name: str,
    *,
    dry_run: bool,
    result: PackageCleanupResult | None = None,
) -> PackageCleanupResult:
    """Clean every page of `package_name` until the registry returns an empty page.

    Raises `PackageCleanupError` (chained to the cause) when a page
    cannot be listed; no further pages are requested in that case. Progress
    made before the failure stays recorded in `result` when one is passed.
    """

    log.info("Cleaning package %s/%s", owner, package_name)
    result = result or PackageCleanupResult(owner, package_name, dry_run=dry_run)

    page = 1
    while True:
        try:
            versions = await client.list_versions(owner, package_name, page)
        except Exception as exc:
            raise PackageCleanupError(
                owner,
                package_name,
                "Failed to get package versions from github",
            ) from exc
        result.pages_fetched += 1

        if not versions:
            break

        log.debug("Page %d of %s/%s: %d version(s)", page, owner, package_name, len(versions))
        await clean_page_versions(
            client,
            owner,
            package_name,
            versions,
            dry_run=dry_run,
            result=result,
        )
        page += 1

    return result


async def clean_packages(
    client: RegistryClient,
    owner: PackageOwner,
    package_names: Iterable[str],
    *,
    dry_run: bool,
) -> list[PackageCleanupResult]:
    """Clean each package in turn; a failing package does not stop the others."""

    results: list[PackageCleanupResult] = []
    for package_name in package_names:
        result = PackageCleanupResult(owner, package_name, dry_run=dry_run)
        try:
            await clean_package(client, owner, package_name, dry_run=dry_run, result=result)
        except PackageCleanupError as exc:
            log.error("Failed to clean package %s/%s: %s", owner, package_name, exc)
            result.error = exc
        results.append(result)
    return results
