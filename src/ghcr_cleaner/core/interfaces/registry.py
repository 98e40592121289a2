"""Package registry contract.

The cleanup workflow only needs two operations; the httpx adapter and the
in-memory test double both satisfy this Protocol structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ghcr_cleaner.core.domain.models import PackageOwner, PackageVersion


@runtime_checkable
class RegistryClient(Protocol):
    """Minimal contract for a container package registry.

    Design rules:
    - Both methods are async because they do I/O (HTTP).
    - Failures are raised as `RegistryError` subclasses.
    """

    async def list_versions(
        self,
        owner: PackageOwner,
        package_name: str,
        page: int = 1,
    ) -> list[PackageVersion]:
        """Return one page of versions; an empty list means no more pages."""

        ...

    async def delete_version(
        self,
        owner: PackageOwner,
        package_name: str,
        version_id: str | int,
    ) -> None:
        """Delete one version. Success does not prove the version existed."""

        ...
