from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from ghcr_cleaner.core.domain.models import PackageOwner, PackageVersion


def make_version(version_id: int, tags: list[str] | None = None) -> PackageVersion:
    return PackageVersion.model_validate(
        {
            "id": version_id,
            "name": f"sha256:foobar{version_id}",
            "metadata": {
                "package_type": "container",
                "container": {"tags": list(tags or [])},
            },
        }
    )


@dataclass
class FakeRegistryClient:
    """In-memory `RegistryClient` recording every call."""

    pages: dict[str, list[list[PackageVersion]]] = field(default_factory=dict)
    list_errors: dict[tuple[str, int], Exception] = field(default_factory=dict)
    delete_errors: dict[str, Exception] = field(default_factory=dict)
    list_calls: list[tuple[PackageOwner, str, int]] = field(default_factory=list)
    delete_calls: list[tuple[PackageOwner, str, str]] = field(default_factory=list)

    async def list_versions(
        self,
        owner: PackageOwner,
        package_name: str,
        page: int = 1,
    ) -> list[PackageVersion]:
        self.list_calls.append((owner, package_name, page))
        error = self.list_errors.get((package_name, page))
        if error is not None:
            raise error
        pages = self.pages.get(package_name, [])
        if page > len(pages):
            return []
        return pages[page - 1]

    async def delete_version(
        self,
        owner: PackageOwner,
        package_name: str,
        version_id: str | int,
    ) -> None:
        self.delete_calls.append((owner, package_name, version_id))
        error = self.delete_errors.get(version_id)
        if error is not None:
            raise error

    @property
    def deleted_ids(self) -> list[str]:
        return [version_id for _, _, version_id in self.delete_calls]


@pytest.fixture
def user() -> PackageOwner:
    return PackageOwner.user("user")


@pytest.fixture
def org() -> PackageOwner:
    return PackageOwner.organization("org")


@pytest.fixture
def fake_client() -> FakeRegistryClient:
    return FakeRegistryClient()
