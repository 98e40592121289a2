"""Registry client: GitHub Packages (container registry).

Uses the REST endpoints under `/{users|orgs}/{owner}/packages/container/...`
to list package versions page by page and delete a single version.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from ghcr_cleaner.adapters.http_client import build_async_client
from ghcr_cleaner.core.config import AppSettings
from ghcr_cleaner.core.domain.models import PackageOwner, PackageVersion
from ghcr_cleaner.core.errors import (
    ConfigurationError,
    InvalidRequestError,
    MalformedResponseError,
    PackageNotFoundError,
    RegistryStatusError,
    RegistryTransportError,
)
from ghcr_cleaner.core.interfaces.registry import RegistryClient

log = logging.getLogger(__name__)

_VERSIONS = TypeAdapter(list[PackageVersion])


def _versions_path(owner: PackageOwner, package_name: str) -> str:
    if not package_name:
        raise InvalidRequestError("Package name must not be empty")
    return f"/{owner.path_segment}/packages/container/{quote(package_name, safe='')}/versions"


class GitHubRegistryClient(RegistryClient):
    """`RegistryClient` backed by the GitHub REST API.

    Use as an async context manager so the underlying httpx client is closed.
    """

    def __init__(
        self,
        token: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        log.debug("User-Agent: %s", self._settings.user_agent)
        try:
            self._client = build_async_client(
                self._settings,
                token=token,
                transport=transport,
            )
        except ValueError as exc:
            # Non-ASCII tokens cannot be encoded into a header.
            raise ConfigurationError("Failed to create github client") from exc

    async def __aenter__(self) -> GitHubRegistryClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise RegistryTransportError(f"Failed to send request: {exc}") from exc

    async def list_versions(
        self,
        owner: PackageOwner,
        package_name: str,
        page: int = 1,
    ) -> list[PackageVersion]:
        if page < 1:
            raise ValueError("page must be a positive integer")

        response = await self._send(
            "GET",
            _versions_path(owner, package_name),
            params={"page": page},
        )
        log.debug("GET %s -> %s", response.request.url, response.status_code)

        if response.status_code == 404:
            raise PackageNotFoundError(owner, package_name)
        if not response.is_success:
            raise RegistryStatusError(response.status_code)

        try:
            return _VERSIONS.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise MalformedResponseError(f"Failed to parse reply as json: {exc}") from exc

    async def delete_version(
        self,
        owner: PackageOwner,
        package_name: str,
        version_id: str | int,
    ) -> None:
        # The endpoint answers 204 even when the version id does not exist.
        response = await self._send(
            "DELETE",
            f"{_versions_path(owner, package_name)}/{version_id}",
        )
        log.debug("DELETE %s -> %s", response.request.url, response.status_code)

        if not response.is_success:
            raise RegistryStatusError(response.status_code)
