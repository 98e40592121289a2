"""Builds the httpx client used for every registry request.

A `transport` (e.g. `httpx.MockTransport`) can be injected for tests.
"""

from __future__ import annotations

import httpx

from ghcr_cleaner.core.config import AppSettings

GITHUB_ACCEPT = "application/vnd.github.v3+json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    token: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` authenticated against the GitHub API.

    The headers are fixed here, once; the client carries no other state.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "Accept": GITHUB_ACCEPT,
        "Authorization": f"Bearer {token}",
        "User-Agent": settings.user_agent,
    }
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
