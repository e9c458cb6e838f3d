from __future__ import annotations

from enum import StrEnum
from typing import Protocol

import httpx

from sitemap_extractor.discovery.errors import FetchFailedError
from sitemap_extractor.discovery.models import FetchResult


class HTTPHeader(StrEnum):
    USER_AGENT = "User-Agent"
    ACCEPT = "Accept"


DEFAULT_USER_AGENT = "sitemap-extractor/0.1"
_ACCEPT = "application/xml,text/xml;q=0.9,text/plain;q=0.8,*/*;q=0.5"


class Fetcher(Protocol):
    async def fetch(self, url: str, *, timeout: float | None = None) -> FetchResult: ...


def build_client(*, user_agent: str = DEFAULT_USER_AGENT, timeout: float | None = None) -> httpx.AsyncClient:
    """Client used by every fetch; `timeout=None` disables the default deadline."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={HTTPHeader.USER_AGENT: user_agent, HTTPHeader.ACCEPT: _ACCEPT},
    )


class HttpFetcher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str, *, timeout: float | None = None) -> FetchResult:
        """GET `url` without inspecting the status code.

        Transport failures are raised as FetchFailedError; `timeout` overrides the
        client default for this request only.
        """
        try:
            if timeout is None:
                response = await self._client.get(url)
            else:
                response = await self._client.get(url, timeout=timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchFailedError(url, str(exc) or type(exc).__name__) from exc

        return FetchResult(url=url, status_code=response.status_code, content=response.content, text=response.text)
