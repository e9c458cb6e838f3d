from __future__ import annotations

import asyncio
from http import HTTPStatus
from typing import TYPE_CHECKING

from sitemap_extractor.discovery.errors import FetchFailedError, SitemapNotFoundError
from sitemap_extractor.discovery.models import DEFAULT_CANDIDATE_PATHS
from sitemap_extractor.discovery.parsing import candidate_urls, extract_robots_sitemap, normalize_domain, robots_url
from sitemap_extractor.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sitemap_extractor.discovery.http_fetcher import Fetcher
    from sitemap_extractor.discovery.models import FetchResult

logger = get_logger(__name__)

DEFAULT_PROBE_TIMEOUT = 3.0


class SitemapLocator:
    """Find the sitemap address of a domain.

    robots.txt is consulted first; without a `Sitemap:` directive the candidate
    paths are probed one by one and the first 200 response wins. A transport
    error on any probe aborts the lookup, a non-200 status only moves on.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        candidate_paths: Sequence[str] = DEFAULT_CANDIDATE_PATHS,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
    ) -> None:
        self._fetcher = fetcher
        self._candidate_paths = tuple(candidate_paths)
        self._probe_timeout = probe_timeout

    @property
    def candidate_paths(self) -> tuple[str, ...]:
        return self._candidate_paths

    async def locate(self, domain: str) -> str:
        host = normalize_domain(domain)

        declared = await self._read_robots_sitemap(host)
        if declared is not None:
            logger.info("sitemap_declared_in_robots", host=host, sitemap_url=declared)
            return declared

        found = await self._probe_candidates(host)
        if found is not None:
            logger.info("sitemap_candidate_matched", host=host, sitemap_url=found)
            return found

        logger.info("sitemap_not_found", host=host, probes=len(self._candidate_paths))
        raise SitemapNotFoundError(host)

    async def _read_robots_sitemap(self, host: str) -> str | None:
        url = robots_url(host)
        result = await self._probe(url)
        logger.debug("robots_fetched", url=url, status_code=result.status_code)
        if result.status_code != HTTPStatus.OK:
            return None
        return extract_robots_sitemap(result.text)

    async def _probe_candidates(self, host: str) -> str | None:
        for url in candidate_urls(host, self._candidate_paths):
            result = await self._probe(url)
            logger.debug("sitemap_candidate_probed", url=url, status_code=result.status_code)
            if result.status_code == HTTPStatus.OK:
                return url
        return None

    async def _probe(self, url: str) -> FetchResult:
        # httpx times each phase separately; the deadline also covers a slow body.
        try:
            async with asyncio.timeout(self._probe_timeout):
                return await self._fetcher.fetch(url, timeout=self._probe_timeout)
        except TimeoutError as exc:
            raise FetchFailedError(url, f"no complete response within {self._probe_timeout}s") from exc
