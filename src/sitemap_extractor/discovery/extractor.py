from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlparse

from sitemap_extractor.discovery.errors import InvalidSitemapUrlError
from sitemap_extractor.discovery.http_fetcher import HttpFetcher
from sitemap_extractor.discovery.locator import SitemapLocator
from sitemap_extractor.discovery.models import ExtractionResult, RequestKind
from sitemap_extractor.discovery.resolver import SitemapResolver

if TYPE_CHECKING:
    import httpx

    from sitemap_extractor.config import ServiceConfig


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


class SitemapExtractor:
    def __init__(self, *, locator: SitemapLocator, resolver: SitemapResolver) -> None:
        self._locator = locator
        self._resolver = resolver

    async def locate(self, domain: str) -> str:
        return await self._locator.locate(domain)

    async def from_domain(self, domain: str) -> ExtractionResult:
        sitemap_url = await self.locate(domain)
        return await self.from_located(sitemap_url)

    async def from_located(self, sitemap_url: str) -> ExtractionResult:
        urls = await self._resolver.resolve(sitemap_url)
        return ExtractionResult(kind=RequestKind.DOMAIN, sitemap_url=sitemap_url, urls=urls)

    async def from_sitemap(self, address: str) -> ExtractionResult:
        if not is_absolute_url(address):
            raise InvalidSitemapUrlError(address)
        urls = await self._resolver.resolve(address)
        return ExtractionResult(kind=RequestKind.SITEMAP, sitemap_url=address, urls=urls)


def build_extractor(client: httpx.AsyncClient, config: ServiceConfig) -> SitemapExtractor:
    fetcher = HttpFetcher(client)
    locator = SitemapLocator(
        fetcher=fetcher,
        candidate_paths=config.candidate_paths,
        probe_timeout=config.probe_timeout,
    )
    resolver = SitemapResolver(fetcher=fetcher)
    return SitemapExtractor(locator=locator, resolver=resolver)
