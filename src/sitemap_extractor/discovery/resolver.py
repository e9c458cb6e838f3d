from __future__ import annotations

from typing import TYPE_CHECKING

from sitemap_extractor.discovery.errors import SitemapNestingError
from sitemap_extractor.discovery.models import index_marker
from sitemap_extractor.discovery.parsing import parse_sitemap
from sitemap_extractor.observability import get_logger

if TYPE_CHECKING:
    from sitemap_extractor.discovery.http_fetcher import Fetcher
    from sitemap_extractor.discovery.models import ParsedSitemap

logger = get_logger(__name__)


class SitemapResolver:
    """Flatten a sitemap, following nested indexes, into one ordered URL list.

    Every child of an index contributes a marker entry followed by its own
    resolved URLs. The first failing child aborts the whole resolution.
    Nesting is not capped; an index that reaches back to itself ends in
    SitemapNestingError once the interpreter's recursion limit is hit.
    """

    def __init__(self, *, fetcher: Fetcher) -> None:
        self._fetcher = fetcher

    async def resolve(self, address: str) -> list[str]:
        try:
            return await self._resolve(address)
        except RecursionError as exc:
            logger.warning("sitemap_nesting_exhausted", url=address)
            raise SitemapNestingError(address) from exc

    async def _resolve(self, address: str) -> list[str]:
        parsed = await self._fetch_and_parse(address)

        if not parsed.is_index:
            logger.debug("sitemap_leaf_resolved", url=address, urls=len(parsed.page_urls))
            return list(parsed.page_urls)

        logger.debug("sitemap_index_resolving", url=address, children=len(parsed.child_sitemaps))
        urls: list[str] = []
        for child_url in parsed.child_sitemaps:
            child_urls = await self._resolve(child_url)
            urls.append(index_marker(child_url))
            urls.extend(child_urls)
        return urls

    async def _fetch_and_parse(self, address: str) -> ParsedSitemap:
        # Status code is not inspected.
        result = await self._fetcher.fetch(address)
        return parse_sitemap(result.content, address)
