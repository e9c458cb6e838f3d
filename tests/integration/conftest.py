from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sitemap_extractor.discovery import HttpFetcher, SitemapResolver, build_client

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture
async def fetcher() -> AsyncIterator[HttpFetcher]:
    async with build_client() as client:
        yield HttpFetcher(client)


@pytest.fixture
def resolver(fetcher: HttpFetcher) -> SitemapResolver:
    return SitemapResolver(fetcher=fetcher)
