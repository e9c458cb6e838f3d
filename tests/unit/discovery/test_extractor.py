from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
import respx

from sitemap_extractor.config import ServiceConfig
from sitemap_extractor.discovery import (
    InvalidSitemapUrlError,
    RequestKind,
    SitemapExtractor,
    SitemapLocator,
    SitemapNotFoundError,
    SitemapResolver,
    build_client,
    build_extractor,
    index_marker,
)
from tests.test_utils.factories import FetchResultFactory
from tests.test_utils.fakes import FakeFetcher
from tests.test_utils.helpers import build_sitemap_index, build_urlset, site_urls

if TYPE_CHECKING:
    from collections.abc import Callable

    from sitemap_extractor.discovery.models import FetchResult


def _extractor(fetcher: FakeFetcher, *paths: str) -> SitemapExtractor:
    return SitemapExtractor(
        locator=SitemapLocator(fetcher=fetcher, candidate_paths=paths or ("/sitemap.xml",)),
        resolver=SitemapResolver(fetcher=fetcher),
    )


async def test_from_domain_locates_then_resolves(robots_with_sitemap: Callable[[str], FetchResult]) -> None:
    urls = site_urls("example.com")
    declared = "https://example.com/sitemap_index.xml"
    child = "https://example.com/posts.xml"
    fetcher = FakeFetcher(
        {
            urls.robots: robots_with_sitemap(declared),
            declared: FetchResultFactory.build(text=build_sitemap_index([child])),
            child: FetchResultFactory.build(text=build_urlset(["https://example.com/p/1"])),
        }
    )

    result = await _extractor(fetcher).from_domain("example.com")

    assert result.kind is RequestKind.DOMAIN
    assert result.sitemap_url == declared
    assert result.urls == [index_marker(child), "https://example.com/p/1"]
    assert result.to_payload() == {"type": "domain", "urls": [index_marker(child), "https://example.com/p/1"]}


async def test_from_domain_propagates_locate_failure(robots_allow_all: FetchResult) -> None:
    urls = site_urls("example.com")
    fetcher = FakeFetcher({urls.robots: robots_allow_all})

    with pytest.raises(SitemapNotFoundError):
        await _extractor(fetcher).from_domain("example.com")


async def test_from_sitemap_resolves_directly() -> None:
    address = "https://example.com/sitemap.xml"
    fetcher = FakeFetcher({address: FetchResultFactory.build(text=build_urlset(["/a"]))})

    result = await _extractor(fetcher).from_sitemap(address)

    assert result.kind is RequestKind.SITEMAP
    assert result.to_payload() == {"type": "sitemap", "urls": ["/a"]}
    assert fetcher.fetched_urls == [address]


@pytest.mark.parametrize("address", ["", "example.com/sitemap.xml", "/sitemap.xml", "https://"])
async def test_from_sitemap_rejects_non_absolute_url(address: str) -> None:
    fetcher = FakeFetcher({})

    with pytest.raises(InvalidSitemapUrlError):
        await _extractor(fetcher).from_sitemap(address)

    assert fetcher.fetched_urls == []


@respx.mock
async def test_build_extractor_wires_config() -> None:
    config = ServiceConfig(candidate_paths=("/custom.xml",), probe_timeout=1.0)
    respx.get("https://example.com/robots.txt").mock(return_value=httpx.Response(404))
    respx.get("https://example.com/custom.xml").mock(return_value=httpx.Response(200, text=build_urlset(["/only"])))

    async with build_client() as client:
        result = await build_extractor(client, config).from_domain("example.com")

    assert result.sitemap_url == "https://example.com/custom.xml"
    assert result.urls == ["/only"]
