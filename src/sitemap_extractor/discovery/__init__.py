from sitemap_extractor.discovery.errors import (
    FetchFailedError,
    InvalidDomainError,
    InvalidSitemapUrlError,
    ParseFailedError,
    SitemapError,
    SitemapNestingError,
    SitemapNotFoundError,
)
from sitemap_extractor.discovery.extractor import SitemapExtractor, build_extractor, is_absolute_url
from sitemap_extractor.discovery.http_fetcher import Fetcher, HttpFetcher, build_client
from sitemap_extractor.discovery.locator import SitemapLocator
from sitemap_extractor.discovery.models import (
    DEFAULT_CANDIDATE_PATHS,
    ExtractionResult,
    FetchResult,
    ParsedSitemap,
    RequestKind,
    index_marker,
)
from sitemap_extractor.discovery.parsing import extract_robots_sitemap, normalize_domain, parse_sitemap
from sitemap_extractor.discovery.resolver import SitemapResolver

__all__ = [
    "DEFAULT_CANDIDATE_PATHS",
    "ExtractionResult",
    "FetchFailedError",
    "FetchResult",
    "Fetcher",
    "HttpFetcher",
    "InvalidDomainError",
    "InvalidSitemapUrlError",
    "ParseFailedError",
    "ParsedSitemap",
    "RequestKind",
    "SitemapError",
    "SitemapExtractor",
    "SitemapLocator",
    "SitemapNestingError",
    "SitemapNotFoundError",
    "SitemapResolver",
    "build_client",
    "build_extractor",
    "extract_robots_sitemap",
    "index_marker",
    "is_absolute_url",
    "normalize_domain",
    "parse_sitemap",
]
