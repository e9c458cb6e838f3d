from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

# Probe order is significant: the first path answering 200 wins.
DEFAULT_CANDIDATE_PATHS: Final[tuple[str, ...]] = (
    "/test.xml",
    "/sitemap.xml",
    "/sitemap1.xml",
    "/sitemap.txt",
    "/sitemap_index.xml",
    "/sitemap/",
    "/sitemap",
    "/sitemap-index.xml",
    "/sitemaps/",
    "/sitemaps",
    "/site-map",
    "/sitemap-indexes/",
    "/post-sitemap.xml",
    "/page-sitemap.xml",
    "/category-sitemap.xml",
    "/tag-sitemap.xml",
    "/pages-sitemap.xml",
    "/blog-pages-sitemap.xml",
    "/member-profile-sitemap.xml",
    "/dynamic-pages-sitemap.xml",
    "/other-pages-sitemap.xml",
    "/sitemap.xml.gz",
    "/sitemapindex.xml",
    "/sitemap_index.xml.gz",
    "/sitemap/index.xml",
    "/sitemap.xml",
    "/sitemap_map.html",
    "/wp-sitemap.xml",
    "/other-pages-sitemap.xml",
    "/category-sitemap.xml",
    "/tag-sitemap.xml",
    "/author-sitemap.xml",
    "/post-sitemap",
    "/sitemaps-2-sitemap.xml",
    "/page-sitemap",
)

INDEX_MARKER_PREFIX: Final = "Sitemap index: "


def index_marker(child_url: str) -> str:
    return f"{INDEX_MARKER_PREFIX}{child_url}"


class RequestKind(StrEnum):
    DOMAIN = "domain"
    SITEMAP = "sitemap"


@dataclass(frozen=True, slots=True)
class FetchResult:
    """One response; `content` is the raw body, `text` its charset-decoded view."""

    url: str
    status_code: int
    content: bytes
    text: str


@dataclass(frozen=True, slots=True)
class ParsedSitemap:
    """Both location lists of one sitemap document.

    A document listing page URLs is a leaf; anything else is treated as an index
    of child sitemaps, possibly empty.
    """

    page_urls: tuple[str, ...]
    child_sitemaps: tuple[str, ...]

    @property
    def is_index(self) -> bool:
        return not self.page_urls


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    kind: RequestKind
    sitemap_url: str
    urls: list[str]

    def to_payload(self) -> dict[str, object]:
        return {"type": self.kind.value, "urls": list(self.urls)}
