"""Domain normalization, robots.txt and sitemap XML parsing."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from sitemap_extractor.discovery.errors import InvalidDomainError, ParseFailedError
from sitemap_extractor.discovery.models import ParsedSitemap

if TYPE_CHECKING:
    from collections.abc import Iterable

_SCHEMES = ("http://", "https://")
_DEFAULT_SCHEME = "http://"
_SITEMAP_DIRECTIVE = "Sitemap:"


def normalize_domain(domain: str) -> str:
    """Return the host (with port, without userinfo) a domain or URL points at."""
    if not domain:
        raise InvalidDomainError(domain)

    candidate = domain if domain.startswith(_SCHEMES) else f"{_DEFAULT_SCHEME}{domain}"
    try:
        parsed = urlsplit(candidate)
        _ = parsed.port
    except ValueError as exc:
        raise InvalidDomainError(domain) from exc

    host = parsed.netloc.rpartition("@")[2]
    if not host or any(char.isspace() for char in host):
        raise InvalidDomainError(domain)
    return host


def robots_url(host: str) -> str:
    return f"https://{host}/robots.txt"


def candidate_urls(host: str, paths: Iterable[str]) -> list[str]:
    return [f"https://{host}{path}" for path in paths]


def extract_robots_sitemap(robots_txt: str) -> str | None:
    """Return the address declared by the first `Sitemap:` line, if any.

    Only the first matching line counts, even when its value is empty.
    """
    for line in robots_txt.split("\n"):
        if not line.startswith(_SITEMAP_DIRECTIVE):
            continue
        value = line.removeprefix(_SITEMAP_DIRECTIVE)
        value = value.removeprefix(" ").strip()
        return value or None
    return None


def parse_sitemap(content: bytes | str, sitemap_url: str | None = None) -> ParsedSitemap:
    """Parse a `urlset` or `sitemapindex` document into both location lists.

    Pass the raw bytes so the document's own XML declaration picks the encoding.
    """
    try:
        root = ET.fromstring(content)  # noqa: S314
    except (ET.ParseError, ValueError) as exc:
        # expat raises ValueError for declared multi-byte encodings it cannot map.
        raise ParseFailedError(sitemap_url, str(exc)) from exc

    return ParsedSitemap(
        page_urls=tuple(_find_locs(root, "url")),
        child_sitemaps=tuple(_find_locs(root, "sitemap")),
    )


def _find_locs(root: ET.Element, child_tag: str) -> list[str]:
    locs: list[str] = []
    for elem in root:
        if _strip_ns(elem.tag) != child_tag:
            continue
        loc = _find_loc(elem)
        if loc:
            locs.append(loc)
    return locs


def _find_loc(elem: ET.Element) -> str | None:
    for child in elem:
        if _strip_ns(child.tag) == "loc":
            return (child.text or "").strip() or None
    return None


def _strip_ns(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag
