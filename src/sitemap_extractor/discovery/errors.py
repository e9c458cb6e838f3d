"""Errors raised while locating and resolving sitemaps."""

from __future__ import annotations


class SitemapError(Exception):
    """Base class for every failure of the discovery core."""


class InvalidDomainError(SitemapError):
    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Failed to validate {domain}")


class InvalidSitemapUrlError(SitemapError):
    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Invalid sitemap URL: {address}")


class FetchFailedError(SitemapError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class SitemapNotFoundError(SitemapError):
    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Couldn't find sitemap for {domain}")


class ParseFailedError(SitemapError):
    def __init__(self, url: str | None, reason: str) -> None:
        self.url = url
        self.reason = reason
        target = url or "sitemap"
        super().__init__(f"Failed to parse {target}: {reason}")


class SitemapNestingError(SitemapError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Sitemap indexes nested too deeply under {url}")
