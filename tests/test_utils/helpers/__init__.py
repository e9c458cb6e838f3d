"""Test helpers."""

from tests.test_utils.helpers.detection import (
    SiteUrls,
    assert_not_fetched,
    build_sitemap_index,
    build_urlset,
    site_urls,
)
from tests.test_utils.helpers.fixture import fixture_path, read_fixture

__all__ = [
    "SiteUrls",
    "assert_not_fetched",
    "build_sitemap_index",
    "build_urlset",
    "fixture_path",
    "read_fixture",
    "site_urls",
]
