from __future__ import annotations

from tests.test_utils.strategies.url import domain_strategy, host_strategy, url_lists
from tests.test_utils.strategies.xml import xml_strategy

__all__ = [
    "domain_strategy",
    "host_strategy",
    "url_lists",
    "xml_strategy",
]
