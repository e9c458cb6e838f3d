"""Shared test utilities."""

from tests.test_utils import factories, fakes, helpers, strategies

__all__ = [
    "factories",
    "fakes",
    "helpers",
    "strategies",
]
