from tests.test_utils.fakes.detection import FakeFetcher

__all__ = ["FakeFetcher"]
