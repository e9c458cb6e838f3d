from tests.test_utils.factories.detection import SAMPLE_BASE_URL, SAMPLE_URLSET, FetchResultFactory

__all__ = [
    "SAMPLE_BASE_URL",
    "SAMPLE_URLSET",
    "FetchResultFactory",
]
