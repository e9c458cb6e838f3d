from sitemap_extractor.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
