from sitemap_extractor.api.app import PONG_TEXT, USAGE_TEXT, create_app

__all__ = ["PONG_TEXT", "USAGE_TEXT", "create_app"]
