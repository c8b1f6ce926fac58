"""Landing page fetching, kept apart from the rule engine."""

from adcheck.fetch.page import PageFetcher, extract_page_content, fetch_page

__all__ = [
    "PageFetcher",
    "extract_page_content",
    "fetch_page",
]
