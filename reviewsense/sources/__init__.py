# Review sources module

from .base import (
    ReviewSource,
    SUPPORTED_MARKETPLACES,
    extract_domain,
    is_supported_marketplace,
)
from .live import LiveFetchSource, ReviewFetcher
from .mock import DeterministicMockSource, generate_reviews_from_url, url_hash


def get_review_source(
    url: str,
    live_fetch_enabled: bool = False,
    fetcher: ReviewFetcher | None = None,
) -> ReviewSource:
    """
    Factory function to get the review source for a URL.

    Live fetching is used only when it is enabled and the URL belongs to a
    supported marketplace; every other URL gets deterministic mock reviews.

    Args:
        url: The product URL.
        live_fetch_enabled: Whether live fetching is switched on.
        fetcher: Fetcher handed to the live source.

    Returns:
        An instance of the appropriate review source.
    """
    if live_fetch_enabled:
        live = LiveFetchSource(fetcher)
        if live.supports(url):
            return live
    return DeterministicMockSource()


__all__ = [
    # Base
    "ReviewSource",
    "SUPPORTED_MARKETPLACES",
    "extract_domain",
    "is_supported_marketplace",
    # Implementations
    "DeterministicMockSource",
    "LiveFetchSource",
    "ReviewFetcher",
    "generate_reviews_from_url",
    "url_hash",
    # Factory
    "get_review_source",
]
