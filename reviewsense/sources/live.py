"""
Live review source.

Delegates to an externally supplied fetcher; no scraping is done here.
"""

from typing import Callable

from reviewsense.core.exceptions import ReviewSourceError, UnsupportedMarketplaceError
from reviewsense.core.logging import get_logger
from reviewsense.models import Review
from reviewsense.sources.base import ReviewSource, extract_domain, is_supported_marketplace

logger = get_logger(__name__)

ReviewFetcher = Callable[[str], list[Review]]


class LiveFetchSource(ReviewSource):
    """
    Review source backed by a real marketplace fetcher.

    The fetcher is injected so that a scraper or marketplace API client can
    be plugged in without touching the engine.
    """

    name = "live"

    def __init__(self, fetcher: ReviewFetcher | None = None):
        """
        Args:
            fetcher: Callable returning the reviews for a URL
        """
        self._fetcher = fetcher

    def supports(self, url: str) -> bool:
        return is_supported_marketplace(url)

    def fetch(self, url: str) -> list[Review]:
        """
        Fetch reviews through the injected fetcher.

        Raises:
            UnsupportedMarketplaceError: The URL is not a supported marketplace.
            ReviewSourceError: No fetcher is configured or the fetcher failed.
        """
        if not self.supports(url):
            domain = extract_domain(url)
            raise UnsupportedMarketplaceError(
                f"This marketplace ({domain}) is not yet supported.",
                domain=domain,
                url=url,
            )

        if self._fetcher is None:
            raise ReviewSourceError(
                "Live review fetching is not available yet.",
                url=url,
            )

        try:
            reviews = self._fetcher(url)
        except ReviewSourceError:
            raise
        except Exception as e:
            raise ReviewSourceError(
                details=f"{type(e).__name__}: {e}",
                url=url,
            ) from e

        logger.info(f"Fetched {len(reviews)} reviews from {extract_domain(url)}")
        return reviews
