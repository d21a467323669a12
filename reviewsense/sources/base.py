"""
Base review source with URL helpers.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlparse

from reviewsense.models import Review

# Marketplaces reviews can be requested for
SUPPORTED_MARKETPLACES = ("amazon.com", "ebay.com", "aliexpress.com")


def extract_domain(url: str) -> str:
    """
    Host of a URL without a leading ``www.``.

    Args:
        url: Any URL

    Returns:
        Domain, or "unknown" when the URL has no host
    """
    try:
        host = urlparse(url).hostname
    except ValueError:
        return "unknown"
    if not host:
        return "unknown"
    return host[4:] if host.startswith("www.") else host


def is_supported_marketplace(url: str) -> bool:
    """Whether the URL points at one of the supported marketplaces."""
    domain = extract_domain(url)
    return any(marketplace in domain for marketplace in SUPPORTED_MARKETPLACES)


class ReviewSource(ABC):
    """
    Abstract base class for review sources.

    A source turns a product URL into a list of reviews. Implementations
    decide whether the reviews are fetched or synthesized.
    """

    name: str = "base"

    @abstractmethod
    def fetch(self, url: str) -> list[Review]:
        """
        Return the reviews for a product URL.

        Args:
            url: The product URL.

        Returns:
            Reviews in source order.
        """
        pass

    def supports(self, url: str) -> bool:
        """Whether this source can handle the URL."""
        return True
