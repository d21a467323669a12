"""
Core module.

Shared logging and exception handling.
"""

from reviewsense.core.logging import get_logger, log_exception, setup_logging
from reviewsense.core.exceptions import (
    ReviewAnalystError,
    InputValidationError,
    NoReviewsFoundError,
    APIError,
    RateLimitError,
    AuthenticationError,
    ResponseFormatError,
    ReviewSourceError,
    UnsupportedMarketplaceError,
)

__all__ = [
    # Logging
    "get_logger",
    "log_exception",
    "setup_logging",
    # Exceptions
    "ReviewAnalystError",
    "InputValidationError",
    "NoReviewsFoundError",
    "APIError",
    "RateLimitError",
    "AuthenticationError",
    "ResponseFormatError",
    "ReviewSourceError",
    "UnsupportedMarketplaceError",
]
