"""
Custom exceptions.

Defines the exception hierarchy used across the project.
"""

from typing import Optional


class ReviewAnalystError(Exception):
    """Base exception for the review analysis engine."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        """
        Args:
            message: Error message
            details: Extra details
            suggestion: How the user can fix it
        """
        super().__init__(message)
        self.message = message
        self.details = details
        self.suggestion = suggestion

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"details: {self.details}")
        if self.suggestion:
            parts.append(f"suggestion: {self.suggestion}")
        return " | ".join(parts)


# =============================================================================
# Input errors
# =============================================================================


class InputValidationError(ReviewAnalystError):
    """Rejected caller input (empty, too short, too large, wrong type)."""

    def __init__(
        self,
        message: str = "The submitted input is not valid.",
        field: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        if field and not self.details:
            self.details = f"field: {field}"


class NoReviewsFoundError(ReviewAnalystError):
    """The input was accepted but contained nothing that parses as a review."""

    def __init__(
        self,
        message: str = "No valid reviews found.",
        **kwargs,
    ):
        kwargs.setdefault(
            "suggestion",
            "Make sure the input contains review text, one review per line.",
        )
        super().__init__(message, **kwargs)


# =============================================================================
# External AI service errors
# =============================================================================


class APIError(ReviewAnalystError):
    """Completion API call failed."""

    def __init__(
        self,
        message: str = "The completion API call failed.",
        status_code: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class RateLimitError(APIError):
    """Completion API rate limit exceeded."""

    def __init__(
        self,
        message: str = "The completion API rate limit was exceeded.",
        **kwargs,
    ):
        super().__init__(
            message,
            status_code=429,
            suggestion="Wait a moment and try again.",
            **kwargs,
        )


class AuthenticationError(APIError):
    """Completion API rejected the credential."""

    def __init__(
        self,
        message: str = "The completion API rejected the credential.",
        **kwargs,
    ):
        super().__init__(
            message,
            status_code=401,
            suggestion="Check OPENAI_API_KEY in the .env file.",
            **kwargs,
        )


class ResponseFormatError(APIError):
    """Completion API answered with something that is not the expected JSON."""

    def __init__(
        self,
        message: str = "The completion API returned a malformed reply.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


# =============================================================================
# Review source errors
# =============================================================================


class ReviewSourceError(ReviewAnalystError):
    """Reviews could not be obtained for a URL."""

    def __init__(
        self,
        message: str = "Reviews could not be fetched for this URL.",
        url: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault(
            "suggestion",
            "Paste the reviews manually or upload a file instead.",
        )
        super().__init__(message, **kwargs)
        self.url = url


class UnsupportedMarketplaceError(ReviewSourceError):
    """The URL does not point at a supported marketplace."""

    def __init__(
        self,
        message: str = "This marketplace is not supported yet.",
        domain: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.domain = domain
        if domain and not self.details:
            self.details = f"domain: {domain}"
