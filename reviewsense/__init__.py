"""
ReviewSense - product review analysis engine.
"""

from reviewsense.engine import analyze_reviews, extract_reviews_from_url, parse_raw_reviews
from reviewsense.models import AnalysisResult, Review, SummaryLimits, Theme

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "Review",
    "SummaryLimits",
    "Theme",
    "analyze_reviews",
    "extract_reviews_from_url",
    "parse_raw_reviews",
]
