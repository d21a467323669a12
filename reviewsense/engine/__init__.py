"""
Review analysis engine.

Parses raw review text, summarizes review sets and provides reviews for
marketplace URLs.

Example:
    ```python
    from reviewsense.engine import analyze_reviews, parse_raw_reviews

    reviews = parse_raw_reviews(text)
    if reviews:
        result = analyze_reviews(reviews)
        print(result.verdict, result.score)
    ```
"""

from __future__ import annotations

from reviewsense.engine.ai_summarizer import AISummarizer
from reviewsense.engine.parser import ReviewParser, parse_raw_reviews
from reviewsense.engine.scorer import adjust_score, infer_rating, score_reviews
from reviewsense.engine.summarizer import BaseSummarizer, RuleBasedSummarizer, Verdict
from reviewsense.models import AnalysisResult, Review, SummaryLimits
from reviewsense.sources import ReviewFetcher, get_review_source
from reviewsense.utils.config import Settings, get_settings


def create_summarizer(
    settings: Settings | None = None,
    limits: SummaryLimits | None = None,
) -> BaseSummarizer:
    """
    Build the summarizer selected by configuration.

    Args:
        settings: Settings (cached settings when None)
        limits: Result caps (taken from settings when None)

    Returns:
        AISummarizer with rule-based fallback, or RuleBasedSummarizer
    """
    settings = settings or get_settings()
    limits = limits or SummaryLimits.from_settings(settings)

    if not settings.use_ai_summarizer:
        return RuleBasedSummarizer(limits)

    return AISummarizer(
        model_name=settings.openai_model,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
        timeout=settings.ai_timeout,
        openai_api_key=settings.openai_api_key,
        limits=limits,
    )


def analyze_reviews(
    reviews: list[Review],
    settings: Settings | None = None,
    limits: SummaryLimits | None = None,
) -> AnalysisResult:
    """
    Summarize a non-empty review set; never fails on AI outages.

    Raises:
        ValueError: The review set is empty.
    """
    return create_summarizer(settings, limits).summarize(reviews)


def extract_reviews_from_url(
    url: str,
    settings: Settings | None = None,
    fetcher: ReviewFetcher | None = None,
) -> list[Review]:
    """Reviews for a product URL from the configured review source."""
    settings = settings or get_settings()
    source = get_review_source(url, settings.live_fetch_enabled, fetcher)
    return source.fetch(url)


__all__ = [
    # Boundary
    "parse_raw_reviews",
    "analyze_reviews",
    "extract_reviews_from_url",
    "create_summarizer",
    # Components
    "ReviewParser",
    "BaseSummarizer",
    "RuleBasedSummarizer",
    "AISummarizer",
    "Verdict",
    "infer_rating",
    "adjust_score",
    "score_reviews",
]
