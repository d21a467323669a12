"""
Review analysis service.

Validates caller input (pasted text, uploaded files, product URLs), runs the
engine and wraps the summary in a report envelope.
"""

from __future__ import annotations

import json
import random
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from reviewsense.core.exceptions import InputValidationError, NoReviewsFoundError
from reviewsense.core.logging import get_logger
from reviewsense.engine import create_summarizer
from reviewsense.engine.parser import ReviewParser
from reviewsense.engine.summarizer import BaseSummarizer
from reviewsense.models import AnalysisResult, Review
from reviewsense.sources import ReviewSource, extract_domain, get_review_source
from reviewsense.utils.config import Settings, get_settings

logger = get_logger(__name__)

ALLOWED_CONTENT_TYPES = ("text/csv", "application/json", "text/plain")

# Keys that hold the review body in uploaded JSON objects
JSON_TEXT_KEYS = ("text", "comment", "review")

# URL reports keep at most this many raw reviews
URL_SAMPLE_LIMIT = 10

SOURCE_PASTED_TEXT = "pasted-text"
SOURCE_UPLOADED_FILE = "uploaded-file"

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")
SLUG_MAX_LENGTH = 40


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_slug(base: str, rng: random.Random | None = None) -> str:
    """
    URL-safe id from a base string plus a short random suffix.

    Args:
        base: Human-readable base ("manual-reviews", a URL, a file name)
        rng: Random source for the suffix

    Returns:
        Slug such as "manual-reviews-3f9a1c"
    """
    slug = _SLUG_INVALID.sub("-", base.lower()).strip("-")[:SLUG_MAX_LENGTH].rstrip("-")
    suffix = f"{(rng or random).getrandbits(24):06x}"
    return f"{slug or 'analysis'}-{suffix}"


# =============================================================================
# Report envelope
# =============================================================================


@dataclass
class ProductInfo:
    """What the analyzed reviews are about."""

    title: str
    image: str | None = None
    source_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "image": self.image, "sourceUrl": self.source_url}


@dataclass
class ReviewStats:
    """Statistics of the analyzed review set."""

    reviews_total: int
    date_from: str | None = None
    date_to: str | None = None
    sources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reviewsTotal": self.reviews_total,
            "dateFrom": self.date_from,
            "dateTo": self.date_to,
            "sources": list(self.sources),
        }


@dataclass
class AnalysisReport:
    """Response envelope around an AnalysisResult."""

    id: str
    product: ProductInfo
    stats: ReviewStats
    summary: AnalysisResult
    raw_sample_kept: int
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON response shape."""
        return {
            "id": self.id,
            "product": self.product.to_dict(),
            "stats": self.stats.to_dict(),
            "summary": self.summary.to_dict(),
            "analyzer": self.summary.source,
            "rawSampleKept": self.raw_sample_kept,
            "timestamp": self.timestamp.isoformat(),
        }


# =============================================================================
# File content extraction
# =============================================================================


def _review_text_from_item(item: Any) -> str:
    if isinstance(item, dict):
        for key in JSON_TEXT_KEYS:
            value = item.get(key)
            if value:
                return str(value)
    if isinstance(item, str):
        return item
    return json.dumps(item, ensure_ascii=False)


def extract_text_from_json(data: Any) -> str:
    """
    Flatten uploaded JSON into review text.

    Accepts a list of reviews, an object with a ``reviews`` list, or a
    single review object. Reviews are separated by blank lines.
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("reviews"), list):
        items = data["reviews"]
    else:
        return _review_text_from_item(data)
    return "\n\n".join(_review_text_from_item(item) for item in items)


def extract_text_from_file(content: bytes, content_type: str) -> str:
    """
    Decode an uploaded file into review text.

    Raises:
        InputValidationError: The file cannot be decoded or parsed.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputValidationError(
            "Failed to parse file content. Please check the file format.",
            field="file",
            details=str(e),
        ) from e

    if content_type != "application/json":
        return text

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputValidationError(
            "Failed to parse file content. Please check the file format.",
            field="file",
            details=str(e),
        ) from e
    return extract_text_from_json(data)


# =============================================================================
# Service
# =============================================================================


class ReviewAnalysisService:
    """Entry point for callers that hold raw text, files or URLs."""

    def __init__(
        self,
        settings: Settings | None = None,
        summarizer: BaseSummarizer | None = None,
        source_factory: Callable[[str], ReviewSource] | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            settings: Settings (cached settings when None)
            summarizer: Summarizer to use (selected from settings when None)
            source_factory: Builds the review source for a URL
            clock: Returns the report timestamp
            rng: Random source for placeholder fields and report ids
        """
        self.settings = settings or get_settings()
        self.summarizer = summarizer or create_summarizer(self.settings)
        self._source_factory = source_factory or (
            lambda url: get_review_source(url, self.settings.live_fetch_enabled)
        )
        self._clock = clock or _utc_now
        self._rng = rng or random.Random()
        self.parser = ReviewParser(rng=self._rng)

    def _build_report(
        self,
        slug_base: str,
        product: ProductInfo,
        reviews: list[Review],
        sources: list[str],
        raw_sample_kept: int,
        with_dates: bool = False,
    ) -> AnalysisReport:
        summary = self.summarizer.summarize(reviews)
        stats = ReviewStats(
            reviews_total=len(reviews),
            date_from=reviews[0].date if with_dates else None,
            date_to=reviews[-1].date if with_dates else None,
            sources=sources,
        )

        logger.info(
            f"Analyzed {len(reviews)} reviews from {', '.join(sources)} "
            f"({summary.source}, score {summary.score})"
        )

        return AnalysisReport(
            id=generate_slug(slug_base, self._rng),
            product=product,
            stats=stats,
            summary=summary,
            raw_sample_kept=raw_sample_kept,
            timestamp=self._clock(),
        )

    def analyze_text(self, raw_text: str) -> AnalysisReport:
        """
        Analyze pasted review text.

        Raises:
            InputValidationError: Missing or too short text.
            NoReviewsFoundError: No line qualifies as a review.
        """
        if not isinstance(raw_text, str) or not raw_text.strip():
            raise InputValidationError("Review text is required", field="rawText")

        if len(raw_text.strip()) < self.settings.min_text_length:
            raise InputValidationError(
                f"Please provide at least {self.settings.min_text_length} characters of review text",
                field="rawText",
            )

        reviews = self.parser.parse(raw_text)
        if not reviews:
            raise NoReviewsFoundError(
                "No valid reviews found in the text. "
                "Please ensure the text contains review content."
            )

        return self._build_report(
            "manual-reviews",
            ProductInfo(title="Reviews Analysis"),
            reviews,
            sources=[SOURCE_PASTED_TEXT],
            raw_sample_kept=len(reviews),
        )

    def analyze_file(self, filename: str, content: bytes, content_type: str) -> AnalysisReport:
        """
        Analyze an uploaded CSV, JSON or plain text file.

        Raises:
            InputValidationError: Empty, oversized, unsupported or unparseable file.
            NoReviewsFoundError: No line qualifies as a review.
        """
        if not content:
            raise InputValidationError("No file provided", field="file")

        if len(content) > self.settings.max_file_size:
            max_mb = self.settings.max_file_size // (1024 * 1024)
            raise InputValidationError(
                f"File size too large. Maximum size is {max_mb}MB.",
                field="file",
            )

        if content_type not in ALLOWED_CONTENT_TYPES:
            raise InputValidationError(
                "Invalid file type. Only CSV, JSON, and TXT files are supported.",
                field="file",
                details=f"content type: {content_type}",
            )

        review_text = extract_text_from_file(content, content_type)
        if not review_text.strip():
            raise InputValidationError("No review content found in the file.", field="file")

        reviews = self.parser.parse(review_text)
        if not reviews:
            raise NoReviewsFoundError(
                "No valid reviews found in the file. "
                "Please ensure the file contains review text."
            )

        return self._build_report(
            f"file-{filename}",
            ProductInfo(title=f"Reviews from {filename}"),
            reviews,
            sources=[SOURCE_UPLOADED_FILE],
            raw_sample_kept=len(reviews),
        )

    def analyze_url(self, url: str) -> AnalysisReport:
        """
        Analyze the reviews of a marketplace product URL.

        Raises:
            InputValidationError: Missing URL.
            ReviewSourceError: The review source cannot serve the URL.
            NoReviewsFoundError: The source returned no reviews.
        """
        if not isinstance(url, str) or not url.strip():
            raise InputValidationError("URL is required", field="url")

        url = url.strip()
        reviews = self._source_factory(url).fetch(url)
        if not reviews:
            raise NoReviewsFoundError("No reviews found. Please try pasting reviews instead.")

        domain = extract_domain(url)
        return self._build_report(
            url,
            ProductInfo(title=f"Product from {domain}", source_url=url),
            reviews,
            sources=[domain],
            raw_sample_kept=min(len(reviews), URL_SAMPLE_LIMIT),
            with_dates=True,
        )
