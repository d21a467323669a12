"""
Free-text review parser.

Turns pasted or uploaded text into normalized reviews, one per line.
"""

import random

from reviewsense.core.logging import get_logger
from reviewsense.engine.scorer import infer_rating
from reviewsense.models import Review

logger = get_logger(__name__)

# Lines this short are noise (headers, star counts, dates)
MIN_LINE_LENGTH = 20

# Placeholder "helpful" votes are drawn from [0, HELPFUL_UPPER_BOUND)
HELPFUL_UPPER_BOUND = 10

_default_rng = random.Random()


class ReviewParser:
    """Line-based review parser."""

    def __init__(
        self,
        min_line_length: int = MIN_LINE_LENGTH,
        rng: random.Random | None = None,
    ):
        """
        Args:
            min_line_length: A line must be longer than this to count as a review
            rng: Random source for the placeholder helpful count
        """
        self.min_line_length = min_line_length
        self._rng = rng or _default_rng

    def is_candidate(self, line: str) -> bool:
        """Whether a line carries enough text to be a review."""
        return len(line.strip()) > self.min_line_length

    def parse_line(self, line: str) -> Review:
        """Build a review from a single qualifying line."""
        text = line.strip()
        return Review(
            text=text,
            rating=infer_rating(text),
            author=None,
            date=None,
            helpful=self._rng.randrange(HELPFUL_UPPER_BOUND),
        )

    def parse(self, raw_text: str) -> list[Review]:
        """
        Parse raw text into reviews.

        Args:
            raw_text: Free text, one review per line

        Returns:
            Reviews in input order (empty when no line qualifies)
        """
        if not raw_text:
            return []

        reviews = [
            self.parse_line(line)
            for line in raw_text.split("\n")
            if line.strip() and self.is_candidate(line)
        ]

        logger.debug(f"Parsed {len(reviews)} reviews from {len(raw_text)} characters")
        return reviews


def parse_raw_reviews(raw_text: str, rng: random.Random | None = None) -> list[Review]:
    """Parse free text with the default parser settings."""
    return ReviewParser(rng=rng).parse(raw_text)
