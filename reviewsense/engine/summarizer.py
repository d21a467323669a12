"""
Review summarizers.

Defines the summarizer interface and the rule-based implementation that
backs every analysis when no language model is available.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

from reviewsense.core.logging import get_logger
from reviewsense.engine.keywords import (
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    THEME_KEYWORDS,
    display_keyword,
    matched_keywords,
)
from reviewsense.engine.scorer import average_rating, score_reviews
from reviewsense.models import SOURCE_RULE_BASED, AnalysisResult, Review, SummaryLimits, Theme

logger = get_logger(__name__)

# A theme must be mentioned by more than this share of reviews
THEME_MENTION_THRESHOLD = 0.1

# Suggestions are added when the score is below this
IMPROVEMENT_SCORE_THRESHOLD = 4.0


class Verdict(str, Enum):
    """Fixed verdict bands, most to least favourable."""

    HIGHLY_RECOMMENDED = (
        "Highly recommended product with overwhelmingly positive feedback from users."
    )
    MOSTLY_POSITIVE = (
        "Good product with mostly positive reviews, though some concerns exist."
    )
    MIXED = "Mixed reviews with both positive and negative feedback from users."
    SIGNIFICANT_ISSUES = (
        "Product has significant issues based on user feedback and low ratings."
    )

    @classmethod
    def from_rating(cls, avg_rating: float) -> "Verdict":
        """Band for an average rating."""
        if avg_rating >= 4.5:
            return cls.HIGHLY_RECOMMENDED
        if avg_rating >= 4.0:
            return cls.MOSTLY_POSITIVE
        if avg_rating >= 3.0:
            return cls.MIXED
        return cls.SIGNIFICANT_ISSUES


class Suggestion(str, Enum):
    """Actionable follow-ups for the product owner."""

    ADDRESS_NEGATIVES = "Address the most common negative feedback points"
    FOCUS_ON_IMPROVING = "Focus on improving areas mentioned in multiple reviews"
    HIGHLIGHT_POSITIVES = "Highlight positive aspects in marketing materials"


class BaseSummarizer(ABC):
    """Abstract base class for review summarizers.

    Attributes:
        limits: Caps applied to every list of the result
    """

    def __init__(self, limits: SummaryLimits | None = None):
        self.limits = limits or SummaryLimits()

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def summarize(self, reviews: list[Review]) -> AnalysisResult:
        """
        Summarize a review set.

        Args:
            reviews: Non-empty list of reviews

        Returns:
            AnalysisResult
        """
        pass


class RuleBasedSummarizer(BaseSummarizer):
    """
    Keyword-driven summarizer.

    Pure and deterministic: the same reviews in the same order always give
    the same result. Never calls out to any service.
    """

    def extract_pros_and_cons(self, reviews: list[Review]) -> tuple[list[str], list[str]]:
        """Collect keyword phrases review by review until each list is full."""
        pros: list[str] = []
        cons: list[str] = []

        for review in reviews:
            for keyword in matched_keywords(review.text, POSITIVE_KEYWORDS):
                if len(pros) < self.limits.max_pros:
                    pros.append(f"{display_keyword(keyword)} mentioned")

            for keyword in matched_keywords(review.text, NEGATIVE_KEYWORDS):
                if len(cons) < self.limits.max_cons:
                    cons.append(f"{display_keyword(keyword)} issues reported")

        return pros, cons

    def extract_themes(self, reviews: list[Review]) -> list[Theme]:
        """Topics mentioned by more than 10% of reviews, in vocabulary order."""
        total = len(reviews)
        lowered = [review.text.lower() for review in reviews]
        themes: list[Theme] = []

        for term in THEME_KEYWORDS:
            count = sum(1 for text in lowered if term in text)
            if count > total * THEME_MENTION_THRESHOLD:
                percent = math.floor(count * 100 / total + 0.5)
                themes.append(
                    Theme(
                        name=display_keyword(term),
                        description=f"Mentioned in {percent}% of reviews",
                    )
                )

        return themes[: self.limits.max_themes]

    @staticmethod
    def select_verdict(pros: list[str], cons: list[str], avg_rating: float) -> Verdict:
        """Pick the verdict from the pros/cons balance, then from the rating."""
        if pros and not cons:
            return Verdict.HIGHLY_RECOMMENDED
        if len(pros) > len(cons):
            return Verdict.MOSTLY_POSITIVE
        if len(cons) > len(pros):
            return Verdict.SIGNIFICANT_ISSUES
        return Verdict.from_rating(avg_rating)

    def build_suggestions(self, pros: list[str], cons: list[str], score: float) -> list[str]:
        """Independent suggestions, capped."""
        if not self.limits.include_suggestions:
            return []

        suggestions = []
        if cons:
            suggestions.append(Suggestion.ADDRESS_NEGATIVES.value)
        if score < IMPROVEMENT_SCORE_THRESHOLD:
            suggestions.append(Suggestion.FOCUS_ON_IMPROVING.value)
        if pros:
            suggestions.append(Suggestion.HIGHLIGHT_POSITIVES.value)

        return suggestions[: self.limits.max_suggestions]

    def summarize(self, reviews: list[Review]) -> AnalysisResult:
        if not reviews:
            raise ValueError("Cannot summarize an empty review set")

        avg_rating = average_rating(reviews)
        pros, cons = self.extract_pros_and_cons(reviews)
        themes = self.extract_themes(reviews)
        score = score_reviews(reviews)
        verdict = self.select_verdict(pros, cons, avg_rating)

        logger.debug(
            f"Rule-based summary: {len(reviews)} reviews, avg={avg_rating:.2f}, "
            f"score={score}, pros={len(pros)}, cons={len(cons)}, themes={len(themes)}"
        )

        return AnalysisResult(
            pros=pros,
            cons=cons,
            themes=themes,
            verdict=verdict.value,
            score=score,
            suggestions=self.build_suggestions(pros, cons, score),
            source=SOURCE_RULE_BASED,
        )
