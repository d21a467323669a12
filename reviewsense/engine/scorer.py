"""
Keyword-polarity heuristics.

Rates a single line of review text and biases the aggregate score of a
review set away from the plain rating average.
"""

import math

from reviewsense.engine.keywords import (
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    RATING_NEGATIVE_WEIGHTS,
    RATING_POSITIVE_WEIGHTS,
    count_weighted,
    matched_keywords,
)
from reviewsense.models import MAX_RATING, MAX_SCORE, MIN_RATING, MIN_SCORE, Review

NEUTRAL_RATING = 3

ALL_POSITIVE_BOOST = 1.0
MOSTLY_POSITIVE_BOOST = 0.5
MOSTLY_NEGATIVE_PENALTY = 0.5


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like JavaScript's Math.round (halves go up)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def rating_from_counts(positive: int, negative: int) -> int:
    """Map keyword counts to a 1-5 rating."""
    if positive > negative:
        return min(MAX_RATING, NEUTRAL_RATING + positive)
    if negative > positive:
        return max(MIN_RATING, NEUTRAL_RATING - negative)
    return NEUTRAL_RATING


def infer_rating(text: str) -> int:
    """
    Infer a rating for review text that carries none.

    Args:
        text: Review text

    Returns:
        Rating between 1 and 5 (3 when polarity is balanced)
    """
    positive = count_weighted(text, RATING_POSITIVE_WEIGHTS)
    negative = count_weighted(text, RATING_NEGATIVE_WEIGHTS)
    return rating_from_counts(positive, negative)


def average_rating(reviews: list[Review]) -> float:
    """Mean rating of a non-empty review set."""
    if not reviews:
        raise ValueError("Cannot average the ratings of an empty review set")
    return sum(review.rating for review in reviews) / len(reviews)


def count_polarity(reviews: list[Review]) -> tuple[int, int]:
    """Count reviews matching at least one positive / negative keyword."""
    positive = 0
    negative = 0
    for review in reviews:
        if matched_keywords(review.text, POSITIVE_KEYWORDS):
            positive += 1
        if matched_keywords(review.text, NEGATIVE_KEYWORDS):
            negative += 1
    return positive, negative


def adjust_score(
    avg_rating: float,
    positive_reviews: int,
    negative_reviews: int,
    total_reviews: int,
) -> float:
    """
    Bias the average rating by keyword polarity.

    Args:
        avg_rating: Mean rating of the set
        positive_reviews: Reviews matching a positive keyword
        negative_reviews: Reviews matching a negative keyword
        total_reviews: Size of the set

    Returns:
        Score in [1.0, 5.0] rounded to one decimal
    """
    if total_reviews > 0 and positive_reviews == total_reviews and negative_reviews == 0:
        score = min(MAX_SCORE, avg_rating + ALL_POSITIVE_BOOST)
    elif positive_reviews > negative_reviews:
        score = min(MAX_SCORE, avg_rating + MOSTLY_POSITIVE_BOOST)
    elif positive_reviews == negative_reviews:
        score = avg_rating
    else:
        score = max(MIN_SCORE, avg_rating - MOSTLY_NEGATIVE_PENALTY)

    return round_half_up(min(MAX_SCORE, max(MIN_SCORE, score)), 1)


def score_reviews(reviews: list[Review]) -> float:
    """Aggregate score of a non-empty review set."""
    positive, negative = count_polarity(reviews)
    return adjust_score(average_rating(reviews), positive, negative, len(reviews))
