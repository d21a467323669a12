"""
Review and analysis data structure tests.
"""

from dataclasses import FrozenInstanceError

import pytest

from reviewsense.models import AnalysisResult, Review, SummaryLimits, Theme
from reviewsense.utils.config import Settings


class TestReview:
    """Tests for Review."""

    def test_review_creation(self, sample_review):
        """Fields are stored as given."""
        assert sample_review.rating == 4
        assert sample_review.author == "Sarah M."
        assert sample_review.date == "2024-01-14"
        assert sample_review.helpful == 8

    def test_review_defaults(self):
        """Optional fields default to empty values."""
        review = Review(text="Works as described, no complaints.", rating=3)
        assert review.author is None
        assert review.date is None
        assert review.helpful == 0

    def test_text_is_trimmed(self):
        """Text is trimmed on creation."""
        review = Review(text="   Solid product for the money.  ", rating=4)
        assert review.text == "Solid product for the money."

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range(self, rating):
        """Ratings outside 1-5 are rejected."""
        with pytest.raises(ValueError):
            Review(text="Some review text", rating=rating)

    def test_rating_must_be_int(self):
        """Booleans and floats are not ratings."""
        with pytest.raises(ValueError):
            Review(text="Some review text", rating=True)
        with pytest.raises(ValueError):
            Review(text="Some review text", rating=4.5)

    def test_empty_text(self):
        """Blank text is rejected."""
        with pytest.raises(ValueError):
            Review(text="   ", rating=3)

    def test_negative_helpful(self):
        """Helpful votes cannot be negative."""
        with pytest.raises(ValueError):
            Review(text="Some review text", rating=3, helpful=-1)

    def test_invalid_date(self):
        """Dates must be valid ISO dates."""
        with pytest.raises(ValueError):
            Review(text="Some review text", rating=3, date="2024-13-01")

    def test_immutable(self, sample_review):
        """Reviews cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            sample_review.rating = 1

    def test_to_dict(self, sample_review):
        """Serialization keeps every field."""
        data = sample_review.to_dict()
        assert data == {
            "author": "Sarah M.",
            "rating": 4,
            "date": "2024-01-14",
            "text": sample_review.text,
            "helpful": 8,
        }


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_to_dict(self):
        """Themes serialize with desc and the source is left out."""
        result = AnalysisResult(
            pros=["Great mentioned"],
            cons=["Cheap issues reported"],
            themes=[Theme(name="Battery", description="Mentioned in 50% of reviews")],
            verdict="Mixed reviews.",
            score=3.5,
            suggestions=["Highlight positive aspects in marketing materials"],
        )
        data = result.to_dict()

        assert data["themes"] == [{"name": "Battery", "desc": "Mentioned in 50% of reviews"}]
        assert data["score"] == 3.5
        assert data["pros"] == ["Great mentioned"]
        assert "source" not in data

    @pytest.mark.parametrize("score", [0.9, 5.1])
    def test_score_out_of_range(self, score):
        """Scores outside 1-5 are rejected."""
        with pytest.raises(ValueError):
            AnalysisResult(score=score)


class TestSummaryLimits:
    """Tests for SummaryLimits."""

    def test_defaults(self):
        """Default caps."""
        limits = SummaryLimits()
        assert limits.max_pros == 6
        assert limits.max_cons == 6
        assert limits.max_themes == 5
        assert limits.max_suggestions == 3
        assert limits.include_suggestions is True

    def test_from_settings(self):
        """Caps come from settings; zero suggestions turns them off."""
        settings = Settings(_env_file=None, max_pros=5, max_cons=5, max_themes=3, max_suggestions=0)
        limits = SummaryLimits.from_settings(settings)

        assert limits.max_pros == 5
        assert limits.max_themes == 3
        assert limits.include_suggestions is False
