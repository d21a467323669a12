"""
Review and analysis data structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as _date
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from reviewsense.utils.config import Settings


MIN_RATING = 1
MAX_RATING = 5
MIN_SCORE = 1.0
MAX_SCORE = 5.0

# Result sources
SOURCE_AI = "ai"
SOURCE_RULE_BASED = "rule_based"


@dataclass(frozen=True)
class Review:
    """A single normalized review."""

    text: str
    rating: int
    author: str | None = None
    date: str | None = None  # YYYY-MM-DD
    helpful: int = 0

    def __post_init__(self):
        if not isinstance(self.rating, int) or isinstance(self.rating, bool):
            raise ValueError(f"Invalid rating: {self.rating!r}. Must be an integer")
        if not (MIN_RATING <= self.rating <= MAX_RATING):
            raise ValueError(f"Invalid rating: {self.rating}. Must be 1-5")
        if not self.text or not self.text.strip():
            raise ValueError("Review text must not be empty")
        if self.text != self.text.strip():
            object.__setattr__(self, "text", self.text.strip())
        if self.helpful < 0:
            raise ValueError(f"Invalid helpful count: {self.helpful}. Must be >= 0")
        if self.date is not None:
            _date.fromisoformat(self.date)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "author": self.author,
            "rating": self.rating,
            "date": self.date,
            "text": self.text,
            "helpful": self.helpful,
        }


@dataclass(frozen=True)
class Theme:
    """A recurring topic across the review set."""

    name: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "desc": self.description}


@dataclass(frozen=True)
class SummaryLimits:
    """Caps a caller puts on each list of the summary."""

    max_pros: int = 6
    max_cons: int = 6
    max_themes: int = 5
    max_suggestions: int = 3
    include_suggestions: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "SummaryLimits":
        return cls(
            max_pros=settings.max_pros,
            max_cons=settings.max_cons,
            max_themes=settings.max_themes,
            max_suggestions=settings.max_suggestions,
            include_suggestions=settings.max_suggestions > 0,
        )


@dataclass
class AnalysisResult:
    """Structured summary of a review set."""

    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    themes: list[Theme] = field(default_factory=list)
    verdict: str = ""
    score: float = 3.0
    suggestions: list[str] = field(default_factory=list)
    source: str = SOURCE_RULE_BASED

    def __post_init__(self):
        if not (MIN_SCORE <= self.score <= MAX_SCORE):
            raise ValueError(f"Invalid score: {self.score}. Must be 1.0-5.0")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the summary wire shape."""
        return {
            "pros": list(self.pros),
            "cons": list(self.cons),
            "themes": [theme.to_dict() for theme in self.themes],
            "verdict": self.verdict,
            "score": self.score,
            "suggestions": list(self.suggestions),
        }
