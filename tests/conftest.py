"""
Pytest configuration and fixtures.
"""

import random

import pytest

from reviewsense.engine.summarizer import RuleBasedSummarizer
from reviewsense.models import Review
from reviewsense.utils.config import Settings, get_settings


# One clearly positive line, one clearly negative line
SAMPLE_TEXT = (
    "Excellent build quality and amazing battery.\n"
    "Terrible customer service, very disappointing."
)



@pytest.fixture(autouse=True)
def no_openai_key(monkeypatch):
    """Keep tests offline: no ambient API key and fresh cached settings."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings without an API key and without reading .env."""
    return Settings(_env_file=None, openai_api_key=None)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def rule_summarizer():
    return RuleBasedSummarizer()


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_review():
    """Single review for testing."""
    return Review(
        text="Great earbuds overall. Sound quality is fantastic and they're very comfortable.",
        rating=4,
        author="Sarah M.",
        date="2024-01-14",
        helpful=8,
    )


@pytest.fixture
def sample_reviews():
    """Sample reviews list for testing."""
    return [
        Review(
            text="Excellent sound quality and long battery life. The noise cancellation is amazing.",
            rating=5,
            author="John D.",
            date="2024-01-15",
            helpful=12,
        ),
        Review(
            text="Good sound quality but the battery life could be better.",
            rating=3,
            author="Mike R.",
            date="2024-01-13",
            helpful=5,
        ),
        Review(
            text="Disappointed with the quality. The left earbud stopped working after a week.",
            rating=2,
            author="David L.",
            date="2024-01-11",
            helpful=3,
        ),
    ]
