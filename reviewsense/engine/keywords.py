"""
Keyword vocabularies used by the rule-based analysis.
"""

# =============================================================================
# Rating inference (per line)
# =============================================================================

# Weighted: the strongest sentiment words count twice
RATING_POSITIVE_WEIGHTS: dict[str, int] = {
    "excellent": 2,
    "good": 2,
    "outstanding": 1,
    "love": 2,
    "amazing": 2,
    "great": 1,
}

RATING_NEGATIVE_WEIGHTS: dict[str, int] = {
    "bad": 1,
    "terrible": 2,
    "awful": 2,
    "hate": 2,
    "poor": 1,
}


# =============================================================================
# Pros / cons extraction
# =============================================================================

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "great",
    "good",
    "excellent",
    "love",
    "amazing",
    "perfect",
    "best",
    "awesome",
    "fantastic",
    "wonderful",
    "outstanding",
    "superb",
    "brilliant",
    "exceptional",
    "incredible",
    "phenomenal",
    "stellar",
    "top-notch",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "bad",
    "terrible",
    "awful",
    "hate",
    "worst",
    "disappointing",
    "poor",
    "cheap",
    "broken",
    "useless",
    "horrible",
    "dreadful",
    "atrocious",
    "abysmal",
    "mediocre",
    "subpar",
    "inferior",
    "defective",
)


# =============================================================================
# Themes
# =============================================================================

THEME_KEYWORDS: tuple[str, ...] = (
    "battery",
    "quality",
    "price",
    "design",
    "performance",
    "comfort",
    "sound",
    "build",
    "durability",
    "features",
    "delivery",
    "service",
    "packaging",
    "material",
    "size",
    "fit",
    "color",
    "style",
    "brand",
    "value",
)


def count_weighted(text: str, weights: dict[str, int]) -> int:
    """Sum the weights of every keyword found in ``text`` (case-insensitive)."""
    lowered = text.lower()
    return sum(weight for keyword, weight in weights.items() if keyword in lowered)


def matched_keywords(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Keywords of ``vocabulary`` contained in ``text``, in vocabulary order."""
    lowered = text.lower()
    return [keyword for keyword in vocabulary if keyword in lowered]


def display_keyword(keyword: str) -> str:
    """Capitalize the first letter only ("top-notch" -> "Top-notch")."""
    return keyword[:1].upper() + keyword[1:]
