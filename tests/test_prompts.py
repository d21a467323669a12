"""
Prompt template tests.
"""

from reviewsense.models import Review
from reviewsense.prompts import (
    BASIC_SUMMARY_PROMPT,
    SUMMARY_PROMPT,
    PromptTemplate,
    format_reviews,
)


PROMPT_ARGS = {
    "reviews": "Review 1 (Rating: 4/5): Nice.",
    "max_pros": 6,
    "max_cons": 6,
    "max_themes": 5,
    "max_suggestions": 3,
}


def test_format_reviews():
    """Reviews are numbered and separated by blank lines."""
    reviews = [
        Review(text="Works great out of the box.", rating=5),
        Review(text="Stopped charging after a week.", rating=1),
    ]
    assert format_reviews(reviews) == (
        "Review 1 (Rating: 5/5): Works great out of the box.\n\n"
        "Review 2 (Rating: 1/5): Stopped charging after a week."
    )


def test_format_reviews_empty():
    """No reviews render as an empty string."""
    assert format_reviews([]) == ""


def test_summary_prompt_formats_caps():
    """The caps and reviews are substituted into the summary prompt."""
    content = SUMMARY_PROMPT.format_user_prompt(**PROMPT_ARGS)

    assert "Review 1 (Rating: 4/5): Nice." in content
    assert "3-6 main PROS" in content
    assert "2-3 actionable suggestions" in content
    assert '"suggestions": ["suggestion1"' in content


def test_basic_prompt_has_no_suggestions():
    """The basic prompt never asks for suggestions."""
    content = BASIC_SUMMARY_PROMPT.format_user_prompt(**PROMPT_ARGS)
    assert "suggestions" not in content


def test_get_messages():
    """Messages are the system persona followed by the user prompt."""
    messages = SUMMARY_PROMPT.get_messages(**PROMPT_ARGS)

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == SUMMARY_PROMPT.system_prompt
    assert messages[1]["content"] == SUMMARY_PROMPT.format_user_prompt(**PROMPT_ARGS)


def test_custom_template():
    """A custom template formats its own placeholders."""
    prompt = PromptTemplate(
        name="short",
        system_prompt="Be brief.",
        user_prompt_template="Summarize: {reviews}",
    )

    messages = prompt.get_messages(reviews="real reviews")

    assert messages[-1] == {"role": "user", "content": "Summarize: real reviews"}
    assert prompt.version == "1.0"
