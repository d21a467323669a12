"""
Prompt templates.

Prompts sent to the completion model when summarizing reviews.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from reviewsense.models import Review


@dataclass
class PromptTemplate:
    """Prompt template data structure."""

    name: str
    system_prompt: str
    user_prompt_template: str
    description: str = ""
    version: str = "1.0"

    def format_user_prompt(self, **kwargs) -> str:
        """Format the user prompt."""
        return self.user_prompt_template.format(**kwargs)

    def get_messages(self, **kwargs) -> list[dict[str, str]]:
        """Return messages in chat-completion format."""
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.format_user_prompt(**kwargs)},
        ]


def format_reviews(reviews: Iterable[Review]) -> str:
    """Render reviews as numbered blocks separated by blank lines."""
    return "\n\n".join(
        f"Review {i} (Rating: {review.rating}/5): {review.text}"
        for i, review in enumerate(reviews, 1)
    )


# =============================================================================
# Summary prompts
# =============================================================================

SUMMARY_SYSTEM_PROMPT = (
    "You are a product review analyst. Analyze reviews objectively and provide "
    "balanced insights with actionable suggestions."
)

SUMMARY_USER_TEMPLATE = """Analyze these product reviews and provide a comprehensive summary.

Reviews:
{reviews}

Please analyze the reviews and provide:
1. 3-{max_pros} main PROS (positive aspects)
2. 3-{max_cons} main CONS (negative aspects)
3. 3-{max_themes} recurring themes with descriptions
4. A concise verdict (1-2 sentences)
5. Overall score (1.0-5.0)
6. 2-{max_suggestions} actionable suggestions for improvement

Respond with strict JSON only, no markdown and no commentary, in this shape:
{{
  "pros": ["pro1", "pro2", "pro3"],
  "cons": ["con1", "con2", "con3"],
  "themes": [{{"name": "theme1", "desc": "description"}}, {{"name": "theme2", "desc": "description"}}],
  "verdict": "Your verdict here",
  "score": 4.2,
  "suggestions": ["suggestion1", "suggestion2", "suggestion3"]
}}

Focus on the most important and recurring points. Be honest and balanced. Provide actionable suggestions based on the negative feedback."""

SUMMARY_PROMPT = PromptTemplate(
    name="summary",
    system_prompt=SUMMARY_SYSTEM_PROMPT,
    user_prompt_template=SUMMARY_USER_TEMPLATE,
    description="Pros, cons, themes, verdict, score and suggestions",
    version="1.0",
)

BASIC_SUMMARY_SYSTEM_PROMPT = (
    "You are a product review analyst. Analyze reviews objectively and provide "
    "balanced insights."
)

BASIC_SUMMARY_USER_TEMPLATE = """Analyze these product reviews and provide a comprehensive summary.

Reviews:
{reviews}

Please analyze the reviews and provide:
1. 3-{max_pros} main PROS (positive aspects)
2. 3-{max_cons} main CONS (negative aspects)
3. 3-{max_themes} recurring themes with descriptions
4. A concise verdict (1-2 sentences)
5. Overall score (1.0-5.0)

Respond with strict JSON only, no markdown and no commentary, in this shape:
{{
  "pros": ["pro1", "pro2", "pro3"],
  "cons": ["con1", "con2", "con3"],
  "themes": [{{"name": "theme1", "desc": "description"}}],
  "verdict": "Your verdict here",
  "score": 4.2
}}

Focus on the most important and recurring points. Be honest and balanced."""

BASIC_SUMMARY_PROMPT = PromptTemplate(
    name="summary_basic",
    system_prompt=BASIC_SUMMARY_SYSTEM_PROMPT,
    user_prompt_template=BASIC_SUMMARY_USER_TEMPLATE,
    description="Pros, cons, themes, verdict and score (no suggestions)",
    version="1.0",
)
