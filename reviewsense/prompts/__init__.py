# Prompts module

from .templates import (
    PromptTemplate,
    SUMMARY_PROMPT,
    BASIC_SUMMARY_PROMPT,
    format_reviews,
)

__all__ = [
    "PromptTemplate",
    "SUMMARY_PROMPT",
    "BASIC_SUMMARY_PROMPT",
    "format_reviews",
]
