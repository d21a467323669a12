"""
LLM-backed review summarizer.

Sends the review set to a chat-completion model and parses its JSON reply.
Every failure (no credential, transport or auth error, empty or malformed
reply) is absorbed and answered by the rule-based summarizer instead.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import openai
from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from langchain_openai import ChatOpenAI
from pydantic import AliasChoices, BaseModel, Field, model_validator

from reviewsense.core.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ResponseFormatError,
)
from reviewsense.core.logging import get_logger, log_exception
from reviewsense.engine.scorer import round_half_up
from reviewsense.engine.summarizer import BaseSummarizer, RuleBasedSummarizer
from reviewsense.models import (
    MAX_SCORE,
    MIN_SCORE,
    SOURCE_AI,
    AnalysisResult,
    Review,
    SummaryLimits,
    Theme,
)
from reviewsense.prompts.templates import (
    BASIC_SUMMARY_PROMPT,
    SUMMARY_PROMPT,
    PromptTemplate,
    format_reviews,
)

logger = get_logger(__name__)

DEFAULT_MODEL = "gpt-4-turbo-preview"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 1200
DEFAULT_TIMEOUT = 30.0

DEFAULT_VERDICT = "Analysis completed"
DEFAULT_SCORE = 3.0


# =============================================================================
# Reply schema
# =============================================================================


class ThemePayload(BaseModel):
    """Theme as returned by the model."""

    name: str
    desc: str = Field(default="", validation_alias=AliasChoices("desc", "description"))


class SummaryPayload(BaseModel):
    """Summary JSON as returned by the model. Missing fields get defaults."""

    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    themes: list[ThemePayload] = Field(default_factory=list)
    verdict: str = DEFAULT_VERDICT
    score: float = DEFAULT_SCORE
    suggestions: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


summary_parser = PydanticOutputParser(pydantic_object=SummaryPayload)


def parse_summary_reply(content: Any) -> SummaryPayload:
    """
    Parse the model's reply into a SummaryPayload.

    The JSON object may be bare or sit inside a markdown code block,
    with or without surrounding prose.

    Args:
        content: Message content of the single completion choice

    Returns:
        SummaryPayload

    Raises:
        ResponseFormatError: Empty, non-JSON or wrongly shaped reply
    """
    if not isinstance(content, str):
        raise ResponseFormatError(details=f"expected text content, got {type(content).__name__}")

    try:
        return summary_parser.parse(content)
    except OutputParserException as e:
        raise ResponseFormatError(details=str(e)) from e


def classify_api_error(error: Exception) -> APIError:
    """Map a client exception onto the project's API error types."""
    if isinstance(error, openai.AuthenticationError):
        return AuthenticationError(details=str(error))
    if isinstance(error, openai.RateLimitError):
        return RateLimitError(details=str(error))
    if isinstance(error, openai.APIStatusError):
        return APIError(status_code=error.status_code, details=str(error))
    if isinstance(error, APIError):
        return error
    return APIError(details=f"{type(error).__name__}: {error}")


# =============================================================================
# Summarizer
# =============================================================================


class AISummarizer(BaseSummarizer):
    """Summarizer that asks a chat model first and falls back to rules."""

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = DEFAULT_TIMEOUT,
        openai_api_key: str | None = None,
        limits: SummaryLimits | None = None,
        fallback: BaseSummarizer | None = None,
        llm: Any | None = None,
    ):
        """
        Args:
            model_name: Chat model name
            temperature: Sampling temperature
            max_tokens: Output token budget
            timeout: Request timeout in seconds
            openai_api_key: OpenAI API key (defaults to OPENAI_API_KEY)
            limits: Caps applied to every list of the result
            fallback: Summarizer used on any failure (rule-based by default)
            llm: Pre-built chat model, mainly for tests
        """
        super().__init__(limits)
        self.model_name = model_name
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._api_key = openai_api_key or os.getenv("OPENAI_API_KEY")
        self.fallback = fallback or RuleBasedSummarizer(self.limits)
        self._llm = llm

    @property
    def is_configured(self) -> bool:
        """Whether a model can be called at all."""
        return self._llm is not None or bool(self._api_key and self._api_key.strip())

    @property
    def prompt(self) -> PromptTemplate:
        if self.limits.include_suggestions:
            return SUMMARY_PROMPT
        return BASIC_SUMMARY_PROMPT

    def _get_llm(self) -> Any:
        """Create the chat model on first use."""
        if self._llm is None:
            self._llm = ChatOpenAI(
                model=self.model_name,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                max_retries=0,
                openai_api_key=self._api_key,
            )
        return self._llm

    def build_messages(self, reviews: list[Review]) -> list[dict[str, str]]:
        """System persona plus the numbered reviews and the JSON instruction."""
        return self.prompt.get_messages(
            reviews=format_reviews(reviews),
            max_pros=self.limits.max_pros,
            max_cons=self.limits.max_cons,
            max_themes=self.limits.max_themes,
            max_suggestions=self.limits.max_suggestions,
        )

    def _to_result(self, payload: SummaryPayload) -> AnalysisResult:
        """Trim lists to the caps and force the score into range."""
        score = min(MAX_SCORE, max(MIN_SCORE, payload.score))
        themes = [
            Theme(name=theme.name, description=theme.desc)
            for theme in payload.themes[: self.limits.max_themes]
        ]
        suggestions = (
            payload.suggestions[: self.limits.max_suggestions]
            if self.limits.include_suggestions
            else []
        )

        return AnalysisResult(
            pros=payload.pros[: self.limits.max_pros],
            cons=payload.cons[: self.limits.max_cons],
            themes=themes,
            verdict=payload.verdict.strip() or DEFAULT_VERDICT,
            score=round_half_up(score, 1),
            suggestions=suggestions,
            source=SOURCE_AI,
        )

    def _fall_back(self, reviews: list[Review], reason: str) -> AnalysisResult:
        logger.warning(f"Using rule-based analysis instead of {self.model_name}: {reason}")
        return self.fallback.summarize(reviews)

    def summarize(self, reviews: list[Review]) -> AnalysisResult:
        if not reviews:
            raise ValueError("Cannot summarize an empty review set")

        if not self.is_configured:
            logger.info("OpenAI API key not configured, using rule-based analysis")
            return self.fallback.summarize(reviews)

        try:
            reply = self._get_llm().invoke(self.build_messages(reviews))
        except Exception as e:
            error = classify_api_error(e)
            log_exception(logger, error, "Completion request failed", logging.WARNING, exc_info=False)
            return self._fall_back(reviews, type(error).__name__)

        try:
            payload = parse_summary_reply(getattr(reply, "content", None))
        except ResponseFormatError as e:
            return self._fall_back(reviews, str(e))

        logger.info(f"AI summary received for {len(reviews)} reviews from {self.model_name}")
        return self._to_result(payload)
