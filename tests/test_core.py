"""
Logging and exception tests.
"""

import logging

import pytest

from reviewsense.core import (
    APIError,
    AuthenticationError,
    InputValidationError,
    NoReviewsFoundError,
    RateLimitError,
    ResponseFormatError,
    ReviewAnalystError,
    ReviewSourceError,
    UnsupportedMarketplaceError,
    get_logger,
    log_exception,
    setup_logging,
)
from reviewsense.core.logging import NOISY_LOGGERS


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_str_joins_parts(self):
        """Message, details and suggestion are joined."""
        error = ReviewAnalystError("Failed", details="bad input", suggestion="try again")
        assert str(error) == "Failed | details: bad input | suggestion: try again"

    def test_str_message_only(self):
        """Without extras only the message is shown."""
        assert str(ReviewAnalystError("Failed")) == "Failed"

    def test_input_validation_field(self):
        """The field name goes into the details."""
        error = InputValidationError("Review text is required", field="rawText")
        assert error.field == "rawText"
        assert error.details == "field: rawText"

    def test_no_reviews_default_suggestion(self):
        """A default suggestion is set unless given."""
        assert NoReviewsFoundError().suggestion is not None
        assert NoReviewsFoundError(suggestion="Paste more text").suggestion == "Paste more text"

    def test_api_error_status_codes(self):
        """API errors carry their status codes."""
        assert RateLimitError().status_code == 429
        assert AuthenticationError().status_code == 401
        assert ResponseFormatError().status_code is None
        assert issubclass(RateLimitError, APIError)
        assert issubclass(ResponseFormatError, APIError)

    def test_unsupported_marketplace(self):
        """The domain goes into the details."""
        error = UnsupportedMarketplaceError(domain="shop.example.org", url="https://shop.example.org/x")

        assert isinstance(error, ReviewSourceError)
        assert error.details == "domain: shop.example.org"
        assert error.url == "https://shop.example.org/x"
        assert error.suggestion is not None

    def test_everything_is_a_review_analyst_error(self):
        """Every project error shares one base."""
        for error_cls in (
            InputValidationError,
            NoReviewsFoundError,
            APIError,
            ReviewSourceError,
            UnsupportedMarketplaceError,
        ):
            assert issubclass(error_cls, ReviewAnalystError)


class TestLogging:
    """Tests for the logging helpers."""

    def test_setup_logging_console(self, restore_root_logger):
        """Console logging at the requested level."""
        setup_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_setup_logging_unknown_level(self, restore_root_logger):
        """Unknown levels fall back to INFO."""
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_setup_logging_file(self, restore_root_logger, tmp_path):
        """Records are also written to the log file."""
        setup_logging("INFO", log_file="analysis.log", log_dir=tmp_path / "logs")
        get_logger("reviewsense.test").info("written to file")

        for handler in restore_root_logger.handlers:
            handler.flush()

        content = (tmp_path / "logs" / "analysis.log").read_text(encoding="utf-8")
        assert "| INFO     | reviewsense.test | written to file" in content

    def test_log_exception(self, caplog):
        """The context and type name prefix the message."""
        logger = get_logger("reviewsense.test")

        with caplog.at_level(logging.WARNING, logger="reviewsense.test"):
            log_exception(logger, ValueError("boom"), "Parsing failed", logging.WARNING, exc_info=False)

        assert caplog.records[0].levelno == logging.WARNING
        assert caplog.records[0].getMessage() == "Parsing failed: ValueError: boom"

    def test_log_exception_without_context(self, caplog):
        """Without context the type name leads."""
        logger = get_logger("reviewsense.test")

        with caplog.at_level(logging.ERROR, logger="reviewsense.test"):
            log_exception(logger, KeyError("missing"), exc_info=False)

        assert caplog.records[0].getMessage() == "KeyError: 'missing'"
