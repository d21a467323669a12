"""
Logging setup.

Provides the logging configuration shared by the whole project.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Default log directory
DEFAULT_LOG_DIR = Path("logs")

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "langchain", "urllib3")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Initialize logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file name (None disables file logging)
        log_dir: Directory for the log file
    """
    resolved_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(resolved_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = (log_dir or DEFAULT_LOG_DIR) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(resolved_level)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger.

    Args:
        name: Logger name (usually ``__name__``)

    Returns:
        logging.Logger instance

    Example:
        ```python
        from reviewsense.core.logging import get_logger

        logger = get_logger(__name__)
        logger.info("Analysis started")
        ```
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    error: Exception,
    context: str = "",
    level: int = logging.ERROR,
    exc_info: bool = True,
) -> None:
    """
    Log an exception with its type name.

    Args:
        logger: Logger instance
        error: The exception
        context: Short description of what was being done
        level: Log level to use
        exc_info: Whether to attach the traceback
    """
    if context:
        logger.log(level, f"{context}: {type(error).__name__}: {error}", exc_info=exc_info)
    else:
        logger.log(level, f"{type(error).__name__}: {error}", exc_info=exc_info)
