"""
Logging configuration for the grocery bot application.

Usage:
    from grocery_bot.logging_config import setup_logging
    setup_logging()  # Call once at application startup

Environment variables:
    LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)

Utterances are user data. Anything logged at INFO or above goes through
preview_utterance() so only the first few words reach the logs.
"""
import logging
import os
import sys

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Third-party loggers that are only interesting while debugging
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "instructor", "sqlalchemy.engine")

UTTERANCE_PREVIEW_LENGTH = 50


def preview_utterance(text: str | None, limit: int = UTTERANCE_PREVIEW_LENGTH) -> str:
    """Shorten an utterance for INFO-level log lines."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _resolve_level(level: str | None) -> str:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    level = level.strip().upper()
    return level if level in VALID_LEVELS else "INFO"


def setup_logging(level: str = None) -> str:
    """
    Configure logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, reads from LOG_LEVEL env var, defaults to INFO.

    Returns:
        The level actually applied
    """
    level = _resolve_level(level)
    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("grocery_bot").setLevel(numeric_level)

    third_party_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)
    return level
