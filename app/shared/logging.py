"""
Logging configuration for the application.

Every handler on the root logger formats through RedactingFormatter,
which masks email addresses in messages and tracebacks. SQLAlchemy
errors echo bound parameters, so a failed trader insert would
otherwise write the trader's email to the log.
"""

import logging
import re
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
EMAIL_MASK = "<email>"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine")


def redact(text: str) -> str:
    """Replace every email address in text with a fixed mask."""
    return EMAIL_PATTERN.sub(EMAIL_MASK, text)


class RedactingFormatter(logging.Formatter):
    """Formatter that masks personal data in the fully rendered record."""

    def format(self, record: logging.LogRecord) -> str:
        return redact(super().format(record))


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(RedactingFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
