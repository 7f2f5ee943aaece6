"""
Tests for the application logging setup.

Checks that personal data never reaches log output, whether it
appears in a message, its arguments or an exception traceback.
"""

import logging
import sys

import pytest

from app.shared.logging import (
    EMAIL_MASK,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    RedactingFormatter,
    configure_logging,
    redact,
)


def _record(msg: str, args: tuple = (), exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="app.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestRedact:
    """Tests for email masking."""

    @pytest.mark.parametrize(
        "email",
        ["flast@email.org", "first.last+tag@mail.example.co.uk", "a_b-c@host-1.io"],
    )
    def test_email_is_masked(self, email: str) -> None:
        assert redact(f"insert failed for {email}") == f"insert failed for {EMAIL_MASK}"

    def test_text_without_email_is_unchanged(self) -> None:
        text = "Updated balance for account id=42"
        assert redact(text) == text


class TestRedactingFormatter:
    """Tests for the formatter installed on the root handler."""

    def test_masks_email_in_message_arguments(self) -> None:
        formatter = RedactingFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        output = formatter.format(_record("Duplicate trader %s", ("flast@email.org",)))

        assert "flast@email.org" not in output
        assert EMAIL_MASK in output
        assert "| ERROR    | app.test |" in output

    def test_masks_email_in_traceback(self) -> None:
        formatter = RedactingFormatter(LOG_FORMAT)
        try:
            raise RuntimeError("[parameters: ('First', 'Last', 'flast@email.org')]")
        except RuntimeError:
            record = _record("create failed in persistence layer", exc_info=sys.exc_info())

        output = formatter.format(record)

        assert "RuntimeError" in output
        assert "flast@email.org" not in output


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_root_handler_redacts(self) -> None:
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert all(isinstance(h.formatter, RedactingFormatter) for h in root.handlers)

    def test_quiet_loggers_raised_to_warning(self) -> None:
        configure_logging("INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO
