"""Tests for error helpers."""

import logging

import pytest

from pendant_demo.errors import (
    IllegalArgument,
    describe_error,
    exception_message,
    log_and_continue,
)


class TestExceptionMessage:
    """Tests for exception_message() and describe_error()."""

    def test_exception_message_with_text(self):
        """Test 'Class:message' form."""
        assert exception_message(ValueError("bad port")) == "ValueError:bad port"

    def test_exception_message_without_text(self):
        """Test that the class name alone is used when there is no message."""
        assert exception_message(TimeoutError()) == "TimeoutError"

    def test_exception_message_illegal_argument(self):
        """Test that IllegalArgument reports its msg."""
        assert exception_message(IllegalArgument("no such item")) == (
            "IllegalArgument:no such item"
        )

    def test_describe_error(self):
        """Test 'Class - message' form."""
        assert describe_error(ConnectionRefusedError("refused")) == (
            "ConnectionRefusedError - refused"
        )
        assert describe_error(TimeoutError()) == "TimeoutError"


class TestLogAndContinue:
    """Tests for log_and_continue()."""

    def test_suppresses_and_logs(self, caplog):
        """Test that failures are suppressed with a WARNING record."""
        with caplog.at_level(logging.WARNING):
            with log_and_continue("writing the network error"):
                raise IllegalArgument("gone")

        assert "Suppressed failure while writing the network error" in caplog.text
        assert "IllegalArgument:gone" in caplog.text

    def test_passes_through_without_error(self, caplog):
        """Test that nothing is logged on success."""
        with caplog.at_level(logging.WARNING):
            with log_and_continue("noop"):
                pass

        assert caplog.records == []

    def test_does_not_suppress_base_exceptions(self):
        """Test that cancellation-like exceptions still propagate."""
        with pytest.raises(KeyboardInterrupt):
            with log_and_continue("noop"):
                raise KeyboardInterrupt
