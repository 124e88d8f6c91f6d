"""Tests for logging configuration and structured log helpers."""

import logging
from collections import Counter

import pytest

from parsebot.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from parsebot.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from parsebot.observability.logger import CorrelationIdFilter, configure_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCorrelation:
    """Tests for correlation ID context."""

    def test_set_explicit_id(self) -> None:
        """Given ID is stored and returned."""
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()

    def test_set_generates_id(self) -> None:
        """Missing ID is generated."""
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_clear(self) -> None:
        """Cleared context returns an empty string."""
        set_correlation_id("req-2")
        clear_correlation_id()
        assert get_correlation_id() == ""


class TestSafeLogValue:
    """Tests for safe_log_value."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_collections_are_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value((1,)) == "tuple(1 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_strings_are_truncated(self) -> None:
        value = safe_log_value("q" * 300, max_length=10)
        assert value.startswith("q" * 10 + "... (truncated, 300 total)")

    def test_numbers(self) -> None:
        assert safe_log_value(42) == "42"

    def test_whitespace_is_collapsed(self) -> None:
        assert safe_log_value("where do\n  fish\tlive") == "where do fish live"

    def test_counter_is_summarized(self) -> None:
        assert safe_log_value(Counter({"fish": 2})) == "Counter(1 keys)"


class TestLogHelpers:
    """Tests for log_with_context and log_exception_with_context."""

    def test_context_attached_to_record(self, caplog) -> None:
        logger = logging.getLogger("parsebot.test")

        with caplog.at_level(logging.INFO, logger="parsebot.test"):
            log_with_context(logger, logging.INFO, "Stored", session_id="s1", chunks=[1, 2])

        record = caplog.records[-1]
        assert record.getMessage() == "Stored"
        assert record.session_id == "s1"
        assert record.chunks == "list(2 items)"

    def test_exception_context(self, caplog) -> None:
        logger = logging.getLogger("parsebot.test")

        with caplog.at_level(logging.ERROR, logger="parsebot.test"):
            try:
                raise RuntimeError("boom")
            except RuntimeError as e:
                log_exception_with_context(logger, "Failed", e, session_id="s1")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "boom"
        assert record.exc_info is not None


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_stdout_handler(self, restore_root_logger) -> None:
        configure_logging("debug")
        configure_logging("warning")

        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_filter_adds_correlation_id(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        set_correlation_id("req-3")
        CorrelationIdFilter().filter(record)
        clear_correlation_id()

        assert record.correlation_id == "req-3"
