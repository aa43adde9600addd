"""
Test suite for logging configuration and correlation ids.

System role: Verification of observability helpers
"""

import logging

import pytest

from docqa.observability import configure_logging, get_correlation_id, set_correlation_id
from docqa.observability.correlation import clear_correlation_id
from docqa.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_correlation_id()


def test_set_correlation_id_should_generate_when_missing() -> None:
    # Act
    value = set_correlation_id()

    # Assert
    assert value
    assert get_correlation_id() == value


def test_clear_correlation_id_should_reset_context() -> None:
    # Arrange
    set_correlation_id("req-1")

    # Act
    clear_correlation_id()

    # Assert
    assert get_correlation_id() == ""


def test_filter_should_attach_correlation_id() -> None:
    # Arrange
    set_correlation_id("req-42")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    # Act
    CorrelationIdFilter().filter(record)

    # Assert
    assert record.correlation_id == "req-42"


def test_configure_logging_should_install_single_handler() -> None:
    # Act
    configure_logging("debug")
    configure_logging("warning")

    # Assert
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert logging.getLogger("botocore").level == logging.WARNING
