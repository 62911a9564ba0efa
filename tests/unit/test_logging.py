"""
Unit tests for the logging module.

Covers:
- Logger creation and retrieval (get_logger, ensure_logger)
- Logger configuration (setup_logger)
- JSON formatter output (JsonFormatter)
"""

import json
import logging
import sys

import pytest

from transmit.config import BaseAppSettings, ProductionSettings
from transmit.logging import (
    JsonFormatter,
    configure_logging,
    ensure_logger,
    get_logger,
    setup_logger,
)


@pytest.fixture
def quiet_settings():
    return BaseAppSettings(LOG_LEVEL="WARNING")


def test_get_logger_returns_logger(quiet_settings):
    """Test that the level comes from settings."""
    logger = get_logger("test.module", quiet_settings)
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test.module"
    assert logger.level == logging.WARNING


def test_get_logger_without_settings():
    """Test the defaults without settings."""
    logger = get_logger("test.defaults")
    assert logger.level == logging.INFO
    assert isinstance(logger.handlers[0].formatter, logging.Formatter)
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_get_logger_debug_settings_win_over_level():
    """Test that DEBUG forces the debug level."""
    settings = BaseAppSettings(DEBUG=True, LOG_LEVEL="ERROR")
    logger = get_logger("test.debug", settings)
    assert logger.level == logging.DEBUG


def test_get_logger_json_from_settings():
    """Test that LOG_JSON_FORMAT selects the JSON formatter."""
    logger = get_logger("test.json", ProductionSettings())
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_ensure_logger_returns_existing_logger(quiet_settings):
    """Test that a given logger is returned as is."""
    logger = logging.getLogger("test.existing")
    assert ensure_logger(logger, "ignored", quiet_settings) is logger


def test_ensure_logger_creates_new_logger(quiet_settings):
    """Test that a named logger is created when none is given."""
    ensured = ensure_logger(None, "test.ensure", quiet_settings)
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure"


def test_ensure_logger_raises_without_name():
    """Test that a name is required without a logger."""
    with pytest.raises(ValueError):
        ensure_logger()


def test_setup_logger_removes_existing_handlers():
    """Test that handlers are replaced, not added."""
    logger = logging.getLogger("test.handler")
    logger.handlers.clear()
    logger.addHandler(logging.StreamHandler())

    setup_logger("test.handler")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stdout


def test_setup_logger_invalid_level():
    """Test that an unknown level falls back to INFO."""
    logger = setup_logger("test.invalid", level="NOTALEVEL")
    assert logger.level == logging.INFO


def test_json_formatter_output():
    """Test the fields of a JSON line."""
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="transmit.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Fetched page %d",
        args=(2,),
        exc_info=None,
    )

    data = json.loads(formatter.format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "transmit.test"
    assert data["message"] == "Fetched page 2"
    assert "timestamp" in data
    assert "exception" not in data


def test_json_formatter_includes_exception():
    """Test that the traceback is included."""
    formatter = JsonFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            name="transmit.test",
            level=logging.ERROR,
            pathname=__file__,
            lineno=20,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )

    data = json.loads(formatter.format(record))
    assert "RuntimeError: boom" in data["exception"]


def test_json_formatter_static_fields():
    """Test that static fields appear on every line."""
    formatter = JsonFormatter({"app": "Library"})
    record = logging.LogRecord("transmit", logging.INFO, __file__, 1, "hi", (), None)
    data = json.loads(formatter.format(record))
    assert data["app"] == "Library"
    assert data["message"] == "hi"


def test_configure_logging_targets_package_logger():
    """Test that library loggers inherit the configured level."""
    logger = configure_logging(BaseAppSettings(LOG_LEVEL="ERROR"))

    assert logger.name == "transmit"
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1
    assert logging.getLogger("transmit.api.controller").getEffectiveLevel() == logging.ERROR


def test_configure_logging_json_lines_carry_app_name():
    """Test that JSON lines carry the application name."""
    logger = configure_logging(ProductionSettings(APP_NAME="Library"))
    formatter = logger.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter)
    assert formatter.static_fields == {"app": "Library"}
