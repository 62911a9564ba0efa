"""
Logger configuration for Transmit.

Library modules log through ``logging.getLogger(__name__)``; everything below
the ``transmit`` logger can be routed to stdout with ``configure_logging``.
Application code gets its own configured loggers from ``get_logger``.
"""

import logging
import sys
from typing import Any, Dict, Optional

from transmit.config.base import BaseAppSettings
from transmit.logging.formatters import JsonFormatter

# Type alias for Python's standard logger
Logger = logging.Logger

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_LOGGER = "transmit"


def _resolve_level(level: str, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    return getattr(logging, str(level).upper(), logging.INFO)


def _stdout_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _options_from(settings: Optional[BaseAppSettings]) -> Dict[str, Any]:
    if settings is None:
        return {"level": "INFO", "debug": False, "json_format": False}
    return {
        "level": getattr(settings, "LOG_LEVEL", "INFO"),
        "debug": bool(getattr(settings, "DEBUG", False)),
        "json_format": bool(getattr(settings, "LOG_JSON_FORMAT", False)),
    }


def setup_logger(
    name: str,
    level: str = "INFO",
    format: str = DEFAULT_FORMAT,
    debug: bool = False,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure a logger writing to stdout.

    Handlers previously attached to the logger are replaced.

    Args:
        name: Logger name (usually __name__)
        level: Level name; unknown names fall back to INFO
        format: Line format, unused for JSON output
        debug: Force the DEBUG level
        json_format: Emit JSON lines

    Returns:
        The configured logger
    """
    log_level = _resolve_level(level, debug)
    formatter = JsonFormatter() if json_format else logging.Formatter(format)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(_stdout_handler(log_level, formatter))
    return logger


def get_logger(
    name: str, settings: Optional[BaseAppSettings] = None, json_format: bool = False
) -> logging.Logger:
    """
    Get a logger configured from settings.

    ``LOG_LEVEL``, ``DEBUG`` and ``LOG_JSON_FORMAT`` are read when settings are
    given; ``json_format=True`` forces JSON output either way.
    """
    options = _options_from(settings)
    options["json_format"] = options["json_format"] or json_format
    return setup_logger(name, **options)


def configure_logging(settings: Optional[BaseAppSettings] = None) -> logging.Logger:
    """
    Route the library's own log records (controller, manager, query helpers).

    JSON lines carry the application name.

    Args:
        settings: Application settings

    Returns:
        The ``transmit`` package logger
    """
    options = _options_from(settings)
    log_level = _resolve_level(options["level"], options["debug"])
    if options["json_format"]:
        app_name = settings.APP_NAME if settings is not None else "Transmit"
        formatter: logging.Formatter = JsonFormatter({"app": app_name})
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(_stdout_handler(log_level, formatter))
    return logger


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
    settings: Optional[BaseAppSettings] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Return the given logger, or create one named ``name`` from settings.

    Raises:
        ValueError: If neither a logger nor a name is given
    """
    if logger:
        return logger

    if not name:
        raise ValueError("A logger name is required when no logger is given")

    return get_logger(name, settings, json_format)
