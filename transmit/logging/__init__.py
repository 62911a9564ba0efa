"""
Logging module for Transmit.

This module provides a simple logging interface
that integrates with application settings.

Limitations:
- Only console (stdout) logging is supported out of the box.
- JSON lines carry timestamp, level, logger name, message and optional static fields.
"""

from transmit.logging.formatters import JsonFormatter
from transmit.logging.manager import (
    Logger,
    configure_logging,
    ensure_logger,
    get_logger,
    setup_logger,
)

__all__ = [
    "Logger",
    "configure_logging",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "JsonFormatter",
]
