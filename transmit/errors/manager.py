"""
Entry point for error handling.
"""

from typing import Optional

from fastapi import FastAPI

from transmit.config.base import BaseAppSettings
from transmit.errors.handlers import register_exception_handlers
from transmit.logging import Logger, ensure_logger


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    logger: Optional[Logger] = None,
) -> None:
    """
    Render exceptions raised by routes as error envelopes.

    ``TransmitError`` keeps its status and message, request validation
    failures become a 422 field map, anything else a logged 500.

    Args:
        app: FastAPI application instance
        settings: Used to build a logger when none is given
        logger: Logger receiving unhandled exceptions
    """
    log = ensure_logger(logger, __name__, settings)
    register_exception_handlers(app, logger=log)
    log.debug("Registered error envelope handlers")
