"""
Wiring Transmit into a FastAPI application.

The application is created by the caller; ``configure_app`` only fills in
identity from settings, routes the library's log records and registers the
handlers that render exceptions as error envelopes.
"""

from typing import Optional

from fastapi import FastAPI

from transmit.config import BaseAppSettings, get_settings
from transmit.errors import setup_errors
from transmit.logging import configure_logging

# Values FastAPI assigns when the caller gives none
FASTAPI_DEFAULT_TITLE = "FastAPI"
FASTAPI_DEFAULT_VERSION = "0.1.0"


def configure_app(app: FastAPI, settings: Optional[BaseAppSettings] = None) -> None:
    """
    Configure a FastAPI application for Transmit controllers.

    A title or version passed to ``FastAPI(...)`` is kept; FastAPI's own
    defaults are replaced by ``APP_NAME`` and ``VERSION``.

    Args:
        app: The FastAPI application to configure
        settings: Application settings, loaded from the environment when omitted
    """
    app_settings = settings or get_settings()
    logger = configure_logging(app_settings)

    if app.title in ("", FASTAPI_DEFAULT_TITLE):
        app.title = app_settings.APP_NAME
    if app.version in ("", FASTAPI_DEFAULT_VERSION):
        app.version = app_settings.VERSION
    app.debug = app_settings.DEBUG

    setup_errors(app, app_settings, logger)
    logger.debug(f"Configured {app.title} {app.version} (debug={app.debug})")
