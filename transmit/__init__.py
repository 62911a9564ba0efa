"""
Transmit - JSON API responses for FastAPI with minimal boilerplate.

This package provides a base controller that wraps transformed items,
collections and paginated collections in a JSON envelope, a fixed catalogue
of error responses, and helpers applying limit / offset / sort parameters to
SQLAlchemy queries.

Usage:
    from fastapi import Depends, FastAPI
    from transmit import Controller, configure_app

    app = FastAPI()
    configure_app(app)
"""

__version__ = "0.1.0"

# Public API exports
from transmit.api import (
    Controller,
    Paginator,
    QueryHelperMixin,
    QueryParameters,
    apply_parameters,
    paginate_query,
)
from transmit.config import BaseAppSettings, get_settings
from transmit.errors import TransmitError, setup_errors
from transmit.factory import configure_app
from transmit.logging import get_logger
from transmit.transformation import Manager, ParamBag, TransformerAbstract
