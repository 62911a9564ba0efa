"""
Error handling module for Transmit.

This module provides the exception hierarchy behind the error envelope and the
FastAPI exception handlers that render it.

Limitations:
- Error response structure is fixed; customization requires code changes.
- No built-in support for localization or multiple languages.
"""

from transmit.errors.exceptions import (
    ForbiddenError,
    InternalError,
    NotFoundError,
    TransmitError,
    UnauthorizedError,
    UnprocessableEntityError,
    WrongArgumentsError,
)
from transmit.errors.handlers import (
    create_error_payload,
    register_exception_handlers,
)
from transmit.errors.manager import setup_errors

__all__ = [
    # Main setup function
    "setup_errors",
    # Handler registration
    "register_exception_handlers",
    "create_error_payload",
    # Exception classes
    "TransmitError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "WrongArgumentsError",
]
