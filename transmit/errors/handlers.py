"""
Exception handlers for FastAPI applications.

This module converts exceptions into the same error envelopes the controller
responders produce.
"""

import traceback
from functools import partial
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from transmit.errors.exceptions import InternalError, TransmitError
from transmit.logging import Logger, ensure_logger
from transmit.schemas import ErrorArrayResponse, ErrorInfo, ErrorResponse


def create_error_payload(http_code: int, message: str) -> Dict[str, Any]:
    """
    Create a single error envelope.

    Args:
        http_code: HTTP status code
        message: Error message

    Returns:
        ``{"errors": {"http_code": ..., "message": ...}}``
    """
    response = ErrorResponse(errors=ErrorInfo(http_code=http_code, message=message))
    return response.model_dump()


def _collect_field_errors(errors_data: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Build a field-keyed error mapping from validation errors data.

    The ``body``/``query``/``header`` location prefix is dropped; repeated
    fields keep their first message.
    """
    errors: Dict[str, Any] = {}

    for error in errors_data:
        loc = list(error.get("loc", []))
        if loc and loc[0] in ("body", "query", "header", "path", "cookie"):
            loc = loc[1:]
        field_path = ".".join(str(item) for item in loc) or "request"
        errors.setdefault(field_path, error.get("msg", "Validation error"))

    return errors


async def transmit_error_handler(request: Request, exc: TransmitError) -> JSONResponse:
    """
    Handler for TransmitError and its subclasses.

    Args:
        request: FastAPI request
        exc: TransmitError instance

    Returns:
        JSON response with the error envelope
    """
    return JSONResponse(
        status_code=exc.http_code,
        content=create_error_payload(exc.http_code, exc.message),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handler for FastAPI's RequestValidationError.

    Renders the multi-field error envelope with status 422.
    """
    response = ErrorArrayResponse(errors=_collect_field_errors(exc.errors()))

    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(response),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic exception handler for unhandled exceptions.

    Args:
        request: FastAPI request
        exc: Unhandled exception
        logger: Optional logger to use instead of default logging

    Returns:
        JSON response with the internal error envelope
    """
    log = ensure_logger(logger, __name__)
    log.error(f"Unhandled exception: {str(exc)}")
    log.error(traceback.format_exc())

    error = InternalError()
    return JSONResponse(
        status_code=error.http_code,
        content=create_error_payload(error.http_code, error.message),
    )


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging unhandled exceptions
    """
    # Subclasses are dispatched to the base handler
    app.exception_handler(TransmitError)(transmit_error_handler)

    app.exception_handler(RequestValidationError)(validation_exception_handler)

    global_handler = partial(unhandled_exception_handler, logger=logger)
    app.exception_handler(Exception)(global_handler)
