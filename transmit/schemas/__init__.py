"""
Envelope schemas for JSON API responses.

These pydantic models describe the bodies the controller emits and double as
``response_model`` declarations for FastAPI routes.
"""

from transmit.schemas.response import (
    DataResponse,
    ErrorArrayResponse,
    ErrorInfo,
    ErrorResponse,
    ListResponse,
    PaginatedResponse,
    PaginationLinks,
    PaginationMeta,
)

__all__ = [
    "DataResponse",
    "ListResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationLinks",
    "ErrorInfo",
    "ErrorResponse",
    "ErrorArrayResponse",
]
