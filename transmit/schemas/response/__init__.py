"""
Response schemas for API endpoints.

This module exports all response schemas for easy access.
"""

from transmit.schemas.response.data import DataResponse
from transmit.schemas.response.error import ErrorArrayResponse, ErrorInfo, ErrorResponse
from transmit.schemas.response.list import (
    ListResponse,
    PaginatedResponse,
    PaginationLinks,
    PaginationMeta,
)

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "ErrorArrayResponse",
    "ErrorInfo",
    "ListResponse",
    "PaginatedResponse",
    "PaginationLinks",
    "PaginationMeta",
]
