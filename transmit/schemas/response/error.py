"""
Error response schemas.

Two shapes are emitted: a single error carrying its HTTP code and message,
and a field-keyed mapping of validation messages.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ErrorInfo(BaseModel):
    """
    Single error description.

    Attributes:
        http_code: HTTP status code of the response
        message: Human-readable error message
    """

    http_code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """
    Schema for single error responses.

    Attributes:
        errors: The error description
    """

    errors: ErrorInfo


class ErrorArrayResponse(BaseModel):
    """
    Schema for multi-field error responses.

    Attributes:
        errors: Mapping of field name to message(s), passed through unchanged
    """

    errors: Dict[str, Any] = Field(
        default_factory=dict, description="Field-keyed error messages"
    )
