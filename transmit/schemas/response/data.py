"""
Data response schema for single-item responses.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """
    Schema for single-item API responses.

    Attributes:
        data: The transformed item
    """

    data: T = Field(..., description="Transformed item")
