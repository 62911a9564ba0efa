"""
List response schemas for collections and paginated collections.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationLinks(BaseModel):
    """
    Links to neighbouring pages.

    Attributes:
        previous: URL of the previous page, omitted on the first page
        next: URL of the next page, omitted on the last page
    """

    previous: Optional[str] = Field(default=None, description="Previous page URL")
    next: Optional[str] = Field(default=None, description="Next page URL")

    model_config = ConfigDict(extra="forbid")


class PaginationMeta(BaseModel):
    """
    Pagination block of a paginated collection.

    Attributes:
        total: Total number of items across all pages
        count: Number of items on this page
        per_page: Maximum items per page
        current_page: Current page number (1-indexed)
        total_pages: Number of the last page
        links: Neighbouring page URLs
    """

    total: int = Field(..., ge=0, description="Total number of items")
    count: int = Field(..., ge=0, description="Number of items on this page")
    per_page: int = Field(..., ge=1, description="Maximum items per page")
    current_page: int = Field(..., ge=1, description="Current page number")
    total_pages: int = Field(..., ge=1, description="Number of pages")
    links: PaginationLinks = Field(default_factory=PaginationLinks)

    def to_dict(self) -> dict:
        """Dump the block with unset links left out."""
        data = self.model_dump(exclude={"links"})
        data["links"] = self.links.model_dump(exclude_none=True)
        return data


class ListResponse(BaseModel, Generic[T]):
    """
    Schema for collection API responses.

    Attributes:
        data: The transformed items, in input order
    """

    data: List[T] = Field(default_factory=list, description="Transformed items")


class PaginatedResponse(ListResponse[T], Generic[T]):
    """
    Schema for paginated collection API responses.

    Attributes:
        data: The transformed items of the current page
        pagination: Pagination block
    """

    pagination: PaginationMeta
