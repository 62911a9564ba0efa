"""
Pagination utilities.

This module provides a length-aware paginator and a helper running the count
and page queries for a SQLAlchemy ORM query.
"""

from math import ceil
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import urlencode

from transmit.errors import WrongArgumentsError
from transmit.schemas import PaginationLinks, PaginationMeta


class Paginator:
    """
    One page of a larger result set.

    Attributes:
        items: Items on the current page
        total: Total number of items across all pages
        per_page: Maximum items per page
        current_page: Current page number (1-indexed)
        path: Base URL used for page links
        page_name: Query parameter carrying the page number
        query: Extra query parameters carried by page links

    Example:
        ```python
        paginator = Paginator(items, total=25, per_page=10, current_page=2,
                              path="http://api.test/books")
        paginator.appends({"include": "author"})
        paginator.next_page_url()  # http://api.test/books?include=author&page=3
        ```
    """

    def __init__(
        self,
        items: Iterable[Any],
        total: int,
        per_page: int,
        current_page: int = 1,
        path: str = "",
        page_name: str = "page",
    ):
        if per_page < 1:
            raise WrongArgumentsError("The page size must be a positive integer")

        self.items: List[Any] = list(items)
        self.total = max(int(total), 0)
        self.per_page = int(per_page)
        self.current_page = max(int(current_page), 1)
        self.path = path
        self.page_name = page_name
        self.query: Dict[str, Any] = {}

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def last_page(self) -> int:
        return max(int(ceil(self.total / self.per_page)), 1)

    def get_collection(self) -> List[Any]:
        return self.items

    def appends(self, params: Optional[Mapping[str, Any]] = None) -> "Paginator":
        """
        Add query parameters to every page link.

        The page parameter itself is never carried over.

        Returns:
            The paginator itself, for chaining
        """
        for key, value in (params or {}).items():
            if key != self.page_name:
                self.query[key] = value
        return self

    def url(self, page: int) -> str:
        params = dict(self.query)
        params[self.page_name] = max(int(page), 1)
        return f"{self.path}?{urlencode(params, doseq=True)}"

    def previous_page_url(self) -> Optional[str]:
        if self.current_page > 1:
            return self.url(self.current_page - 1)
        return None

    def next_page_url(self) -> Optional[str]:
        if self.current_page < self.last_page:
            return self.url(self.current_page + 1)
        return None

    def to_meta(self) -> PaginationMeta:
        """
        Describe the page.

        Returns:
            PaginationMeta with links to the neighbouring pages that exist
        """
        return PaginationMeta(
            total=self.total,
            count=self.count,
            per_page=self.per_page,
            current_page=self.current_page,
            total_pages=self.last_page,
            links=PaginationLinks(
                previous=self.previous_page_url(), next=self.next_page_url()
            ),
        )


def paginate_query(
    query: Any,
    per_page: int,
    page: int = 1,
    path: str = "",
    page_name: str = "page",
) -> Paginator:
    """
    Run the count and page queries for a SQLAlchemy ORM query.

    Args:
        query: ``sqlalchemy.orm.Query``
        per_page: Maximum items per page
        page: Page number (1-indexed)
        path: Base URL used for page links
        page_name: Query parameter carrying the page number

    Returns:
        Paginator for the requested page
    """
    if per_page < 1:
        raise WrongArgumentsError("The page size must be a positive integer")

    page = max(int(page), 1)
    total = query.order_by(None).count()
    items = query.limit(per_page).offset((page - 1) * per_page).all()

    return Paginator(items, total, per_page, page, path=path, page_name=page_name)
