"""
API utilities for FastAPI applications.

This module provides the response controller base class together with the
query parameter applier and the paginator it relies on.
"""

from transmit.api.controller import Controller
from transmit.api.pagination import Paginator, paginate_query
from transmit.api.query import QueryHelperMixin, QueryParameters, apply_parameters
from transmit.api.sorting import SortDirection, SortField

__all__ = [
    "Controller",
    "Paginator",
    "paginate_query",
    "QueryHelperMixin",
    "QueryParameters",
    "apply_parameters",
    "SortDirection",
    "SortField",
]
