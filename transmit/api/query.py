"""
Applying limit, offset and sort parameters to a query builder.

Parameters usually arrive as the ``ParamBag`` of an include
(``?include=books:limit(5):offset(2):sort(-created_at)``) and are applied by
the transformer that loads the relation.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from transmit.api.sorting import SortField
from transmit.errors import WrongArgumentsError

logger = logging.getLogger(__name__)

RECOGNIZED_PARAMETERS = ("limit", "offset", "sort")


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _parse_count(name: str, raw: Any) -> Optional[int]:
    raw = _first(raw)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise WrongArgumentsError(f"The {name} parameter must be an integer, got '{raw}'")
    if value < 0:
        raise WrongArgumentsError(f"The {name} parameter must not be negative")
    return value


class QueryParameters(BaseModel):
    """
    Recognized query parameters.

    Attributes:
        limit: Maximum number of rows
        offset: Number of rows to skip
        sort: Column and direction to order by
    """

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    sort: Optional[SortField] = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @classmethod
    def from_bag(cls, bag: Optional[Mapping[str, Any]] = None) -> "QueryParameters":
        """
        Parse a parameter bag.

        Args:
            bag: Mapping such as a ParamBag; unrecognized keys are ignored

        Returns:
            QueryParameters instance, empty when the bag is absent or empty

        Raises:
            WrongArgumentsError: If limit or offset is not a non-negative integer
        """
        if not bag:
            return cls()

        values = {}
        for name in ("limit", "offset"):
            parsed = _parse_count(name, bag.get(name))
            if parsed is not None:
                values[name] = parsed

        raw_sort = _first(bag.get("sort"))
        if raw_sort:
            sort = SortField.parse(str(raw_sort))
            if sort.field:
                values["sort"] = sort

        return cls(**values)

    def is_empty(self) -> bool:
        return self.limit is None and self.offset is None and self.sort is None

    def apply(self, builder: Any, model: Any = None) -> Any:
        """
        Apply the parameters to a builder.

        The builder must expose ``order_by``, ``limit`` and ``offset``, each
        returning the (possibly new) builder, as SQLAlchemy queries do.
        Ordering is applied before limit and offset; legacy ORM queries
        reject ORDER BY once a LIMIT or OFFSET is set.

        Args:
            builder: Query builder
            model: Optional model class used to resolve the sort column

        Returns:
            The modified builder
        """
        if self.sort is not None:
            clause = self.sort.to_clause(model)
            if clause is None:
                logger.debug(f"Ignoring sort on unknown field '{self.sort.field}'")
            else:
                builder = builder.order_by(clause)

        if self.limit is not None:
            builder = builder.limit(self.limit)

        if self.offset is not None:
            builder = builder.offset(self.offset)

        return builder


def apply_parameters(
    builder: Any,
    params: Optional[Union[QueryParameters, Mapping[str, Any]]] = None,
    model: Any = None,
) -> Any:
    """
    Apply limit, offset and sort parameters to a query builder.

    Args:
        builder: Query builder
        params: ParamBag, plain mapping or QueryParameters
        model: Optional model class used to resolve the sort column

    Returns:
        The builder, unchanged when no parameters are given

    Example:
        ```python
        query = session.query(Book)
        query = apply_parameters(query, ParamBag({"limit": "5", "sort": "-id"}), Book)
        ```
    """
    if not params:
        return builder

    if not isinstance(params, QueryParameters):
        params = QueryParameters.from_bag(params)

    if params.is_empty():
        return builder

    return params.apply(builder, model)


class QueryHelperMixin:
    """
    Gives transformers an ``apply_parameters`` method for their include methods.

    Example:
        ```python
        class AuthorTransformer(QueryHelperMixin, TransformerAbstract):
            available_includes = ("books",)

            def include_books(self, author, params):
                query = self.apply_parameters(author.books_query, params, Book)
                return self.collection(query.all(), BookTransformer())
        ```
    """

    def apply_parameters(
        self,
        builder: Any,
        params: Optional[Union[QueryParameters, Mapping[str, Any]]] = None,
        model: Any = None,
    ) -> Any:
        return apply_parameters(builder, params, model)
