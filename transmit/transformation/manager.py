"""
Entry point of the transformation layer.

The manager holds the includes requested for the current request, the
parameters attached to each of them, and the serializer used to shape the
output.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Union

from transmit.transformation.param_bag import ParamBag
from transmit.transformation.resources import (
    Collection,
    Item,
    ResourceAbstract,
    ResourceKey,
)
from transmit.transformation.scope import Scope
from transmit.transformation.serializer import DataArraySerializer

# name(value) or name(value1|value2)
_PARAM_PATTERN = re.compile(r"(\w+)\(([^)]*)\)")


class Manager:
    """
    Transformation manager.

    Attributes:
        serializer: Serializer shaping the envelope
        recursion_limit: Maximum nesting depth of includes

    Example:
        ```python
        manager = Manager()
        manager.parse_includes("author.books:limit(5):sort(-created_at)")
        manager.get_requested_includes()  # ["author", "author.books"]
        manager.get_include_params("author.books")["limit"]  # "5"
        ```
    """

    def __init__(
        self,
        serializer: Optional[DataArraySerializer] = None,
        recursion_limit: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        self.serializer = serializer or DataArraySerializer()
        self.recursion_limit = recursion_limit
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )
        self.requested_includes: List[str] = []
        self.include_params: Dict[str, ParamBag] = {}

    def parse_includes(self, includes: Union[str, Iterable[str]]) -> "Manager":
        """
        Parse an include directive.

        Args:
            includes: Comma separated string or iterable of include strings

        Returns:
            The manager itself, for chaining

        Raises:
            TypeError: If includes is neither a string nor an iterable of strings
        """
        self.requested_includes = []
        self.include_params = {}

        if isinstance(includes, str):
            includes = includes.split(",")
        elif not isinstance(includes, (list, tuple, set)):
            raise TypeError(
                "Includes must be a comma separated string or a list of strings"
            )

        for include in includes:
            name, _, param_string = str(include).partition(":")
            name = self._trim_to_recursion_limit(name.strip())
            if not name:
                continue

            self._add_requested(name)
            if param_string:
                self.include_params[name] = self._parse_params(param_string)

        self.logger.debug(f"Parsed includes: {self.requested_includes}")
        return self

    def get_requested_includes(self) -> List[str]:
        return self.requested_includes

    def get_include_params(self, include: str) -> ParamBag:
        """Parameters of an include, empty when none were given."""
        return self.include_params.get(include, ParamBag())

    def item(
        self, data: Any, transformer: Any = None, resource_key: ResourceKey = None
    ) -> Item:
        return Item(data, transformer, resource_key)

    def collection(
        self, data: Any, transformer: Any = None, resource_key: ResourceKey = None
    ) -> Collection:
        return Collection(data, transformer, resource_key)

    def create_data(
        self,
        resource: ResourceAbstract,
        scope_identifier: Optional[str] = None,
        parent_scope: Optional[Scope] = None,
    ) -> Scope:
        """
        Create the scope that transforms a resource.

        Args:
            resource: Item or Collection
            scope_identifier: Include name for embedded scopes
            parent_scope: Enclosing scope for embedded scopes
        """
        parent_scopes = ()
        if parent_scope is not None:
            parent_scopes = parent_scope.parent_scopes + (
                parent_scope.scope_identifier,
            )
        return Scope(self, resource, scope_identifier, parent_scopes)

    def _add_requested(self, name: str) -> None:
        # a.b.c also requests a and a.b
        segments = name.split(".")
        for depth in range(1, len(segments) + 1):
            path = ".".join(segments[:depth])
            if path not in self.requested_includes:
                self.requested_includes.append(path)

    def _trim_to_recursion_limit(self, name: str) -> str:
        return ".".join(name.split(".")[: self.recursion_limit])

    @staticmethod
    def _parse_params(param_string: str) -> ParamBag:
        params: Dict[str, Any] = {}
        for key, raw in _PARAM_PATTERN.findall(param_string):
            values = [value.strip() for value in raw.split("|")]
            params[key] = values[0] if len(values) == 1 else values
        return ParamBag(params)
