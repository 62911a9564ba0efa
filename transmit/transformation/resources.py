"""
Resources wrap the data handed to the manager together with its transformer.
"""

from typing import Any, Iterable, Optional, Union

ResourceKey = Union[str, bool, None]


class ResourceAbstract:
    """
    Base class for resources.

    Attributes:
        data: The object (or objects) to transform
        transformer: Callable, pydantic model class or TransformerAbstract
        resource_key: ``None`` wraps the output in ``data``, ``False`` emits it bare
    """

    def __init__(
        self,
        data: Any = None,
        transformer: Any = None,
        resource_key: ResourceKey = None,
    ):
        self.data = data
        self.transformer = transformer
        self.resource_key = resource_key

    def get_data(self) -> Any:
        return self.data

    def get_transformer(self) -> Any:
        return self.transformer

    def get_resource_key(self) -> ResourceKey:
        return self.resource_key


class Item(ResourceAbstract):
    """A single object."""


class Collection(ResourceAbstract):
    """
    An ordered sequence of objects, optionally one page of a larger set.
    """

    def __init__(
        self,
        data: Optional[Iterable[Any]] = None,
        transformer: Any = None,
        resource_key: ResourceKey = None,
    ):
        super().__init__(list(data or []), transformer, resource_key)
        self.paginator = None

    def set_paginator(self, paginator: Any) -> "Collection":
        """
        Attach the paginator describing the page this collection holds.

        Returns:
            The collection itself, for chaining
        """
        self.paginator = paginator
        return self

    paginate_with = set_paginator

    def get_paginator(self) -> Any:
        return self.paginator

    def has_paginator(self) -> bool:
        return self.paginator is not None
