"""
A scope is one node of the transformation tree.

The root scope wraps the resource handed to the controller; each embedded
include gets a child scope that knows its dotted path, which is how nested
includes such as ``author.books`` are matched.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel

from transmit.transformation.resources import Collection, Item, ResourceAbstract
from transmit.transformation.transformer import TransformerAbstract


class Scope:
    """
    Transformation scope.

    Attributes:
        manager: The owning manager
        resource: Resource to transform
        scope_identifier: Include name this scope was embedded under (None at the root)
        parent_scopes: Identifiers of the enclosing scopes, outermost first
    """

    def __init__(
        self,
        manager: Any,
        resource: ResourceAbstract,
        scope_identifier: Optional[str] = None,
        parent_scopes: Sequence[str] = (),
    ):
        self.manager = manager
        self.resource = resource
        self.scope_identifier = scope_identifier
        self.parent_scopes: Tuple[str, ...] = tuple(parent_scopes)

    def get_identifier(self, append: Optional[str] = None) -> str:
        """Dotted path of this scope, optionally extended by one segment."""
        parts = [p for p in self.parent_scopes if p]
        if self.scope_identifier:
            parts.append(self.scope_identifier)
        if append:
            parts.append(append)
        return ".".join(parts)

    def get_nested_identifier(self) -> str:
        return self.get_identifier()

    def is_requested(self, segment: str) -> bool:
        return self.get_identifier(segment) in self.manager.get_requested_includes()

    def embed_child_scope(self, identifier: str, resource: ResourceAbstract) -> "Scope":
        return self.manager.create_data(resource, identifier, self)

    def to_dict(self) -> Any:
        """
        Transform the resource and shape it with the manager's serializer.

        Returns:
            The envelope (or bare data when the resource key is False)
        """
        serializer = self.manager.serializer
        resource = self.resource
        resource_key = resource.get_resource_key()

        if isinstance(resource, Collection):
            data = [self._transform(obj) for obj in resource.get_data()]
            if resource.has_paginator():
                output = serializer.collection(None, data)
                output.update(serializer.paginator(resource.get_paginator()))
                return output
            return serializer.collection(resource_key, data)

        if isinstance(resource, Item):
            data = resource.get_data()
            if data is None:
                return serializer.null()
            return serializer.item(resource_key, self._transform(data))

        raise TypeError(f"Unsupported resource type: {type(resource).__name__}")

    def _transform(self, obj: Any) -> Any:
        transformer = self.resource.get_transformer()

        if isinstance(transformer, TransformerAbstract):
            transformed = transformer.transform(obj)
            included = transformer.process_included_resources(self, obj)
            if included:
                transformed = {**transformed, **included}
            return transformed

        if isinstance(transformer, type) and issubclass(transformer, BaseModel):
            return transformer.model_validate(obj, from_attributes=True).model_dump(
                mode="json"
            )

        if callable(transformer):
            return transformer(obj)

        if transformer is None:
            return obj

        raise TypeError(
            f"Transformer must be callable, got {type(transformer).__name__}"
        )
