"""
Base class for transformers with embeddable relations.
"""

from typing import Any, Dict, List, Optional, Sequence

from transmit.transformation.resources import Collection, Item, ResourceKey


class TransformerAbstract:
    """
    Transformer turning one object into a dictionary.

    Subclasses implement ``transform`` and, for every relation they list in
    ``available_includes`` or ``default_includes``, an ``include_<name>``
    method taking the object and the include's ``ParamBag`` and returning an
    ``Item``, a ``Collection`` or ``None``.

    Example:
        ```python
        class BookTransformer(TransformerAbstract):
            available_includes = ("author",)

            def transform(self, book):
                return {"id": book.id, "title": book.title}

            def include_author(self, book, params):
                return self.item(book.author, AuthorTransformer())
        ```
    """

    available_includes: Sequence[str] = ()
    default_includes: Sequence[str] = ()

    def transform(self, obj: Any) -> Dict[str, Any]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement transform()"
        )

    def __call__(self, obj: Any) -> Dict[str, Any]:
        return self.transform(obj)

    def item(
        self, data: Any, transformer: Any, resource_key: ResourceKey = None
    ) -> Item:
        return Item(data, transformer, resource_key)

    def collection(
        self, data: Any, transformer: Any, resource_key: ResourceKey = None
    ) -> Collection:
        return Collection(data, transformer, resource_key)

    def figure_out_which_includes(self, scope: Any) -> List[str]:
        """
        Default includes, then available includes requested at this scope.
        """
        includes = list(self.default_includes)
        for include in self.available_includes:
            if include not in includes and scope.is_requested(include):
                includes.append(include)
        return includes

    def process_included_resources(self, scope: Any, data: Any) -> Dict[str, Any]:
        """
        Resolve and serialize the includes for one object.

        Args:
            scope: Scope the object is being transformed in
            data: The object being transformed

        Returns:
            Mapping of include name to its serialized output
        """
        included: Dict[str, Any] = {}

        for include in self.figure_out_which_includes(scope):
            resource = self.call_include_method(scope, include, data)
            if resource is None:
                included[include] = scope.manager.serializer.null()
                continue
            child_scope = scope.embed_child_scope(include, resource)
            included[include] = child_scope.to_dict()

        return included

    def call_include_method(self, scope: Any, include: str, data: Any) -> Optional[Any]:
        params = scope.manager.get_include_params(scope.get_identifier(include))
        method_name = "include_" + include.replace("-", "_")
        method = getattr(self, method_name, None)
        if method is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} lists include '{include}' "
                f"but defines no {method_name}() method"
            )
        return method(data, params)
