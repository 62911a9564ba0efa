"""
Serializer shaping transformed data into the response envelope.
"""

from typing import Any, Dict, List, Optional

from transmit.transformation.resources import ResourceKey


class DataArraySerializer:
    """
    Wraps items and collections under a ``data`` key.

    Passing ``False`` as resource key keeps the transformed data at the top
    level instead.
    """

    def item(self, resource_key: ResourceKey, data: Optional[Dict[str, Any]]) -> Any:
        if resource_key is False:
            return data
        return {"data": data}

    def collection(self, resource_key: ResourceKey, data: List[Any]) -> Any:
        if resource_key is False:
            return data
        return {"data": data}

    def null(self) -> None:
        return None

    def paginator(self, paginator: Any) -> Dict[str, Any]:
        """
        Build the pagination block.

        Args:
            paginator: Object exposing ``to_meta()`` returning ``PaginationMeta``
        """
        return {"pagination": paginator.to_meta().to_dict()}
