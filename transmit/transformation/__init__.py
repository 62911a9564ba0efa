"""
Resource transformation layer.

Turns domain objects into plain dictionaries through caller supplied
transformers, embeds requested relations and wraps the result in the
response envelope.

Usage:
    manager = Manager()
    manager.parse_includes("author,comments:limit(5)")
    resource = manager.item(book, BookTransformer())
    payload = manager.create_data(resource).to_dict()
"""

from transmit.transformation.manager import Manager
from transmit.transformation.param_bag import ParamBag
from transmit.transformation.resources import Collection, Item, ResourceAbstract
from transmit.transformation.scope import Scope
from transmit.transformation.serializer import DataArraySerializer
from transmit.transformation.transformer import TransformerAbstract

__all__ = [
    "Manager",
    "ParamBag",
    "ResourceAbstract",
    "Item",
    "Collection",
    "Scope",
    "DataArraySerializer",
    "TransformerAbstract",
]
